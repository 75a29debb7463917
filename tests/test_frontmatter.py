"""Tests for front matter splitting and merging."""

from hugo_sync.transforms.frontmatter import (
    FrontMatterBlock,
    merge,
    new_front_matter,
    quote,
    render_tags,
)

DATE = "2024-01-15T08:30:00.000Z"


def block_of(text):
    block, _ = FrontMatterBlock.split(text)
    assert block is not None
    return block


class TestRendering:
    """Tests for field rendering."""

    def test_render_tags(self):
        assert render_tags(["a", "b c"]) == 'tags: ["a", "b c"]'

    def test_render_empty_tags(self):
        assert render_tags([]) == "tags: []"

    def test_quote_escapes(self):
        assert quote('say "hi"') == '"say \\"hi\\""'

    def test_new_front_matter(self):
        assert new_front_matter("My Note", DATE, ["x"]) == [
            "---",
            'title: "My Note"',
            f"date: {DATE}",
            "draft: false",
            'tags: ["x"]',
            "---",
        ]


class TestSplit:
    """Tests for FrontMatterBlock.split."""

    def test_no_front_matter(self):
        block, body = FrontMatterBlock.split("# Title\ntext")
        assert block is None
        assert body == "# Title\ntext"

    def test_unclosed_front_matter_is_body(self):
        block, body = FrontMatterBlock.split("---\ntitle: x\nno close")
        assert block is None
        assert body == "---\ntitle: x\nno close"

    def test_delimiter_must_be_first_line(self):
        block, _ = FrontMatterBlock.split("intro\n---\ntitle: x\n---")
        assert block is None

    def test_split(self):
        block, body = FrontMatterBlock.split('---\ntitle: "Old"\nauthor: me\n---\nBody\n')
        assert block.lines == ['title: "Old"', "author: me"]
        assert body == "Body\n"


class TestExistingTags:
    """Tests for parsing the tags field of an existing block."""

    def test_inline_list(self):
        block = block_of('---\ntags: ["a", \'b\', c]\n---\n')
        assert block.existing_tags() == ["a", "b", "c"]

    def test_list_items(self):
        block = block_of('---\ntags:\n  - one\n  - "two"\nauthor: me\n---\n')
        assert block.existing_tags() == ["one", "two"]

    def test_bracket_line_after_bare_tags(self):
        block = block_of("---\ntags:\n[x, y]\n---\n")
        assert block.existing_tags() == ["x", "y"]

    def test_scalar(self):
        block = block_of("---\ntags: evergreen\n---\n")
        assert block.existing_tags() == ["evergreen"]

    def test_no_tags(self):
        block = block_of("---\ntitle: x\n---\n")
        assert block.existing_tags() == []


class TestMerge:
    """Tests for merge."""

    def test_no_existing_block(self):
        result = merge(None, "Note", DATE, [])
        assert result[0] == "---"
        assert result[-1] == "---"
        for name in ("title:", "date:", "draft:", "tags:"):
            assert sum(1 for line in result if line.startswith(name)) == 1
        assert "tags: []" in result

    def test_adds_missing_fields_and_replaces_title(self):
        result = merge(block_of('---\ntitle: "Old"\n---\nBody'), "New", DATE, [])
        assert result == [
            "---",
            'title: "New"',
            f"date: {DATE}",
            "draft: false",
            "tags: []",
            "---",
        ]

    def test_same_title_unchanged(self):
        result = merge(block_of('---\ntitle: "Note"\n---\n'), "Note", DATE, [])
        assert result[1] == 'title: "Note"'

    def test_unknown_fields_preserved_in_order(self):
        text = '---\nauthor: me\ntitle: "Old"\nslug: my-slug\ncategories:\n  - blog\nweight: 3\n---\n'
        result = merge(block_of(text), "Note", DATE, ["t"])
        unknown = [line for line in result if line in ("author: me", "slug: my-slug", "categories:", "  - blog", "weight: 3")]
        assert unknown == ["author: me", "slug: my-slug", "categories:", "  - blog", "weight: 3"]
        assert result[2] == 'title: "Note"'

    def test_inline_tags_merged(self):
        result = merge(block_of('---\ntags: ["a", "b"]\n---\n'), "N", DATE, ["b", "c"])
        assert 'tags: ["a", "b", "c"]' in result

    def test_list_item_tags_consumed(self):
        text = "---\ntags:\n- a\n- b\nauthor: me\n---\n"
        result = merge(block_of(text), "N", DATE, ["a", "c"])
        assert result == [
            "---",
            'tags: ["a", "b", "c"]',
            "author: me",
            'title: "N"',
            f"date: {DATE}",
            "draft: false",
            "---",
        ]

    def test_list_items_of_other_fields_kept(self):
        text = "---\naliases:\n- one\ntags:\n- a\n---\n"
        result = merge(block_of(text), "N", DATE, [])
        assert result[1:4] == ["aliases:", "- one", 'tags: ["a"]']

    def test_case_sensitive_union(self):
        result = merge(block_of('---\ntags: ["Tag"]\n---\n'), "N", DATE, ["tag"])
        assert 'tags: ["Tag", "tag"]' in result

    def test_date_and_draft_replaced(self):
        text = "---\ndate: 2020-01-01\ndraft: true\n---\n"
        result = merge(block_of(text), "N", DATE, [])
        assert result[1:3] == [f"date: {DATE}", "draft: false"]
