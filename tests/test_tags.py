"""Tests for tag extraction and header filtering."""

import pytest

from hugo_sync.transforms.tags import TagSet, clean_tag, is_symbol_only, parse_tag_array, process


def run(text, blacklist=()):
    tags = TagSet()
    lines = process(text.split('\n'), blacklist, tags)
    return lines, tags.to_list()


class TestTagSet:
    """Tests for TagSet."""

    def test_preserves_first_seen_order(self):
        tags = TagSet(["b", "a", "b", "c"])
        assert tags.to_list() == ["b", "a", "c"]

    def test_case_sensitive(self):
        tags = TagSet(["Tag", "tag"])
        assert tags.to_list() == ["Tag", "tag"]

    def test_rejects_symbol_only_and_empty(self):
        tags = TagSet()
        assert tags.add("---") is False
        assert tags.add("...") is False
        assert tags.add("") is False
        assert tags.add("ok") is True
        assert len(tags) == 1
        assert "ok" in tags


class TestHelpers:
    """Tests for tag helpers."""

    @pytest.mark.parametrize("text", ["---", "...", "!?", "_", "()[]"])
    def test_symbol_only(self, text):
        assert is_symbol_only(text)

    @pytest.mark.parametrize("text", ["a-b", "v1", "日本", "c++"])
    def test_not_symbol_only(self, text):
        assert not is_symbol_only(text)

    def test_clean_tag_strips_quotes(self):
        assert clean_tag(' "python" ') == "python"
        assert clean_tag("'rust'") == "rust"

    def test_parse_tag_array(self):
        assert parse_tag_array('["a", \'b\', c]') == ["a", "b", "c"]
        assert parse_tag_array("[]") == []


class TestProcess:
    """Tests for the single-pass body processor."""

    def test_inline_and_list_tags(self):
        lines, tags = run("# Notes\nHello #draft world\ntags:\n- misc\n")
        assert tags == ["draft", "misc"]
        assert "Hello world" in lines
        assert "# Notes" in lines
        assert "tags:" not in lines
        assert "- misc" not in lines

    def test_line_with_only_tags_is_dropped(self):
        lines, tags = run("before\n#one #two\nafter")
        assert tags == ["one", "two"]
        assert lines == ["before", "after"]

    def test_indentation_preserved(self):
        lines, _ = run("  - item #tag here\n    code")
        assert lines == ["  - item here", "    code"]

    def test_lines_without_tags_unchanged(self):
        lines, tags = run("plain   spacing  \n\n## Header")
        assert lines == ["plain   spacing  ", "", "## Header"]
        assert tags == []

    def test_symbol_only_inline_tags_rejected(self):
        lines, tags = run("text #--- and #... and #real")
        assert tags == ["real"]
        assert lines == ["text and and"]

    def test_tag_list_with_quotes_and_array(self):
        _, tags = run('tags:\n- "quoted"\n- \'single\'\n[x, "y"]\nbody')
        assert tags == ["quoted", "single", "x", "y"]

    def test_tag_section_closing_line_is_kept(self):
        lines, tags = run("tags:\n- a\nFirst paragraph #b")
        assert tags == ["a", "b"]
        assert lines == ["First paragraph"]

    def test_symbol_only_list_item_rejected(self):
        _, tags = run("tags:\n- ---\n- ok")
        assert tags == ["ok"]

    def test_duplicates_removed(self):
        _, tags = run("#a #b\ntags:\n- a\n#B")
        assert tags == ["a", "b", "B"]

    def test_idempotent(self):
        text = "# Title\nsome #tag text\ntags:\n- x\n\n## Sub\n  indented #y line\nend"
        first, _ = run(text)
        second, tags = run('\n'.join(first))
        assert second == first
        assert tags == []


class TestHeaderFilter:
    """Tests for blacklisted header sections."""

    def test_blacklisted_section_removed(self):
        lines, _ = run("# Private\nsecret\n# Public\nvisible", blacklist=["Private"])
        assert lines == ["# Public", "visible"]

    def test_nested_content_removed_until_same_level(self):
        text = "## Keep\na\n## Drafts\nb\n### Sub\nc\n### Other\nd\n## Next\ne"
        lines, _ = run(text, blacklist=["Drafts"])
        assert lines == ["## Keep", "a", "## Next", "e"]

    def test_higher_level_header_ends_skip(self):
        lines, _ = run("## Hidden\nx\n# Top\ny", blacklist=["Hidden"])
        assert lines == ["# Top", "y"]

    def test_skipped_content_contributes_no_tags(self):
        text = "# Hidden\nsome #secret\ntags:\n- nope\n# Shown\n#visible text"
        lines, tags = run(text, blacklist=["Hidden"])
        assert tags == ["visible"]
        assert lines == ["# Shown", "text"]

    def test_skip_runs_to_end_of_document(self):
        lines, _ = run("intro\n# Private\na\nb", blacklist=["Private"])
        assert lines == ["intro"]

    def test_header_match_is_exact(self):
        lines, _ = run("# private\nstays", blacklist=["Private"])
        assert lines == ["# private", "stays"]

    def test_inline_tags_ignored_in_header_match(self):
        lines, tags = run("## Private #wip\nsecret\n## Public\nok", blacklist=["Private"])
        assert lines == ["## Public", "ok"]
        assert "wip" not in tags
