"""Front matter handling for Hugo output.

Front matter is treated as a flat list of lines. Only four fields are
managed (title, date, draft, tags); every other line of an existing block
is passed through untouched, so hand-written or non-standard YAML survives
a sync exactly as it was.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from hugo_sync.transforms.tags import TagSet, clean_tag, parse_tag_array

DELIMITER = '---'

MANAGED_FIELDS = ('title', 'date', 'draft', 'tags')


def quote(value: str) -> str:
    """Render a double-quoted YAML scalar."""
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def render_tags(tags: Iterable[str]) -> str:
    """Render the tags field as a single bracketed line."""
    return f"tags: [{', '.join(quote(tag) for tag in tags)}]"


def _field_name(line: str) -> Optional[str]:
    trimmed = line.strip()
    for name in MANAGED_FIELDS:
        if trimmed.startswith(f"{name}:"):
            return name
    return None


def _is_tag_item(line: str) -> bool:
    trimmed = line.strip()
    return trimmed.startswith('-') or (trimmed.startswith('[') and trimmed.endswith(']'))


@dataclass
class FrontMatterBlock:
    """Raw lines between the opening and closing delimiters."""
    lines: List[str] = field(default_factory=list)
    opening: str = DELIMITER

    @classmethod
    def split(cls, text: str) -> Tuple[Optional["FrontMatterBlock"], str]:
        """Separate front matter from the body.

        A block exists only when the first line is a delimiter and a later
        line is one too.

        Args:
            text: Full note text

        Returns:
            Tuple of (block or None, body text)
        """
        lines = text.split('\n')
        if lines[0].strip() != DELIMITER:
            return None, text

        for index in range(1, len(lines)):
            if lines[index].strip() == DELIMITER:
                block = cls(lines=lines[1:index], opening=lines[0])
                return block, '\n'.join(lines[index + 1:])

        return None, text

    def existing_tags(self) -> List[str]:
        """Parse the tags field in inline, list-item or scalar form."""
        tags: List[str] = []

        for index, line in enumerate(self.lines):
            if _field_name(line) != 'tags':
                continue

            value = line.strip()[len('tags:'):].strip()
            if value.startswith('[') and value.endswith(']'):
                tags.extend(parse_tag_array(value))
            elif value:
                tags.append(clean_tag(value))
            else:
                for item in self.lines[index + 1:]:
                    if not _is_tag_item(item):
                        break
                    trimmed = item.strip()
                    if trimmed.startswith('-'):
                        tags.append(clean_tag(trimmed[1:]))
                    else:
                        tags.extend(parse_tag_array(trimmed))

        return [tag for tag in tags if tag]


def new_front_matter(title: str, date: str, tags: Iterable[str]) -> List[str]:
    """Build a fresh block with exactly the four managed fields."""
    return [
        DELIMITER,
        f"title: {quote(title)}",
        f"date: {date}",
        "draft: false",
        render_tags(tags),
        DELIMITER,
    ]


def merge(
    existing: Optional[FrontMatterBlock],
    title: str,
    date: str,
    tags: Iterable[str],
) -> List[str]:
    """Merge computed fields into an existing block, or build a new one.

    Unmanaged lines keep their text and order. Managed fields are replaced,
    tags become the union of existing and new tags, and missing fields are
    appended.

    Args:
        existing: Block from the note, or None
        title: Note title
        date: ISO-8601 timestamp
        tags: Tags extracted from the body

    Returns:
        Block lines including both delimiters
    """
    if existing is None:
        return new_front_matter(title, date, tags)

    merged_tags = TagSet(existing.existing_tags())
    merged_tags.update(tags)

    rendered = {
        'title': f"title: {quote(title)}",
        'date': f"date: {date}",
        'draft': "draft: false",
        'tags': render_tags(merged_tags),
    }

    result = [existing.opening]
    seen = set()
    consuming_tag_items = False

    for line in existing.lines:
        if consuming_tag_items:
            if _is_tag_item(line):
                continue
            consuming_tag_items = False

        name = _field_name(line)
        if name is None:
            result.append(line)
            continue

        seen.add(name)
        result.append(rendered[name])
        if name == 'tags' and line.strip() == 'tags:':
            consuming_tag_items = True

    for name in MANAGED_FIELDS:
        if name not in seen:
            result.append(rendered[name])

    result.append(DELIMITER)
    return result
