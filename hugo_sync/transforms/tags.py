"""Tag extraction and header filtering for note bodies.

Tags come from two places in an Obsidian body: a YAML-style `tags:` list
and inline `#tag` markers. Content below blacklisted headers is dropped,
including any tags it would have contributed.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

# Header line: "## Title" (checked against the trimmed line)
HEADER_PATTERN = re.compile(r'^(#+)\s*(.*)')

# Inline tag: "#token" with no whitespace or further '#'
INLINE_TAG_PATTERN = re.compile(r'#([^\s#]+)')

# Inline tag together with the whitespace in front of it
INLINE_TAG_STRIP_PATTERN = re.compile(r'[ \t]*#[^\s#]+')

QUOTE_CHARS = '"\''


def is_symbol_only(text: str) -> bool:
    """Check whether text consists solely of punctuation or symbols.

    Args:
        text: Candidate tag

    Returns:
        True if every character is in a Unicode punctuation or symbol category
    """
    return all(unicodedata.category(ch)[0] in ('P', 'S') for ch in text)


def clean_tag(raw: str) -> str:
    """Strip whitespace and surrounding quotes from a tag entry."""
    return raw.strip().strip(QUOTE_CHARS).strip()


def parse_tag_array(text: str) -> List[str]:
    """Split a bracketed array like `["a", 'b', c]` into tag strings."""
    inner = text.strip()
    if inner.startswith('[') and inner.endswith(']'):
        inner = inner[1:-1]
    return [clean_tag(part) for part in inner.split(',') if clean_tag(part)]


class TagSet:
    """Case-sensitive set of tags that remembers first-seen order."""

    def __init__(self, tags: Optional[Iterable[str]] = None):
        self._tags: List[str] = []
        if tags:
            self.update(tags)

    def add(self, tag: str) -> bool:
        """Add a tag unless it is empty, symbol-only or already present.

        Returns:
            True if the tag was added
        """
        if not tag or is_symbol_only(tag) or tag in self._tags:
            return False
        self._tags.append(tag)
        return True

    def update(self, tags: Iterable[str]) -> None:
        for tag in tags:
            self.add(tag)

    def to_list(self) -> List[str]:
        return list(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagSet({self._tags!r})"


@dataclass
class HeaderFilterState:
    """Header tracking for a single pass over a body.

    While skipping, `current_level` holds the level of the blacklisted
    header that started the skip.
    """
    current_level: int = 0
    skipping: bool = False


def strip_inline_tags(line: str, tags: TagSet) -> Optional[str]:
    """Move inline tags from a line into the tag set.

    Args:
        line: Body line
        tags: Tag set to add to

    Returns:
        The line without its tags and original indentation kept, the line
        unchanged if it has no tags, or None if nothing is left.
    """
    found = INLINE_TAG_PATTERN.findall(line)
    if not found:
        return line

    for tag in found:
        tags.add(tag)

    indent = line[:len(line) - len(line.lstrip())]
    cleaned = INLINE_TAG_STRIP_PATTERN.sub('', line[len(indent):]).strip()
    if not cleaned:
        return None
    return indent + cleaned


def header_text(text: str) -> str:
    """Header title with any inline tags removed."""
    return INLINE_TAG_STRIP_PATTERN.sub('', text).strip()


def process(lines: Sequence[str], blacklist: Iterable[str], tags: TagSet) -> List[str]:
    """Extract tags from a body and drop blacklisted sections.

    Args:
        lines: Body lines (without front matter)
        blacklist: Header texts whose sections are removed
        tags: Tag set that receives every extracted tag

    Returns:
        Remaining body lines
    """
    blacklist = set(blacklist)
    state = HeaderFilterState()
    in_tag_section = False
    output: List[str] = []

    for line in lines:
        trimmed = line.strip()

        header = HEADER_PATTERN.match(trimmed) if trimmed.startswith('#') else None
        if header:
            level = len(header.group(1))
            text = header.group(2)

            if state.skipping and level > state.current_level:
                continue

            if level <= state.current_level:
                state.skipping = False

            if header_text(text) in blacklist:
                state.skipping = True
                state.current_level = level
                in_tag_section = False
                continue

            state.current_level = level

        if state.skipping:
            continue

        if in_tag_section:
            if trimmed.startswith('-'):
                tags.add(clean_tag(trimmed[1:]))
                continue
            if trimmed.startswith('[') and trimmed.endswith(']'):
                tags.update(parse_tag_array(trimmed))
                continue
            in_tag_section = False

        if trimmed == 'tags:':
            in_tag_section = True
            continue

        cleaned = strip_inline_tags(line, tags)
        if cleaned is not None:
            output.append(cleaned)

    return output
