"""Locating the vault file behind an image embed.

Embeds often name images loosely (no extension, no folder, different
spacing), so resolution runs a chain of strategies in priority order and
takes the first hit:

1. configured search directories, exact name and every image extension
2. the name at the vault root
3. a scan of the whole vault with looser name matching
4. Obsidian's "Pasted image <timestamp>" naming

When several files satisfy a scan, vault enumeration order decides.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from hugo_sync.core.models import ImageNotFoundError, VaultFile
from hugo_sync.core.vault import Vault

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.bmp', '.svg', '.webp')

DEFAULT_EXTENSION = '.jpg'

PASTED_IMAGE_MARKER = 'Pasted image'

PASTED_IMAGE_PATTERN = re.compile(
    r'Pasted image \d{14}\.(png|jpg|jpeg|gif|bmp|svg|webp)', re.IGNORECASE
)

_WHITESPACE = re.compile(r'\s+')


def is_image(file: VaultFile) -> bool:
    return f".{file.extension.lower()}" in IMAGE_EXTENSIONS


@dataclass(frozen=True)
class ImageQuery:
    """Names derived from an embed token."""
    token: str
    has_extension: bool
    search_name: str
    base_name: str

    @classmethod
    def from_token(cls, token: str) -> "ImageQuery":
        has_extension = token.lower().endswith(IMAGE_EXTENSIONS)
        if has_extension:
            return cls(token, True, token, token[:token.rindex('.')])
        return cls(token, False, token + DEFAULT_EXTENSION, token)

    @property
    def compact_token(self) -> str:
        """Token with all whitespace removed."""
        return _WHITESPACE.sub('', self.token)


def search_paths(query: ImageQuery, search_dirs: Sequence[str]) -> List[str]:
    """Candidate vault paths in probe order.

    Args:
        query: Parsed embed token
        search_dirs: Configured image directories, in priority order

    Returns:
        Vault-relative paths, ending with the bare name at the vault root
    """
    paths: List[str] = []
    for directory in search_dirs:
        directory = directory.strip().strip('/')
        if not directory:
            continue
        paths.append(f"{directory}/{query.search_name}")
        paths.extend(f"{directory}/{query.base_name}{ext}" for ext in IMAGE_EXTENSIONS)
    paths.append(query.search_name)

    return list(dict.fromkeys(paths))


class ImageResolver:
    """Resolves embed tokens to image files in a vault."""

    def __init__(self, vault: Vault, search_dirs: Sequence[str]):
        """Initialize ImageResolver.

        Args:
            vault: Vault to search
            search_dirs: Vault directories probed before scanning everything
        """
        self.vault = vault
        self.search_dirs = list(search_dirs)
        self.strategies: List[Callable[[ImageQuery], Optional[VaultFile]]] = [
            self._probe_paths,
            self._scan_vault,
            self._find_pasted_image,
        ]

    def resolve(self, token: str) -> VaultFile:
        """Find the image an embed token refers to.

        Args:
            token: Embed target, e.g. "diagram" or "shots/Screen 1.png"

        Returns:
            The matching VaultFile

        Raises:
            ImageNotFoundError: If no strategy finds a match
        """
        if not token.strip():
            logger.warning("Empty image embed")
            raise ImageNotFoundError(token)

        query = ImageQuery.from_token(token)
        logger.debug(
            f"Resolving image {token!r} (search name {query.search_name!r}, "
            f"base name {query.base_name!r})"
        )

        for strategy in self.strategies:
            found = strategy(query)
            if found is not None:
                logger.debug(f"Found image {token!r} at {found.path} via {strategy.__name__}")
                return found

        logger.warning(f"Image not found: {token}")
        raise ImageNotFoundError(token)

    def _probe_paths(self, query: ImageQuery) -> Optional[VaultFile]:
        for path in search_paths(query, self.search_dirs):
            file = self.vault.get_file(path)
            if file is None:
                continue
            if is_image(file):
                return file
            logger.debug(f"Found file but not image: {file.path}")
        return None

    def _scan_vault(self, query: ImageQuery) -> Optional[VaultFile]:
        files = self.vault.files()
        logger.debug(f"Scanning {len(files)} vault files for {query.token!r}")

        base_lower = query.base_name.lower()
        compact = query.compact_token
        compact_lower = compact.lower()
        token_lower = query.token.lower()

        for file in files:
            if not is_image(file):
                continue

            name = file.name
            name_lower = name.lower()
            exact = name in (query.search_name, query.token)
            same_base = file.basename == query.base_name
            contains = query.base_name in name and compact in name
            fuzzy = base_lower in name_lower or compact_lower in name_lower
            basename_lower = file.basename.lower()
            reverse = bool(basename_lower) and (
                name_lower in token_lower or basename_lower in token_lower
            )

            if exact or same_base or contains or fuzzy or reverse:
                return file

        return None

    def _find_pasted_image(self, query: ImageQuery) -> Optional[VaultFile]:
        if not PASTED_IMAGE_PATTERN.search(query.token):
            return None

        files = self.vault.files()
        for file in files:
            if file.name == query.token and is_image(file):
                return file

        # Any pasted image will do; with several candidates this may pick
        # the wrong one.
        for file in files:
            if PASTED_IMAGE_MARKER in file.name and is_image(file):
                logger.warning(f"Using pasted image {file.path} for {query.token!r}")
                return file

        return None
