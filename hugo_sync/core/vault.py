"""Vault access: enumerating, looking up and reading vault files."""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

from hugo_sync.core.models import VaultFile

logger = logging.getLogger(__name__)


class Vault:
    """Read-only view of an Obsidian vault on disk."""

    def __init__(self, vault_path: Path):
        """Initialize Vault.

        Args:
            vault_path: Path to the Obsidian vault root
        """
        self.vault_path = Path(vault_path)

    def files(self) -> List[VaultFile]:
        """List every file in the vault.

        Hidden directories (.obsidian, .git, .trash) are skipped. Order is
        stable: directories are walked depth-first with names sorted.

        Returns:
            List of VaultFile
        """
        found = []
        for dirpath, dirnames, filenames in os.walk(self.vault_path):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith('.'))
            rel_dir = Path(dirpath).relative_to(self.vault_path)
            for filename in sorted(filenames):
                found.append(VaultFile(self.vault_path, (rel_dir / filename).as_posix()))
        return found

    def get_file(self, path: str) -> Optional[VaultFile]:
        """Resolve a vault-relative path to a file.

        Args:
            path: Path relative to the vault root, with forward slashes

        Returns:
            VaultFile if a regular file exists there, None otherwise
        """
        rel = Path(path.strip('/'))
        if not rel.parts or '..' in rel.parts:
            return None
        if not (self.vault_path / rel).is_file():
            return None
        return VaultFile(self.vault_path, rel.as_posix())

    def read(self, file: VaultFile) -> str:
        return file.read_raw()

    def select(self, names: Iterable[str]) -> List[VaultFile]:
        """Turn user-supplied note references into vault files.

        Each name may be a vault-relative path, an absolute path inside the
        vault, or a bare note name (with or without .md). Names that match
        nothing are logged and skipped.

        Args:
            names: Note references

        Returns:
            List of matching notes, in argument order
        """
        selected = []
        for name in names:
            note = self._find_note(name)
            if note is None:
                logger.warning(f"Note not found in vault: {name}")
                continue
            selected.append(note)
        return selected

    def _find_note(self, name: str) -> Optional[VaultFile]:
        path = Path(name)
        if path.is_absolute():
            try:
                name = path.resolve().relative_to(self.vault_path.resolve()).as_posix()
            except ValueError:
                return None

        for candidate in (name, f"{name}.md"):
            note = self.get_file(candidate)
            if note is not None:
                return note

        # Fall back to a note name anywhere in the vault
        stem = Path(name).stem if name.endswith('.md') else Path(name).name
        for file in self.files():
            if file.extension == 'md' and file.basename == stem:
                return file

        return None
