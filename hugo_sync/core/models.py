"""Data models and errors for Hugo Sync."""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import List, Optional


class HugoSyncError(Exception):
    """Base class for all Hugo Sync errors."""


class ConfigError(HugoSyncError):
    """The configuration file could not be loaded."""


class ImageNotFoundError(HugoSyncError):
    """No vault file matched an image embed."""

    def __init__(self, image_name: str):
        super().__init__(f"Image file not found: {image_name}")
        self.image_name = image_name


class ImageCopyError(HugoSyncError):
    """Copying a resolved image into the Hugo static tree failed."""


class DocumentWriteError(HugoSyncError):
    """The converted document could not be written to the Hugo content tree."""


class NoSelectionError(HugoSyncError):
    """A sync was requested without any documents."""

    def __init__(self):
        super().__init__("No files selected for syncing")


@dataclass(frozen=True)
class VaultFile:
    """A file inside the vault - just location.

    `path` is relative to the vault root and always uses forward slashes,
    the way Obsidian names vault files.
    """
    vault_root: Path
    path: str

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def basename(self) -> str:
        """File name without its extension."""
        return PurePosixPath(self.path).stem

    @property
    def extension(self) -> str:
        """Extension without the leading dot, as Obsidian reports it."""
        return PurePosixPath(self.path).suffix[1:]

    @property
    def full_path(self) -> Path:
        return self.vault_root / self.path

    def read_raw(self) -> str:
        """Read file contents on demand."""
        return self.full_path.read_text(encoding='utf-8')


@dataclass
class ConvertedDocument:
    """Result of converting one note to Hugo format."""
    source: VaultFile
    content: str
    tags: List[str]
    image_count: int = 0
    image_errors: List[str] = field(default_factory=list)
    output_path: Optional[Path] = None


@dataclass
class SyncFailure:
    """A document that could not be synced."""
    name: str
    error: str


@dataclass
class SyncResult:
    """Aggregate result of syncing a batch of documents."""
    total: int = 0
    synced: List[ConvertedDocument] = field(default_factory=list)
    failures: List[SyncFailure] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.synced)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def image_count(self) -> int:
        return sum(doc.image_count for doc in self.synced)

    @property
    def errors(self) -> List[str]:
        """Per-image errors of synced documents, then document failures."""
        messages = [
            f"{doc.source.name} (image): {error}"
            for doc in self.synced
            for error in doc.image_errors
        ]
        messages.extend(f"{f.name}: {f.error}" for f in self.failures)
        return messages

    def summary(self) -> str:
        """Build the single notification text for the batch."""
        message = (
            f"Sync complete. Total: {self.total}, "
            f"Success: {self.success_count}, Failed: {self.failure_count}"
        )
        if self.image_count > 0:
            message += f"\nImages synced: {self.image_count}"
        errors = self.errors
        if errors:
            message += "\n\nErrors occurred during sync:\n" + "\n".join(errors)
        return message
