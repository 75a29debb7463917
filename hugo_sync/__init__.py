"""
Hugo Sync - Sync Obsidian notes into a Hugo site

Converts Obsidian notes to Hugo content files with support for:
- Front matter creation and merging (title, date, draft, tags)
- Inline and list tag extraction
- Removal of sections under blacklisted headers
- Image embed resolution and copying into the static directory
"""

from hugo_sync.core.config import SyncConfig, load_config
from hugo_sync.core.converter import DocumentConverter
from hugo_sync.core.models import (
    ConfigError,
    ConvertedDocument,
    DocumentWriteError,
    HugoSyncError,
    ImageCopyError,
    ImageNotFoundError,
    NoSelectionError,
    SyncFailure,
    SyncResult,
    VaultFile,
)
from hugo_sync.core.sync import HugoSync
from hugo_sync.core.vault import Vault

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConvertedDocument",
    "DocumentConverter",
    "DocumentWriteError",
    "HugoSync",
    "HugoSyncError",
    "ImageCopyError",
    "ImageNotFoundError",
    "NoSelectionError",
    "SyncConfig",
    "SyncFailure",
    "SyncResult",
    "Vault",
    "VaultFile",
    "load_config",
]
