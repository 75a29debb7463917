"""Core components for Hugo Sync."""

from hugo_sync.core.config import SyncConfig, load_config
from hugo_sync.core.converter import DocumentConverter, format_date
from hugo_sync.core.filestore import FileStore, LocalFileStore
from hugo_sync.core.models import ConvertedDocument, SyncFailure, SyncResult, VaultFile
from hugo_sync.core.sync import HugoSync
from hugo_sync.core.vault import Vault

__all__ = [
    "ConvertedDocument",
    "DocumentConverter",
    "FileStore",
    "HugoSync",
    "LocalFileStore",
    "SyncConfig",
    "SyncFailure",
    "SyncResult",
    "Vault",
    "VaultFile",
    "format_date",
    "load_config",
]
