"""Batch sync of selected notes into a Hugo site."""

import logging
from typing import Sequence

from hugo_sync.core.converter import DocumentConverter
from hugo_sync.core.models import NoSelectionError, SyncFailure, SyncResult, VaultFile

logger = logging.getLogger(__name__)


class HugoSync:
    """Syncs notes one at a time, collecting successes and failures."""

    def __init__(self, converter: DocumentConverter):
        self.converter = converter

    def sync(self, documents: Sequence[VaultFile]) -> SyncResult:
        """Sync every document, continuing past failures.

        Each document, including all of its images, is finished before the
        next one starts.

        Args:
            documents: Notes to sync

        Returns:
            SyncResult with per-document outcomes

        Raises:
            NoSelectionError: If documents is empty
        """
        if not documents:
            raise NoSelectionError()

        result = SyncResult(total=len(documents))

        for document in documents:
            try:
                converted = self.converter.sync(document)
            except Exception as e:
                result.failures.append(SyncFailure(name=document.name, error=str(e)))
                logger.error(f"Error syncing {document.name}: {e}")
                continue
            result.synced.append(converted)

        return result
