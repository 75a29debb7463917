"""Copying resolved images into the Hugo static tree."""

import logging
from urllib.parse import quote

from hugo_sync.core.config import SyncConfig
from hugo_sync.core.filestore import FileStore
from hugo_sync.core.models import ImageCopyError, VaultFile

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides letters, digits and "-_.~"
URI_COMPONENT_SAFE = "!*'()"

# Published posts sit two levels below the site root (e.g. /posts/<slug>/)
RELATIVE_PREFIX = "../.."


def image_reference(image_sub_path: str, document_base_name: str, file_name: str) -> str:
    """Relative link from a published post to its copied image.

    Only the file name is percent-encoded; directory segments are kept as is.
    """
    encoded = quote(file_name, safe=URI_COMPONENT_SAFE)
    return f"{RELATIVE_PREFIX}/{image_sub_path}/{document_base_name}/{encoded}"


class ImageRelocator:
    """Copies images into per-document directories under the static path."""

    def __init__(self, file_store: FileStore, config: SyncConfig):
        self.file_store = file_store
        self.config = config

    def relocate(self, image: VaultFile, document_base_name: str) -> str:
        """Copy an image next to its document's other images.

        Args:
            image: Resolved image in the vault
            document_base_name: Note file name without extension

        Returns:
            Relative reference to use in the converted note

        Raises:
            ImageCopyError: If the directory cannot be created or the copy fails
        """
        target_dir = self.config.image_dir(document_base_name)
        target = target_dir / image.name

        try:
            if not self.file_store.dir_exists(target_dir):
                self.file_store.make_dirs(target_dir)
            self.file_store.copy_file(image.full_path, target)
        except OSError as e:
            raise ImageCopyError(f"Failed to copy {image.path} to {target}: {e}") from e

        logger.info(f"Copied image {image.path} -> {target}")
        return image_reference(self.config.image_sub_path, document_base_name, image.name)
