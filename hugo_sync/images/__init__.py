"""Image resolution and relocation."""

from hugo_sync.images.relocator import ImageRelocator
from hugo_sync.images.resolver import IMAGE_EXTENSIONS, ImageQuery, ImageResolver

__all__ = ["IMAGE_EXTENSIONS", "ImageQuery", "ImageRelocator", "ImageResolver"]
