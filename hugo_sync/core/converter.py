"""Document converter: turns an Obsidian note into a Hugo content file."""

import datetime
import logging
import re
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from hugo_sync.core.config import SyncConfig
from hugo_sync.core.filestore import FileStore, LocalFileStore
from hugo_sync.core.models import ConvertedDocument, DocumentWriteError, HugoSyncError, VaultFile
from hugo_sync.core.vault import Vault
from hugo_sync.images.relocator import ImageRelocator
from hugo_sync.images.resolver import ImageResolver
from hugo_sync.transforms import frontmatter, tags as tag_filter

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.datetime]


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def format_date(moment: datetime.datetime) -> str:
    """ISO-8601 in UTC with milliseconds, e.g. 2024-01-15T08:30:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.timezone.utc)
    moment = moment.astimezone(datetime.timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class DocumentConverter:
    """Converts notes for Hugo.

    Handles:
    - Image embed resolution, copying and link rewriting
    - Tag extraction and blacklisted header removal
    - Front matter creation or merging
    """

    # Pattern for embeds: ![[name]], ![[name.png]] or ![[name.png|300]]
    EMBED_PATTERN = re.compile(r'!\[\[([^\]]+)\]\]')

    def __init__(
        self,
        vault: Vault,
        config: SyncConfig,
        file_store: Optional[FileStore] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize DocumentConverter.

        Args:
            vault: Vault the notes and images live in
            config: Sync settings
            file_store: Where images and documents are written (default: local disk)
            clock: Source of the conversion time (default: current UTC time)
        """
        self.vault = vault
        self.config = config
        self.file_store = file_store or LocalFileStore()
        self.clock = clock or utc_now
        self.resolver = ImageResolver(vault, config.image_search_paths)
        self.relocator = ImageRelocator(self.file_store, config)

    def convert(self, document: VaultFile) -> ConvertedDocument:
        """Convert a note without writing the note itself.

        Images are copied into the static tree as a side effect.

        Args:
            document: Note to convert

        Returns:
            ConvertedDocument with the Hugo content and image statistics
        """
        raw_content = self.vault.read(document)
        content, image_count, image_errors = self.relocate_images(raw_content, document.basename)

        if image_errors:
            logger.warning(f"Image sync errors for {document.name}: {image_errors}")

        hugo_content, tags = self._render(content, document.name, format_date(self.clock()))
        return ConvertedDocument(
            source=document,
            content=hugo_content,
            tags=tags,
            image_count=image_count,
            image_errors=image_errors,
        )

    def sync(self, document: VaultFile) -> ConvertedDocument:
        """Convert a note and write it into the Hugo content directory.

        Args:
            document: Note to sync

        Returns:
            ConvertedDocument with output_path set

        Raises:
            DocumentWriteError: If the content directory or file cannot be written
        """
        converted = self.convert(document)
        content_dir = self.config.content_dir
        output_path = content_dir / document.name

        try:
            if not self.file_store.dir_exists(content_dir):
                self.file_store.make_dirs(content_dir)
            self.file_store.write_text(output_path, converted.content)
        except OSError as e:
            raise DocumentWriteError(f"Failed to write {output_path}: {e}") from e

        converted.output_path = output_path
        logger.info(f"Synced {document.path} -> {output_path} ({converted.image_count} images)")
        return converted

    def relocate_images(self, content: str, document_base_name: str) -> Tuple[str, int, List[str]]:
        """Replace image embeds with links to copied images.

        Embeds that cannot be resolved or copied are left as they are.

        Args:
            content: Note content
            document_base_name: Note file name without extension

        Returns:
            Tuple of (transformed content, images copied, error messages)
        """
        image_count = 0
        errors: List[str] = []

        def replace_embed(match: re.Match) -> str:
            nonlocal image_count
            image_name = match.group(1).split('|', 1)[0].strip()

            try:
                image = self.resolver.resolve(image_name)
                new_path = self.relocator.relocate(image, document_base_name)
            except HugoSyncError as e:
                errors.append(f"{image_name or match.group(0)}: {e}")
                return match.group(0)

            image_count += 1
            return f"![{image_name}]({new_path})"

        result = self.EMBED_PATTERN.sub(replace_embed, content)
        return result, image_count, errors

    def to_hugo(self, content: str, file_name: str, date: Optional[str] = None) -> str:
        """Convert note text to Hugo format without touching images.

        Args:
            content: Note text
            file_name: Note file name; its stem becomes the title
            date: Timestamp for the date field (default: now)

        Returns:
            Front matter, a blank line and the processed body
        """
        hugo_content, _ = self._render(content, file_name, date or format_date(self.clock()))
        return hugo_content

    def _render(self, content: str, file_name: str, date: str) -> Tuple[str, List[str]]:
        content = content.replace('\r\n', '\n')
        block, body = frontmatter.FrontMatterBlock.split(content)

        tags = tag_filter.TagSet(block.existing_tags() if block else [])
        lines = tag_filter.process(body.split('\n'), self.config.filtered_headers, tags)

        title = Path(file_name).stem
        front = '\n'.join(frontmatter.merge(block, title, date, tags.to_list()))
        body_text = '\n'.join(lines).strip()

        if not body_text:
            return front + '\n', tags.to_list()
        return f"{front}\n\n{body_text}\n", tags.to_list()
