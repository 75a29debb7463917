"""File store used to write into the Hugo site."""

import shutil
from pathlib import Path
from typing import Protocol


class FileStore(Protocol):
    """Synchronous file operations. Failures raise OSError."""

    def dir_exists(self, path: Path) -> bool: ...

    def make_dirs(self, path: Path) -> None: ...

    def copy_file(self, source: Path, destination: Path) -> None: ...

    def write_text(self, path: Path, content: str) -> None: ...


class LocalFileStore:
    """FileStore backed by the local filesystem."""

    def dir_exists(self, path: Path) -> bool:
        return Path(path).is_dir()

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, source: Path, destination: Path) -> None:
        shutil.copyfile(source, destination)

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding='utf-8')
