"""Filesystem access used by the exporter."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Protocol, TextIO


class FileSystem(Protocol):
    """The file operations an export needs."""

    def exists(self, path: Path) -> bool: ...

    def is_directory(self, path: Path) -> bool: ...

    def read_all_lines(self, path: Path) -> list[str]: ...

    def read_all_text(self, path: Path) -> str: ...

    def write_all_text(self, path: Path, text: str) -> None: ...

    def create_directory(self, path: Path) -> None: ...

    def copy_file(self, source: Path, target: Path, overwrite: bool = True) -> None: ...

    def open_text_writer(self, path: Path) -> TextIO: ...


class LocalFileSystem:
    """FileSystem backed by the local disk.

    Text is read as UTF-8, tolerating the byte order mark the wiki editor
    sometimes writes, and written as UTF-8 with ``\\n`` line endings.
    """

    encoding = "utf-8"

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def read_all_lines(self, path: Path) -> list[str]:
        return self.read_all_text(path).splitlines()

    def read_all_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8-sig")

    def write_all_text(self, path: Path, text: str) -> None:
        with open(path, "w", encoding=self.encoding, newline="\n") as f:
            f.write(text)

    def create_directory(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, source: Path, target: Path, overwrite: bool = True) -> None:
        target = Path(target)
        if target.exists() and not overwrite:
            raise FileExistsError(f"Target file already exists: {target}")
        shutil.copyfile(source, target)

    def open_text_writer(self, path: Path) -> TextIO:
        """Create (or truncate) a text file for writing."""
        return open(path, "w", encoding=self.encoding, newline="\n")
