"""Walk an ordered wiki tree and merge it into a single Markdown stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from wiki_export.config import ExportOptions
from wiki_export.errors import Problem
from wiki_export.filesystem import FileSystem, LocalFileSystem
from wiki_export.logging_config import get_logger, report_problem
from wiki_export.naming import is_appendix
from wiki_export.resolver import ExportOptionsResolver

logger = get_logger(__name__)


@dataclass
class TraversalResult:
    """Outcome of walking a wiki tree."""

    files_written: int = 0
    problems: list[Problem] = field(default_factory=list)


class WikiTraverser:
    """Writes wiki content files to a stream in ``.order`` sequence.

    Each content file gets a heading for its nesting level, its own headings
    pushed down beneath that one, and a blank line after it. A directory
    with the same name as a content file holds that file's children.
    """

    def __init__(
        self,
        options: ExportOptions,
        resolver: ExportOptionsResolver | None = None,
        fs: FileSystem | None = None,
    ):
        self.options = options
        self.fs = fs or LocalFileSystem()
        self.resolver = resolver or ExportOptionsResolver(options, self.fs)
        self.result = TraversalResult()

    def traverse(
        self, writer: TextIO, source_path: Path, source_file: str | None = None
    ) -> TraversalResult:
        """Merge a whole wiki directory, or one file and its subtree.

        Args:
            writer: Stream receiving the merged Markdown.
            source_path: Wiki directory to start from.
            source_file: Optional content file (without ``.md``) in that directory.

        Returns:
            TraversalResult listing every problem found on the way.
        """
        self.result = TraversalResult()
        if source_file:
            # The topmost file is the document itself, so it gets no heading
            self.add_wiki_file(writer, source_path, source_file, 0)
        else:
            self.add_wiki_directory(writer, source_path, 1)
        return self.result

    def add_wiki_directory(self, writer: TextIO, path: Path, level: int) -> None:
        order_file = self.resolver.order_file(path)
        if not self.fs.exists(order_file):
            report_problem(
                logger,
                logging.ERROR,
                f"No .order file in '{path}'",
                self.result.problems,
            )
            return

        names = [line.strip() for line in self.fs.read_all_lines(order_file)]
        for name in names:
            if name:
                self.add_wiki_file(writer, path, name, level)

    def add_wiki_file(self, writer: TextIO, path: Path, name: str, level: int) -> None:
        source_file = self.resolver.wiki_file_name(path, name)
        if not self.fs.exists(source_file):
            report_problem(
                logger,
                logging.ERROR,
                f"No {name}.md in '{path}'",
                self.result.problems,
            )
            return

        logger.debug(f"Adding {source_file} at level {level}")

        if self.options.auto_heading and level > 0:
            if self.options.appendix_processing and is_appendix(name):
                # Appendices sit at a fixed depth wherever they are in the tree
                level = self.options.appendix_heading_level
            writer.write(self.resolver.file_heading(name, level) + "\n")

        demote = "#" * (level - 1) if self.options.auto_level and level > 1 else ""
        for line in self.fs.read_all_lines(source_file):
            if demote and line.startswith("#"):
                line = demote + line
            writer.write(line + "\n")

        writer.write("\n")
        self.result.files_written += 1

        subdirectory = Path(path) / name
        if self.fs.is_directory(subdirectory):
            self.add_wiki_directory(writer, subdirectory, level + 1)
