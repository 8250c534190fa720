"""Copy wiki attachments and rewrite the links that point at them."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from urllib.parse import unquote

from wiki_export.errors import Problem
from wiki_export.filesystem import FileSystem, LocalFileSystem
from wiki_export.logging_config import get_logger, report_problem

logger = get_logger(__name__)

# [caption](prefix/.attachments/name), the prefix is empty or ends with "/".
# Captions may hold one level of [brackets], names one level of (parentheses).
ATTACHMENT_PATTERN = re.compile(
    r"\[(?P<caption>(?:[^\[\]\n]|\[[^\[\]\n]*\])*)\]"
    r"\((?P<path>(?:[^()\n]*/)?)\.attachments/(?P<name>(?:[^()\n]|\([^()\n]*\))+)\)"
)


class AttachmentFixer:
    """Rewrites attachment references to a target attachments folder.

    Every referenced file is copied from ``source_path`` to ``target_path``
    and its link changed to ``<target folder name>/<encoded name>``.
    """

    def __init__(
        self,
        source_path: Path | None,
        target_path: Path,
        retain_caption: bool = False,
        fs: FileSystem | None = None,
    ):
        self.source_path = Path(source_path) if source_path is not None else None
        self.target_path = Path(target_path)
        self.retain_caption = retain_caption
        self.fs = fs or LocalFileSystem()
        self.problems: list[Problem] = []
        self.copied: list[Path] = []

    def fix(self, source: str) -> str:
        """Fix up the references in ``source``, copying the files as we go.

        Args:
            source: Markdown text of the merged document.

        Returns:
            The text with every attachment link rewritten.
        """
        return ATTACHMENT_PATTERN.sub(self._replace, source)

    def _replace(self, match: re.Match) -> str:
        attachment_name = match.group("name")
        caption = match.group("caption") if self.retain_caption else ""

        # The link is URL encoded, the file on disk is not
        file_name = unquote(attachment_name)
        self._copy(file_name)

        return f"[{caption}]({self.target_path.name}/{attachment_name})"

    def _copy(self, file_name: str) -> None:
        source = self.source_path / file_name if self.source_path else None
        if source is None or not self.fs.exists(source):
            report_problem(
                logger,
                logging.WARNING,
                f"Attachment '{file_name}' not found in '{self.source_path}'",
                self.problems,
            )
            return

        target = self.target_path / file_name

        # Attachments may live in subfolders of the attachments folder
        self.fs.create_directory(target.parent)
        self.fs.copy_file(source, target, overwrite=True)
        self.copied.append(target)
        logger.debug(f"Copied attachment {source} -> {target}")
