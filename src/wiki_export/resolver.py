"""Derive project, title and file names from the export options."""

from __future__ import annotations

from pathlib import Path

from wiki_export.config import ExportOptions
from wiki_export.filesystem import FileSystem, LocalFileSystem
from wiki_export.naming import appendix_name, wiki_decode

ORDER_FILE = ".order"
ATTACHMENTS_DIR = ".attachments"

PROJECT_PLACEHOLDERS = ("{0}", "{project}")


class ExportOptionsResolver:
    """Answers naming questions about an export.

    Wiki directories are recognised by their ``.order`` file; the wiki root
    is the topmost directory in an unbroken chain of them.
    """

    def __init__(self, options: ExportOptions, fs: FileSystem | None = None):
        self.options = options
        self.fs = fs or LocalFileSystem()

    def order_file(self, path: Path) -> Path:
        return Path(path) / ORDER_FILE

    def wiki_file_name(self, path: Path, name: str) -> Path:
        # The extension is added late so the name also works as a directory
        return Path(path) / f"{name}.md"

    def has_order_file(self, path: Path) -> bool:
        return self.fs.exists(self.order_file(path))

    def wiki_root(self, path: Path) -> Path | None:
        """Find the root of the wiki containing ``path``.

        Returns:
            The topmost ancestor (inclusive) with an ``.order`` file, or None
            if ``path`` itself has none.
        """
        root = None
        candidate = Path(path).resolve()
        while self.has_order_file(candidate):
            root = candidate
            if candidate.parent == candidate:
                break
            candidate = candidate.parent
        return root

    def attachment_path(self, path: Path) -> Path | None:
        """Attachments folder of the wiki, which may not exist on disk."""
        root = self.wiki_root(path)
        if root is None:
            return None
        return root / ATTACHMENTS_DIR

    def is_wiki_root(self, path: Path) -> bool:
        return Path(path).resolve() == self.wiki_root(path)

    def project_name(self) -> str | None:
        """Explicit project, else the wiki root's name less any ``.wiki``."""
        if self.options.project:
            return self.options.project

        if self.options.source_path is None:
            return None
        root = self.wiki_root(self.options.source_path)
        if root is None:
            return None

        return root.name.split(".")[0]

    @property
    def project_in_title(self) -> bool:
        return self.options.project_in_title and any(
            placeholder in self.options.title_format
            for placeholder in PROJECT_PLACEHOLDERS
        )

    def document_title_base(self) -> str:
        """The undecoded title before any project name is added."""
        options = self.options
        if options.title:
            return options.title

        if options.source_file:
            return options.source_file

        if options.source_path is None:
            return ""

        if self.is_wiki_root(options.source_path):
            # Without the project in the title the root would have no name
            if not self.project_in_title:
                return self.project_name() or ""
            return ""

        return Path(options.source_path).resolve().name

    def document_title(self) -> str:
        title = wiki_decode(self.document_title_base())

        if self.project_in_title:
            project = wiki_decode(self.project_name() or "")
            title = self.options.title_format.format(
                project, title, project=project, title=title
            )

        return title.strip()

    def select_target_file(self) -> str:
        if self.options.target_file:
            return self.options.target_file
        return self.document_title()

    def file_heading(self, name: str, level: int) -> str:
        """Markdown heading for a content file at the given level."""
        text = wiki_decode(name)
        if self.options.appendix_processing:
            text = appendix_name(text)
        return f"{'#' * level} {text}"
