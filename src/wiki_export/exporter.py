"""Export a wiki tree into one Markdown document with its attachments."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import TextIO

from wiki_export.attachments import AttachmentFixer
from wiki_export.config import ExportOptions
from wiki_export.errors import ExportError, Problem, ValidationError
from wiki_export.filesystem import FileSystem, LocalFileSystem
from wiki_export.logging_config import get_logger
from wiki_export.naming import fixup_path, wiki_encode
from wiki_export.resolver import ExportOptionsResolver
from wiki_export.traverser import WikiTraverser

logger = get_logger(__name__)


@dataclass
class ExportResult:
    """Result of a full export."""

    document_path: Path
    attachments_path: Path
    fatal_error_level: int = logging.ERROR
    files_written: int = 0
    attachments_copied: int = 0
    total_time_ms: int = 0
    problems: list[Problem] = field(default_factory=list)

    @property
    def errors(self) -> list[Problem]:
        return [p for p in self.problems if p.level >= self.fatal_error_level]

    @property
    def warnings(self) -> list[Problem]:
        return [p for p in self.problems if p.level < self.fatal_error_level]


class Exporter:
    """Merges a wiki tree into a single Markdown document."""

    def __init__(self, fs: FileSystem | None = None, export_date: datetime | None = None):
        self.fs = fs or LocalFileSystem()
        self.export_date = export_date or datetime.now(timezone.utc)

    def export(self, options: ExportOptions) -> ExportResult:
        """Export the wiki described by ``options``.

        Args:
            options: Export options; tidied in place before use.

        Returns:
            ExportResult with the document path and any warnings.

        Raises:
            ValidationError: If the options can not be used.
            ExportError: If fatal problems were found. Every problem of the
                run is reported, not just the first.
        """
        start_time = time.time()

        self.tidy(options)
        self.validate(options)

        resolver = ExportOptionsResolver(options, self.fs)
        target_file = resolver.select_target_file()

        self.fs.create_directory(options.target_path)
        logger.info(f"Created output directory: {options.target_path}")

        document_path = resolver.wiki_file_name(options.target_path, target_file)
        traverser = WikiTraverser(options, resolver, self.fs)

        with self.fs.open_text_writer(document_path) as writer:
            self._write_metadata(writer, options, resolver)
            traversal = traverser.traverse(
                writer, options.source_path, options.source_file
            )

        fixer = self._fix_attachment_references(
            document_path, target_file, options, resolver
        )

        result = ExportResult(
            document_path=document_path,
            attachments_path=fixer.target_path,
            fatal_error_level=options.fatal_error_level,
            files_written=traversal.files_written,
            attachments_copied=len(fixer.copied),
            total_time_ms=int((time.time() - start_time) * 1000),
            problems=traversal.problems + fixer.problems,
        )

        logger.info(
            f"Export complete: {result.files_written} files, "
            f"{result.attachments_copied} attachments, "
            f"{len(result.problems)} problems, {result.total_time_ms}ms"
        )

        if result.errors:
            raise ExportError(result)
        return result

    def tidy(self, options: ExportOptions) -> None:
        """Turn display names given by the user into wiki file names."""
        if options.source_file and options.source_file.lower().endswith(".md"):
            options.source_file = options.source_file[:-3]

        if options.source_path and not self.fs.is_directory(options.source_path):
            encoded = Path(fixup_path(wiki_encode(str(options.source_path))))
            logger.debug(f"Source path {options.source_path} encoded as {encoded}")
            options.source_path = encoded

        if options.source_path and options.source_file:
            candidate = Path(options.source_path) / f"{options.source_file}.md"
            if not self.fs.exists(candidate):
                options.source_file = wiki_encode(options.source_file)

    def validate(self, options: ExportOptions) -> None:
        """Check the options can be exported.

        Raises:
            ValidationError: If they can not.
        """
        error = None
        if not options.source_path:
            error = "Source path must be specified"
        elif not self.fs.is_directory(options.source_path):
            error = f"Source directory '{options.source_path}' does not exist"
        elif not options.target_path:
            error = "Target path must be specified"
        else:
            source = Path(options.source_path).resolve()
            target = Path(options.target_path).resolve()
            if source == target:
                error = "Source and target paths must be different"
            elif source in target.parents:
                error = f"Target path '{target}' must not be inside the source path"

        if error:
            logger.error(error)
            raise ValidationError(error)

    def _write_metadata(
        self, writer: TextIO, options: ExportOptions, resolver: ExportOptionsResolver
    ) -> None:
        date = f"{self.export_date.day} {self.export_date:%B %Y}"
        lines = [
            "---",
            f"title: {resolver.document_title()}",
            f"author: {options.author or ''}",
            f"date: {date}",
        ]
        if options.table_of_contents:
            lines.append("toc: yes")
        lines.append("---")
        writer.write("\n".join(lines) + "\n")

    def _fix_attachment_references(
        self,
        document_path: Path,
        target_file: str,
        options: ExportOptions,
        resolver: ExportOptionsResolver,
    ) -> AttachmentFixer:
        source_path = resolver.attachment_path(options.source_path)
        target_path = Path(options.target_path) / f"{target_file}-attachments"
        logger.info(f"Attachments will be output to {target_path}")

        fixer = AttachmentFixer(source_path, target_path, options.retain_caption, self.fs)
        source = self.fs.read_all_text(document_path)
        self.fs.write_all_text(document_path, fixer.fix(source))
        return fixer
