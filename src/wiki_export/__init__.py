"""Azure DevOps wiki to single Markdown document exporter.

A Python library and CLI tool for merging an ordered wiki tree into one
Markdown document, with heading levels adjusted to the nesting and
attachments copied next to the result.
"""

from wiki_export.config import ExportOptions, LoggingSettings
from wiki_export.errors import ExportError, Problem, ValidationError, WikiExportError
from wiki_export.filesystem import FileSystem, LocalFileSystem
from wiki_export.attachments import AttachmentFixer
from wiki_export.resolver import ExportOptionsResolver
from wiki_export.traverser import TraversalResult, WikiTraverser
from wiki_export.exporter import ExportResult, Exporter

__version__ = "0.1.0"

__all__ = [
    "ExportOptions",
    "LoggingSettings",
    "FileSystem",
    "LocalFileSystem",
    "AttachmentFixer",
    "ExportOptionsResolver",
    "WikiTraverser",
    "TraversalResult",
    "Exporter",
    "ExportResult",
    "Problem",
    "WikiExportError",
    "ValidationError",
    "ExportError",
]
