"""Export options and configuration loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_TITLE_FORMAT = "{project} {title}"
DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass
class LoggingSettings:
    """Where export problems are logged.

    Only warnings and errors reach stderr unless asked for; no log file is
    written unless one is named.
    """

    level: str = "WARNING"
    file: str | None = None
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class ExportOptions:
    """Options for exporting a wiki into a single Markdown document."""

    source_path: Path | None = None
    source_file: str | None = None
    target_path: Path | None = None
    target_file: str | None = None
    project: str | None = None
    project_in_title: bool = True
    title: str | None = None
    title_format: str = DEFAULT_TITLE_FORMAT
    author: str | None = None
    auto_heading: bool = True
    auto_level: bool = True
    retain_caption: bool = False
    appendix_processing: bool = True
    appendix_heading_level: int = 1
    table_of_contents: bool = False
    # Problems logged at or above this level fail the export
    fatal_error_level: int = logging.ERROR
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, path: str | Path) -> "ExportOptions":
        """Load export options from a YAML file.

        Keys missing from the file keep their defaults, so a file naming only
        ``source_path`` and ``target_path`` is enough for an export.

        Args:
            path: Path to the options YAML file.

        Returns:
            ExportOptions with paths, title and heading switches from the file.

        Raises:
            FileNotFoundError: If the options file doesn't exist.
            yaml.YAMLError: If the file contains invalid YAML.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Options file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "ExportOptions":
        """Create ExportOptions from a dictionary."""
        logging_data = data.get("logging", {})
        logging_settings = LoggingSettings(
            level=logging_data.get("level", "WARNING"),
            file=logging_data.get("file"),
            format=logging_data.get("format", DEFAULT_LOG_FORMAT),
        )

        source_path = data.get("source_path")
        target_path = data.get("target_path")

        return cls(
            source_path=Path(source_path) if source_path else None,
            source_file=data.get("source_file"),
            target_path=Path(target_path) if target_path else None,
            target_file=data.get("target_file"),
            project=data.get("project"),
            project_in_title=data.get("project_in_title", True),
            title=data.get("title"),
            title_format=data.get("title_format", DEFAULT_TITLE_FORMAT),
            author=data.get("author"),
            auto_heading=data.get("auto_heading", True),
            auto_level=data.get("auto_level", True),
            retain_caption=data.get("retain_caption", False),
            appendix_processing=data.get("appendix_processing", True),
            appendix_heading_level=int(data.get("appendix_heading_level", 1)),
            table_of_contents=data.get("table_of_contents", False),
            fatal_error_level=parse_level(data.get("fatal_error_level", "ERROR")),
            logging=logging_settings,
        )

    @classmethod
    def default(cls) -> "ExportOptions":
        """Create ExportOptions with default values."""
        return cls()


def parse_level(value: str | int) -> int:
    """Convert a level name such as ``warning`` to its logging number."""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {value}")
    return level
