"""Exceptions and problem records raised during an export."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wiki_export.exporter import ExportResult


@dataclass(frozen=True)
class Problem:
    """A logged error or warning found while exporting."""

    level: int
    message: str


class WikiExportError(Exception):
    """Base class for export failures."""


class ValidationError(WikiExportError):
    """The export options can not be used."""


class ExportError(WikiExportError):
    """The export finished but reported fatal problems."""

    def __init__(self, result: "ExportResult"):
        self.result = result
        self.messages = [problem.message for problem in result.errors]
        super().__init__(
            f"Export failed with {len(self.messages)} error(s):\n"
            + "\n".join(f"  - {message}" for message in self.messages)
        )
