"""Diagnostics reported while parsing.

None of these abort a parse: a diagnostic means a line was dropped or an
array was truncated, and parsing carried on with the next line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

_LOGGER = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    STRUCTURAL = "structural"              # bad colon, empty name, mixed indent
    VALUE_SYNTAX = "value-syntax"          # scalar or element of unknown type
    TYPE_HOMOGENEITY = "type-homogeneity"  # array mixes element types
    SOURCE_UNAVAILABLE = "source-unavailable"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    line_no: int | None = None
    text: str = ""

    def __str__(self) -> str:
        where = f"line {self.line_no}: " if self.line_no is not None else ""
        if self.text:
            return f"{where}{self.message}: {self.text!r}"
        return f"{where}{self.message}"


def emit(diagnostics: list[Diagnostic] | None, diagnostic: Diagnostic) -> None:
    """Log *diagnostic* and append it to *diagnostics* when a list is given."""
    _LOGGER.warning("%s", diagnostic)
    if diagnostics is not None:
        diagnostics.append(diagnostic)
