"""Exceptions raised by YConf Core."""

from __future__ import annotations

from pathlib import Path

from .diagnostics import Diagnostic, DiagnosticKind


class YConfError(Exception):
    """Base class for all YConf Core errors."""


class SourceUnavailableError(YConfError):
    """The line source could not be opened or read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read '{self.path}': {reason}")

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(DiagnosticKind.SOURCE_UNAVAILABLE, str(self))
