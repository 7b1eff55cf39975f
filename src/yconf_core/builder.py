"""Hierarchy builder: rebuilds dotted paths from indentation.

Every named line opens a segment.  A segment stays open while following
lines are indented deeper than it; a line at the same or a shallower width
closes it.  Only lines with a value end up in the dictionary, header lines
just shape the path of the lines under them::

    glossary:                      (header)
        title: "example glossary"  -> glossary.title
        GlossDiv:                  (header)
            title: "S"             -> glossary.GlossDiv.title
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .diagnostics import Diagnostic
from .document import ConfigDict, ConfigDocument
from .errors import YConfError
from .line_parser import Record, parse_line
from .options import DEFAULT_OPTIONS, ParseOptions
from .values import TypedValue

_LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AncestryStack
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class _Frame:
    width: int
    length: int  # characters this segment added to the path, "." included


class AncestryStack:
    """Open segments of the current path, innermost last."""

    def __init__(self) -> None:
        self._frames: list[_Frame] = []
        self._path = ""

    @property
    def path(self) -> str:
        return self._path

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def widths(self) -> list[int]:
        return [f.width for f in self._frames]

    def rewind(self, width: int) -> int:
        """Pop every frame whose width is >= *width*; return how many."""
        popped = 0
        while self._frames and self._frames[-1].width >= width:
            frame = self._frames.pop()
            self._path = self._path[: len(self._path) - frame.length]
            popped += 1
        return popped

    def push(self, width: int, name: str) -> str:
        """Open segment *name* at *width* and return the new full path."""
        segment = f".{name}" if self._path else name
        self._frames.append(_Frame(width, len(segment)))
        self._path += segment
        return self._path

    def enter(self, width: int, name: str) -> str:
        """Rewind to *width*, then push *name*."""
        self.rewind(width)
        return self.push(width, name)


# ---------------------------------------------------------------------------
# HierarchyBuilder
# ---------------------------------------------------------------------------

class HierarchyBuilder:
    """Single-pass builder; feed lines in order, then call :meth:`finish`.

    Usage::

        builder = HierarchyBuilder()
        for line in lines:
            builder.feed(line)
        doc = builder.finish()

    A builder is good for one parse only: once :meth:`finish` has handed the
    document to the caller, further calls raise :class:`YConfError`.
    """

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS
        self._stack = AncestryStack()
        self._config: ConfigDict = {}
        self._diagnostics: list[Diagnostic] = []
        self._line_no = 0
        self._finished = False

    def _check_open(self) -> None:
        if self._finished:
            raise YConfError("builder already finished; start a new HierarchyBuilder")

    def feed(self, line: str) -> None:
        self._check_open()
        self._line_no += 1
        record = parse_line(
            line.rstrip("\r\n"),
            line_no=self._line_no,
            diagnostics=self._diagnostics,
            options=self.options,
        )
        self.add_record(record)

    def add_record(self, record: Record) -> None:
        self._check_open()
        if not record.name:
            return
        path = self._stack.enter(record.indent, record.name)
        if isinstance(record.value, TypedValue):
            if path in self._config:
                _LOGGER.debug("Overwriting duplicate path %s", path)
            self._config[path] = record.value

    def finish(self) -> ConfigDocument:
        self._check_open()
        self._finished = True
        config = self._config
        if self.options.sort_keys:
            config = dict(sorted(config.items()))
        _LOGGER.debug(
            "Parsed %d line(s): %d entries, %d diagnostic(s)",
            self._line_no,
            len(config),
            len(self._diagnostics),
        )
        return ConfigDocument(config=config, diagnostics=self._diagnostics)


def parse_all(lines: Iterable[str], options: ParseOptions | None = None) -> ConfigDocument:
    """Parse an ordered sequence of lines into a :class:`ConfigDocument`."""
    builder = HierarchyBuilder(options)
    for line in lines:
        builder.feed(line)
    return builder.finish()
