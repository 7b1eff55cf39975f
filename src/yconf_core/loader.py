"""Line sources: feed files and strings to the hierarchy builder."""

from __future__ import annotations

import logging
from pathlib import Path

from .builder import parse_all
from .document import ConfigDocument
from .errors import SourceUnavailableError
from .options import ParseOptions

_LOGGER = logging.getLogger(__name__)


def read_lines(path: str | Path, encoding: str = "utf-8-sig") -> list[str]:
    """Read *path* and return its lines without line terminators.

    Raises :class:`SourceUnavailableError` if the file cannot be opened,
    read or decoded.
    """
    path = Path(path)
    try:
        with path.open(encoding=encoding) as fh:
            lines = fh.read().splitlines()
    except OSError as exc:
        raise SourceUnavailableError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SourceUnavailableError(path, f"not valid {encoding}: {exc.reason}") from exc
    _LOGGER.debug("Read %d line(s) from %s", len(lines), path)
    return lines


def parse_text(text: str, options: ParseOptions | None = None) -> ConfigDocument:
    return parse_all(text.splitlines(), options)


def load_file(
    path: str | Path,
    options: ParseOptions | None = None,
    encoding: str = "utf-8-sig",
) -> ConfigDocument:
    """Read and parse a configuration file."""
    return parse_all(read_lines(path, encoding), options)
