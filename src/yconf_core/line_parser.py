"""Line parser: turns one text line into an (indent, name, value) record.

A line has the shape ``<indent><name>: <value>``.  Indentation is a run of
spaces or a run of TABs (each TAB counts as one unit), never both.  The
value is classified, first match wins, as

- a string: ``"..."`` (quotes stripped, the rest kept verbatim),
- an array: ``[a, b, ...]`` of strings, booleans, floats or integers,
- a boolean: any text containing ``TRUE`` or ``FALSE``,
- a float: a decimal literal containing ``.``,
- an integer (see :func:`parse_as_integer`).

Anything else is reported and yields :data:`NoValue`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .diagnostics import Diagnostic, DiagnosticKind, emit
from .options import DEFAULT_OPTIONS, ParseOptions
from .values import NoValue, TypedValue, Value, ValueKind


_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Record:
    """Parse result of a single line.

    ``name`` is empty for blank, comment and rejected lines.
    """

    indent: int
    name: str
    value: Value = NoValue


# ---------------------------------------------------------------------------
# Indentation
# ---------------------------------------------------------------------------

def split_indentation(line: str) -> tuple[int, str, bool]:
    """Split *line* into ``(width, content, mixed)``.

    Leading spaces are stripped first, then leading TABs.  ``mixed`` is True
    when the indentation combines both characters in either order.
    """
    no_spaces = line.lstrip(" ")
    content = no_spaces.lstrip("\t")
    width = len(line) - len(content)
    had_spaces = len(no_spaces) != len(line)
    had_tabs = len(content) != len(no_spaces)
    mixed = content.startswith(" ") or (had_spaces and had_tabs)
    return width, content, mixed


# ---------------------------------------------------------------------------
# Scalar recognisers
# ---------------------------------------------------------------------------

def parse_as_string(text: str) -> str | None:
    if len(text) > 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return None


def parse_as_boolean(text: str) -> bool | None:
    """Substring match: ``TRUEISH`` is TRUE, ``NOT_FALSE`` is FALSE."""
    if "TRUE" in text:
        return True
    if "FALSE" in text:
        return False
    return None


def parse_as_float(text: str) -> float | None:
    """Parse a decimal literal with a ``.``; overflow (``1.0e999``) is rejected."""
    if "." in text and _FLOAT_RE.fullmatch(text):
        value = float(text)
        if math.isfinite(value):
            return value
    return None


def parse_as_integer(text: str, require_point: bool = True) -> int | None:
    """Parse *text* as an integer literal.

    With ``require_point`` (the scalar default) the text must also contain a
    ``.``, which no integer literal does, so bare scalars like ``1986`` come
    back as None.  Array elements are parsed with ``require_point=False``.
    """
    if require_point and "." not in text:
        return None
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    return None


def _classify_element(element: str) -> tuple[ValueKind, object] | None:
    s = parse_as_string(element)
    if s is not None:
        return ValueKind.STRING, s
    b = parse_as_boolean(element)
    if b is not None:
        return ValueKind.BOOLEAN, b
    f = parse_as_float(element)
    if f is not None:
        return ValueKind.FLOAT, f
    i = parse_as_integer(element, require_point=False)
    if i is not None:
        return ValueKind.INTEGER, i
    return None


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

def parse_array(
    text: str,
    *,
    line_no: int | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> Value:
    """Parse a bracketed, comma-separated array.

    The first element fixes the array type.  An element of another type, or
    of no recognised type, stops parsing and the array keeps only the
    elements before it.  One empty element after a trailing comma is ignored.
    """
    inner = text[1:-1]
    if not inner.strip():
        return NoValue

    elements = [e.strip() for e in inner.split(",")]
    if len(elements) > 1 and not elements[-1]:
        elements.pop()

    kind: ValueKind | None = None
    items: list = []
    for element in elements:
        parsed = _classify_element(element)
        if parsed is None:
            emit(diagnostics, Diagnostic(
                DiagnosticKind.VALUE_SYNTAX,
                f"unrecognized array element {element!r}",
                line_no,
                text,
            ))
            break
        element_kind, item = parsed
        if kind is None:
            kind = element_kind
        elif element_kind is not kind:
            emit(diagnostics, Diagnostic(
                DiagnosticKind.TYPE_HOMOGENEITY,
                f"array entries have inconsistent types "
                f"({kind.name} then {element_kind.name})",
                line_no,
                text,
            ))
            break
        items.append(item)

    if kind is None:
        return NoValue
    return TypedValue(kind, tuple(items), text)


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def classify_value(
    text: str,
    *,
    options: ParseOptions = DEFAULT_OPTIONS,
    line_no: int | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> Value:
    """Classify an already-trimmed value string."""
    if not text:
        return NoValue

    s = parse_as_string(text)
    if s is not None:
        return TypedValue.string(s, raw=text)

    if text.startswith("[") and text.endswith("]"):
        return parse_array(text, line_no=line_no, diagnostics=diagnostics)

    b = parse_as_boolean(text)
    if b is not None:
        return TypedValue.boolean(b, raw=text)

    f = parse_as_float(text)
    if f is not None:
        return TypedValue.floating(f, raw=text)

    i = parse_as_integer(text, require_point=not options.relaxed_integers)
    if i is not None:
        return TypedValue.integer(i, raw=text)

    emit(diagnostics, Diagnostic(
        DiagnosticKind.VALUE_SYNTAX, "unrecognized value syntax", line_no, text
    ))
    return NoValue


# ---------------------------------------------------------------------------
# parse_line
# ---------------------------------------------------------------------------

def parse_line(
    line: str,
    *,
    line_no: int | None = None,
    diagnostics: list[Diagnostic] | None = None,
    options: ParseOptions | None = None,
) -> Record:
    """Parse one line (without its newline) into a :class:`Record`.

    Blank lines, comments and rejected lines give a record with an empty
    name.  A name with an empty value gives a header record whose value is
    :data:`NoValue`.
    """
    options = options or DEFAULT_OPTIONS

    width, content, mixed = split_indentation(line)
    if not content.strip():
        return Record(width, "")

    if mixed:
        emit(diagnostics, Diagnostic(
            DiagnosticKind.STRUCTURAL,
            "mixing of TAB(s) and white space(s) in indentation",
            line_no,
            line,
        ))
        return Record(width, "")

    if content.startswith("#"):
        return Record(width, "")

    n = content.find(":")
    if n < 0:
        emit(diagnostics, Diagnostic(
            DiagnosticKind.STRUCTURAL, "missing colon separator", line_no, line
        ))
        return Record(width, "")

    # A colon at position 0 leaves the name empty as well
    name = content[:n].strip()
    if not name:
        emit(diagnostics, Diagnostic(
            DiagnosticKind.STRUCTURAL, "missing parameter name", line_no, line
        ))
        return Record(width, "")

    value = classify_value(
        content[n + 1:].strip(),
        options=options,
        line_no=line_no,
        diagnostics=diagnostics,
    )
    return Record(width, name, value)
