"""Rendering helpers built on the public TypedValue accessors.

Two textual forms are produced:

- the dump form used by ``yconf-dump``: ``path = <TAG>value`` with ``<B>``,
  ``<S>``, ``<F>`` and ``<I>`` tags and bracketed lists for arrays;
- the source form ``name: value``, which parses back to an equal value.
"""

from __future__ import annotations

from typing import Mapping

from .values import TypedValue, Value, ValueKind, _NoValue


def _fmt_item(kind: ValueKind, item) -> str:
    if kind is ValueKind.STRING:
        return f'"{item}"'
    if kind is ValueKind.BOOLEAN:
        return "TRUE" if item else "FALSE"
    if kind is ValueKind.FLOAT:
        return _fmt_float(item)
    return str(item)


def _fmt_float(v: float) -> str:
    """repr() of *v*, forced to contain a decimal point (``1e-05`` -> ``1.0e-05``)."""
    text = repr(v)
    if "." not in text:
        mantissa, sep, exponent = text.partition("e")
        text = f"{mantissa}.0{sep}{exponent}"
    return text


def _fmt_items(value: TypedValue) -> str:
    parts = [_fmt_item(value.kind, item) for item in value.items]
    if value.is_array:
        return "[" + ", ".join(parts) + "]"
    return parts[0]


# ---------------------------------------------------------------------------
# Dump form
# ---------------------------------------------------------------------------

def format_tagged(value: TypedValue) -> str:
    return value.kind.tag + _fmt_items(value)


def format_entry(path: str, value: TypedValue) -> str:
    return f"{path} = {format_tagged(value)}"


def render_config(config: Mapping[str, TypedValue]) -> list[str]:
    return [format_entry(path, value) for path, value in config.items()]


# ---------------------------------------------------------------------------
# Source form
# ---------------------------------------------------------------------------

def format_value(value: Value) -> str:
    """Render *value* as text that parses back to an equal value."""
    if isinstance(value, _NoValue):
        return ""
    # A bare integer scalar is only recognised inside brackets
    if value.kind is ValueKind.INTEGER and not value.is_array:
        return f"[{value.value}]"
    return _fmt_items(value)


def format_line(name: str, value: Value, indent: str = "") -> str:
    text = format_value(value)
    return f"{indent}{name}: {text}" if text else f"{indent}{name}:"


# ---------------------------------------------------------------------------
# Plain Python
# ---------------------------------------------------------------------------

def to_plain(value: Value):
    """Scalar for single-item values, list for arrays, None for NoValue."""
    if isinstance(value, _NoValue):
        return None
    if value.is_array:
        return list(value.items)
    return value.value
