"""YConf Core — parser for indentation-based configuration files."""

from .builder import AncestryStack, HierarchyBuilder, parse_all
from .diagnostics import Diagnostic, DiagnosticKind
from .document import ConfigDict, ConfigDocument
from .errors import SourceUnavailableError, YConfError
from .line_parser import Record, parse_line
from .loader import load_file, parse_text, read_lines
from .options import ParseOptions
from .render import format_entry, format_line, format_tagged, format_value, render_config, to_plain
from .values import NoValue, TypedValue, Value, ValueKind

__all__ = [
    "parse_line",
    "parse_all",
    "parse_text",
    "load_file",
    "read_lines",
    "Record",
    "AncestryStack",
    "HierarchyBuilder",
    "ConfigDict",
    "ConfigDocument",
    "Diagnostic",
    "DiagnosticKind",
    "ParseOptions",
    "NoValue",
    "TypedValue",
    "Value",
    "ValueKind",
    "YConfError",
    "SourceUnavailableError",
    "format_entry",
    "format_line",
    "format_tagged",
    "format_value",
    "render_config",
    "to_plain",
]
