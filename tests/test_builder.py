"""Tests for the hierarchy builder."""

import pytest

from yconf_core.builder import AncestryStack, HierarchyBuilder, parse_all
from yconf_core.diagnostics import DiagnosticKind
from yconf_core.errors import YConfError
from yconf_core.line_parser import Record
from yconf_core.options import ParseOptions
from yconf_core.values import NoValue, TypedValue


# ---------------------------------------------------------------------------
# AncestryStack
# ---------------------------------------------------------------------------

class TestAncestryStack:
    def test_rewind_sequence(self):
        stack = AncestryStack()
        paths = [
            stack.enter(width, name)
            for width, name in [(0, "a"), (4, "b"), (4, "c"), (8, "d"), (2, "e")]
        ]
        assert paths == ["a", "a.b", "a.c", "a.c.d", "a.e"]
        assert stack.widths == [0, 2]

    def test_equal_width_replaces_sibling(self):
        stack = AncestryStack()
        stack.enter(0, "a")
        stack.enter(2, "b")
        assert stack.rewind(2) == 1
        assert stack.path == "a"

    def test_rewind_to_root(self):
        stack = AncestryStack()
        stack.enter(0, "a")
        stack.enter(4, "b")
        assert stack.rewind(0) == 2
        assert stack.path == ""
        assert stack.depth == 0

    def test_rewind_keeps_smaller_widths(self):
        stack = AncestryStack()
        stack.enter(0, "a")
        stack.enter(4, "b")
        assert stack.rewind(5) == 0
        assert stack.path == "a.b"

    def test_segment_with_dot_in_name(self):
        stack = AncestryStack()
        stack.enter(0, "v1.2")
        stack.enter(2, "x")
        stack.enter(2, "y")
        assert stack.path == "v1.2.y"


# ---------------------------------------------------------------------------
# parse_all
# ---------------------------------------------------------------------------

def test_headers_become_prefixes():
    doc = parse_all([
        "glossary:",
        '    title:  "example glossary"',
        "    GlossDiv:",
        '        title: "S"',
    ])
    assert doc.config == {
        "glossary.title": TypedValue.string("example glossary"),
        "glossary.GlossDiv.title": TypedValue.string("S"),
    }
    assert "glossary" not in doc
    assert "glossary.GlossDiv" not in doc

def test_rewind_widths():
    doc = parse_all([
        "a:",
        "    b: 1.0",
        "    c:",
        "        d: 2.0",
        "  e: 3.0",
    ])
    assert doc.paths() == ["a.b", "a.c.d", "a.e"]

def test_uneven_indent_attaches_to_nearest_shallower():
    doc = parse_all([
        "a:",
        "    b:",
        "        c: 1.0",
        "      d: 2.0",
    ])
    assert doc.paths() == ["a.b.c", "a.b.d"]

def test_root_siblings():
    doc = parse_all(["a: 1.0", "b: 2.0"])
    assert doc.paths() == ["a", "b"]

def test_value_with_children():
    doc = parse_all(["a: 1.5", "  b: 2.5"])
    assert doc["a"] == TypedValue.floating(1.5)
    assert doc["a.b"] == TypedValue.floating(2.5)

def test_tab_indentation():
    doc = parse_all(["a:", "\tb: TRUE", "\t\tc: FALSE"])
    assert doc["a.b"] == TypedValue.boolean(True)
    assert doc["a.b.c"] == TypedValue.boolean(False)

def test_mixed_indentation_line_dropped():
    doc = parse_all(["a:", "\t b: 1.5", "    c: 2.5"])
    assert doc.paths() == ["a.c"]
    assert [d.kind for d in doc.diagnostics] == [DiagnosticKind.STRUCTURAL]
    assert doc.diagnostics[0].line_no == 2

def test_invalid_lines_do_not_stop_parse():
    doc = parse_all(["a:", "  garbage", "  : 1.0", "  b: 1.0"])
    assert doc.paths() == ["a.b"]
    assert len(doc.diagnostics) == 2

def test_untyped_scalar_acts_as_header():
    doc = parse_all(["year: 1986", "    month: [3]"])
    assert "year" not in doc
    assert doc["year.month"] == TypedValue.integer(3)
    assert doc.diagnostics[0].kind is DiagnosticKind.VALUE_SYNTAX
    assert doc.diagnostics[0].line_no == 1

def test_relaxed_integers():
    doc = parse_all(["year: 1986"], ParseOptions(relaxed_integers=True))
    assert doc["year"] == TypedValue.integer(1986)
    assert doc.diagnostics == []

def test_blank_and_comment_lines_ignored():
    doc = parse_all(["a:", "", "  # comment", "", "  b: 1.0"])
    assert doc.paths() == ["a.b"]
    assert doc.diagnostics == []

def test_comment_does_not_rewind():
    doc = parse_all(["a:", "  b:", "# top level comment", "    c: 1.0"])
    assert doc.paths() == ["a.b.c"]

def test_empty_array_is_header():
    doc = parse_all(["list: []", "  x: 1.0"])
    assert doc.paths() == ["list.x"]

def test_duplicate_path_overwrites():
    doc = parse_all(["a: 1.0", "b: 2.0", "a: 3.0"])
    assert doc["a"] == TypedValue.floating(3.0)
    assert doc.paths() == ["a", "b"]

def test_line_terminators_stripped():
    doc = parse_all(["a:\r\n", "  b: 1.0\n"])
    assert doc.paths() == ["a.b"]

def test_sort_keys():
    lines = ["b: 1.0", "a: 2.0"]
    assert parse_all(lines).paths() == ["b", "a"]
    assert parse_all(lines, ParseOptions(sort_keys=True)).paths() == ["a", "b"]

def test_empty_input():
    doc = parse_all([])
    assert len(doc) == 0
    assert not doc.has_diagnostics


# ---------------------------------------------------------------------------
# HierarchyBuilder
# ---------------------------------------------------------------------------

def test_builder_feed_and_finish():
    builder = HierarchyBuilder()
    builder.feed("a:")
    builder.feed("  b: 1.0")
    doc = builder.finish()
    assert doc.paths() == ["a.b"]

def test_builder_add_record_directly():
    builder = HierarchyBuilder()
    builder.add_record(Record(0, "a", NoValue))
    builder.add_record(Record(3, "b", TypedValue.integer(1)))
    builder.add_record(Record(0, "", NoValue))
    builder.add_record(Record(3, "c", TypedValue.integer(2)))
    assert builder.finish().paths() == ["a.b", "a.c"]

def test_parses_are_independent():
    first = parse_all(["a:", "  b: 1.0"])
    second = parse_all(["  c: 2.0"])
    assert first.paths() == ["a.b"]
    assert second.paths() == ["c"]

def test_builder_rejects_lines_after_finish():
    builder = HierarchyBuilder()
    builder.feed("a: 1.0")
    doc = builder.finish()
    with pytest.raises(YConfError):
        builder.feed("b: 2.0")
    with pytest.raises(YConfError):
        builder.add_record(Record(0, "c", TypedValue.floating(3.0)))
    assert doc.paths() == ["a"]

def test_builder_finish_only_once():
    builder = HierarchyBuilder()
    builder.finish()
    with pytest.raises(YConfError):
        builder.finish()
