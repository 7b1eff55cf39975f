"""Parser options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    # Accept digit-only scalars such as ``year: 1986`` as INTEGER.  Off by
    # default: the top-level integer branch only fires on text containing
    # a decimal point, so bare integers are reachable through arrays only.
    relaxed_integers: bool = False
    # Return the ConfigDict ordered by path instead of by insertion.
    sort_keys: bool = False


DEFAULT_OPTIONS = ParseOptions()
