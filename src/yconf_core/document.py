"""ConfigDocument — the final output of a parse."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .diagnostics import Diagnostic
from .values import TypedValue

ConfigDict = dict[str, TypedValue]


@dataclass
class ConfigDocument:
    """Holds the dotted-path dictionary and the diagnostics of one parse."""

    config: ConfigDict = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    # -- Mapping-style access -------------------------------------------

    def __getitem__(self, path: str) -> TypedValue:
        return self.config[path]

    def __contains__(self, path: object) -> bool:
        return path in self.config

    def __iter__(self) -> Iterator[str]:
        return iter(self.config)

    def __len__(self) -> int:
        return len(self.config)

    def get(self, path: str, default=None):
        return self.config.get(path, default)

    def paths(self) -> list[str]:
        return list(self.config)

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)

    # -- Queries --------------------------------------------------------

    def subtree(self, prefix: str) -> ConfigDict:
        """Entries below *prefix*, keyed by the path relative to it.

        ``doc.subtree("glossary.GlossDiv")`` maps ``"title"`` to the value
        stored at ``"glossary.GlossDiv.title"``.  The prefix itself is not
        included even when it carries a value.
        """
        head = prefix + "."
        return {
            path[len(head):]: value
            for path, value in self.config.items()
            if path.startswith(head)
        }

    def to_plain(self) -> dict[str, object]:
        """Plain Python view: scalars unwrapped, arrays as lists."""
        from .render import to_plain
        return {path: to_plain(value) for path, value in self.config.items()}
