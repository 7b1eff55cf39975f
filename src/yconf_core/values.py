"""Value types for YConf Core."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union


class ValueKind(Enum):
    BOOLEAN = "B"
    STRING = "S"
    FLOAT = "F"
    INTEGER = "I"

    @property
    def tag(self) -> str:
        return f"<{self.value}>"


_PY_TYPES = {
    ValueKind.BOOLEAN: bool,
    ValueKind.STRING: str,
    ValueKind.FLOAT: float,
    ValueKind.INTEGER: int,
}


@dataclass(frozen=True)
class TypedValue:
    """A homogeneous, non-empty sequence of one primitive type.

    Scalars are sequences of length 1.  ``raw`` keeps the value text as it
    appeared after the colon (quotes included) for diagnostics.
    """

    kind: ValueKind
    items: tuple
    raw: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("TypedValue needs at least one item")
        expected = _PY_TYPES[self.kind]
        for item in self.items:
            # bool is a subclass of int
            if type(item) is not expected:
                raise TypeError(
                    f"{self.kind.name} value cannot hold {type(item).__name__}"
                )

    @property
    def value(self):
        """The first (for scalars, the only) element."""
        return self.items[0]

    @property
    def is_array(self) -> bool:
        return len(self.items) > 1

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator:
        return iter(self.items)

    def __bool__(self) -> bool:
        return True

    # -- Constructors ---------------------------------------------------

    @classmethod
    def boolean(cls, *items: bool, raw: str = "") -> "TypedValue":
        return cls(ValueKind.BOOLEAN, tuple(items), raw)

    @classmethod
    def string(cls, *items: str, raw: str = "") -> "TypedValue":
        return cls(ValueKind.STRING, tuple(items), raw)

    @classmethod
    def floating(cls, *items: float, raw: str = "") -> "TypedValue":
        return cls(ValueKind.FLOAT, tuple(items), raw)

    @classmethod
    def integer(cls, *items: int, raw: str = "") -> "TypedValue":
        return cls(ValueKind.INTEGER, tuple(items), raw)


class _NoValue:
    """Singleton for a line that carries no usable value."""

    _instance: "_NoValue | None" = None

    def __new__(cls) -> "_NoValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NoValue"

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0


NoValue = _NoValue()

Value = Union[TypedValue, _NoValue]
