"""
Typed value tree produced by the parser.

Six frozen variants form a closed union; consumers match on them
exhaustively. Trees own their data and never point back into the source text.
"""

from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any
from typing import assert_never


@dataclass(frozen=True, slots=True)
class Null:
    pass


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


@dataclass(frozen=True, slots=True)
class Number:
    """Every JSON number, integral or not, held as a 64-bit float."""

    value: float


@dataclass(frozen=True, slots=True)
class String:
    value: str


@dataclass(frozen=True, slots=True)
class Array:
    items: tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]


@dataclass(frozen=True, slots=True)
class Object:
    """
    Mapping of decoded member names to values.

    Duplicate member names resolve to the last occurrence in the source; the
    parser overwrites earlier entries as it goes. Member order is not part of
    the value: two objects with the same entries compare equal.
    """

    entries: Mapping[str, "Value"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.entries, MappingProxyType):
            # Copy so later mutation of the caller's dict can't leak in
            object.__setattr__(
                self, "entries", MappingProxyType(dict(self.entries))
            )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))


type Value = Null | Boolean | Number | String | Array | Object


def to_python(value: Value) -> Any:
    """
    Converts a value tree into plain Python objects.

    Null becomes None, containers become list/dict, scalars their payload.
    """
    match value:
        case Null():
            return None
        case Boolean(flag):
            return flag
        case Number(number):
            return number
        case String(text):
            return text
        case Array(items):
            return [to_python(item) for item in items]
        case Object(entries):
            return {key: to_python(item) for key, item in entries.items()}
        case _:
            assert_never(value)
