# json_ast.py
# Immutable AST nodes produced by json_parser.Parser.
#
# Nodes are frozen dataclasses so two trees compare equal when they have the
# same shape and payloads. Children are held in tuples and never shared.

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class JsonNumber:
    """Numeric literal. A `nan` payload never compares equal, so neither do trees holding one."""
    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class JsonString:
    """String literal. `value` is the raw text between the quotes, escapes included."""
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonArray:
    elements: Tuple["JsonValue", ...] = ()

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator["JsonValue"]:
        return iter(self.elements)

    def to_python(self) -> list:
        return [item.to_python() for item in self.elements]


@dataclass(frozen=True)
class JsonObject:
    """
    Ordered sequence of (key, value) members.

    Duplicate keys are kept in the order they appeared. Only to_python()
    collapses them, with the last member winning.
    """
    members: Tuple[Tuple[str, "JsonValue"], ...] = ()

    def __len__(self) -> int:
        return len(self.members)

    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key, _ in self.members)

    def get(self, key: str) -> Optional["JsonValue"]:
        for member_key, value in self.members:
            if member_key == key:
                return value
        return None

    def to_python(self) -> dict:
        result: dict = {}
        for key, value in self.members:
            result[key] = value.to_python()
        return result


JsonValue = Union[JsonNumber, JsonString, JsonArray, JsonObject]


def node_kind(node: Any) -> str:
    """Short lowercase name of a node's variant, used in log records."""
    return type(node).__name__[len("Json"):].lower()
