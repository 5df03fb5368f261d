# typed_json/core/domain/values.py

"""Core JSON value model

A parsed document is a tree of JsonValue nodes, one subclass per JSON kind.
Nodes are immutable once built: attributes cannot be reassigned, object members
are exposed through a read-only mapping and array items through a tuple. Each
node remembers its path inside the document so failures can point at the exact
location of the offending value.
"""

# Standard library imports
from collections.abc import Iterator
from json import dumps
from math import isfinite
from re import compile
from types import MappingProxyType
from typing import ClassVar

# Local imports
from typed_json.core.domain.enums import ValueKind
from typed_json.core.types.json import JSONType

ROOT_PATH = "$"

_IDENTIFIER = compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def member_path(parent: str, key: str) -> str:
    """Path of an object member, bracket-quoted when the key is not a plain name"""
    if _IDENTIFIER.match(key):
        return f"{parent}.{key}"
    return f"{parent}[{dumps(key, ensure_ascii=False)}]"


def element_path(parent: str, index: int) -> str:
    """Path of an array element"""
    return f"{parent}[{index}]"


class JsonValue:
    """Base class of the JSON value tagged union

    Subclasses set ``kind`` and hold their payload in slots. Equality compares
    kind and payload only, so the same value found at two different paths
    compares equal.
    """

    __slots__ = ("path",)

    kind: ClassVar[ValueKind]

    def __init__(self, path: str = ROOT_PATH) -> None:
        object.__setattr__(self, "path", path)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _payload(self) -> object:
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self.kind is other.kind and self._payload() == other._payload()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload()!r})"

    def to_python(self) -> JSONType:
        """Convert this subtree back to plain Python data"""
        raise NotImplementedError


class JsonNull(JsonValue):
    __slots__ = ()

    kind = ValueKind.NULL

    def __repr__(self) -> str:
        return "JsonNull()"

    def to_python(self) -> JSONType:
        return None


class JsonBool(JsonValue):
    __slots__ = ("value",)

    kind = ValueKind.BOOLEAN

    def __init__(self, value: bool, path: str = ROOT_PATH) -> None:
        super().__init__(path)
        object.__setattr__(self, "value", value)

    def _payload(self) -> object:
        return self.value

    def to_python(self) -> JSONType:
        return self.value


class JsonNumber(JsonValue):
    """JSON number

    Integral literals are kept as Python ints so large identifiers survive
    without float rounding; everything else is a float.
    """

    __slots__ = ("value",)

    kind = ValueKind.NUMBER

    def __init__(self, value: int | float, path: str = ROOT_PATH) -> None:
        super().__init__(path)
        object.__setattr__(self, "value", value)

    def _payload(self) -> object:
        return self.value

    def to_python(self) -> JSONType:
        return self.value


class JsonString(JsonValue):
    __slots__ = ("value",)

    kind = ValueKind.STRING

    def __init__(self, value: str, path: str = ROOT_PATH) -> None:
        super().__init__(path)
        object.__setattr__(self, "value", value)

    def _payload(self) -> object:
        return self.value

    def to_python(self) -> JSONType:
        return self.value


class JsonArray(JsonValue):
    __slots__ = ("items",)

    kind = ValueKind.ARRAY

    def __init__(self, items: tuple[JsonValue, ...], path: str = ROOT_PATH) -> None:
        super().__init__(path)
        object.__setattr__(self, "items", tuple(items))

    def _payload(self) -> object:
        return self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> JsonValue:
        return self.items[index]

    def to_python(self) -> JSONType:
        return [item.to_python() for item in self.items]


class JsonObject(JsonValue):
    """JSON object; member order follows the source text"""

    __slots__ = ("members",)

    kind = ValueKind.OBJECT

    def __init__(self, members: dict[str, JsonValue], path: str = ROOT_PATH) -> None:
        super().__init__(path)
        object.__setattr__(self, "members", MappingProxyType(dict(members)))

    def _payload(self) -> object:
        # Plain dict so two objects compare by content, not proxy identity
        return dict(self.members)

    def __repr__(self) -> str:
        return f"JsonObject({dict(self.members)!r})"

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def get(self, key: str) -> JsonValue | None:
        return self.members.get(key)

    def keys(self) -> list[str]:
        return list(self.members)

    def to_python(self) -> JSONType:
        return {key: value.to_python() for key, value in self.members.items()}


def from_python(
    data: JSONType, path: str = ROOT_PATH, allow_non_finite: bool = False
) -> JsonValue:
    """Wrap parser output into a JsonValue tree

    Args:
        data: Plain Python data as produced by the stdlib json parser
        path: Path of ``data`` inside its document
        allow_non_finite: Accept NaN and infinities as numbers

    Returns:
        Root node of the new tree

    Raises:
        TypeError: ``data`` contains a type JSON cannot represent
        ValueError: ``data`` contains a non-finite float and allow_non_finite is False
    """
    # bool must be checked before int, it is an int subclass
    if data is None:
        return JsonNull(path)
    if isinstance(data, bool):
        return JsonBool(data, path)
    if isinstance(data, int):
        return JsonNumber(data, path)
    if isinstance(data, float):
        if not allow_non_finite and not isfinite(data):
            raise ValueError(f"Non-finite number {data!r} at {path} is not valid JSON")
        return JsonNumber(data, path)
    if isinstance(data, str):
        return JsonString(data, path)
    if isinstance(data, (list, tuple)):
        return JsonArray(
            tuple(
                from_python(item, element_path(path, index), allow_non_finite)
                for index, item in enumerate(data)
            ),
            path,
        )
    if isinstance(data, dict):
        members: dict[str, JsonValue] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                raise TypeError(f"Object key {key!r} at {path} is not a string")
            members[key] = from_python(value, member_path(path, key), allow_non_finite)
        return JsonObject(members, path)
    raise TypeError(f"Cannot represent {type(data).__name__} at {path} as JSON")


__all__ = [
    "ROOT_PATH",
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "from_python",
    "member_path",
    "element_path",
]
