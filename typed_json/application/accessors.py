# typed_json/application/accessors.py

"""Typed accessors for reading values out of JSON object nodes

Every accessor takes an object node (a Document root or an object returned by
read_object) and a key, and either returns the value coerced to the requested
shape or raises:

- NotAnObjectError when the node itself is not an object
- KeyNotFoundError when the key is absent
- TypeMismatchError when the value has the wrong kind

Checks run in that order. Accessors keep no state between calls and never
modify the tree, so repeated calls with the same arguments return equal results.
"""

# Standard library imports
from collections.abc import Sequence
from math import isfinite
from math import trunc

# Local imports
from typed_json.core.domain.enums import ValueKind
from typed_json.core.domain.errors import KeyNotFoundError
from typed_json.core.domain.errors import NotAnObjectError
from typed_json.core.domain.errors import TypeMismatchError
from typed_json.core.domain.values import JsonArray
from typed_json.core.domain.values import JsonBool
from typed_json.core.domain.values import JsonNumber
from typed_json.core.domain.values import JsonObject
from typed_json.core.domain.values import JsonString
from typed_json.core.domain.values import JsonValue


def _as_object(node: JsonValue) -> JsonObject:
    if not isinstance(node, JsonObject):
        raise NotAnObjectError(node.path, node.kind)
    return node


def _lookup(node: JsonValue, key: str) -> JsonValue:
    obj = _as_object(node)
    value = obj.get(key)
    if value is None:
        raise KeyNotFoundError(obj.path, key)
    return value


def _require[V: JsonValue](value: JsonValue, key: str, expected: type[V]) -> V:
    if not isinstance(value, expected):
        raise TypeMismatchError(value.path, key, expected.kind, value.kind)
    return value


def _truncate(number: JsonNumber, key: str, index: int | None = None) -> int:
    # Toward zero: 1.9 -> 1, -1.9 -> -1
    value = number.value
    if isinstance(value, int):
        return value
    if not isfinite(value):
        # Only reachable when the document was parsed with allow_non_finite
        raise TypeMismatchError(
            number.path,
            key,
            ValueKind.NUMBER,
            ValueKind.NUMBER,
            index=index,
            message=f"Cannot read non-finite number {value!r} at {number.path} as an integer",
        )
    return trunc(value)


# ============================================================================
# Scalar accessors
# ============================================================================


def read_value(node: JsonValue, key: str) -> JsonValue:
    """Read the raw value stored under key, whatever its kind"""
    return _lookup(node, key)


def read_string(node: JsonValue, key: str) -> str:
    """Read a string value

    Args:
        node: Object node to read from
        key: Member name

    Returns:
        The string stored under key
    """
    value = _require(_lookup(node, key), key, JsonString)
    return value.value


def read_number_as_int(node: JsonValue, key: str) -> int:
    """Read a number, truncated toward zero to an int

    JSON has no separate integer kind, so ``1``, ``1.0`` and ``1.9`` all read
    as 1. Integral literals keep full precision however large they are.
    """
    value = _require(_lookup(node, key), key, JsonNumber)
    return _truncate(value, key)


def read_number_as_float(node: JsonValue, key: str) -> float:
    """Read a number as a float"""
    value = _require(_lookup(node, key), key, JsonNumber)
    return float(value.value)


def read_bool(node: JsonValue, key: str) -> bool:
    """Read a boolean value. Numbers and strings are never coerced."""
    value = _require(_lookup(node, key), key, JsonBool)
    return value.value


def read_object(node: JsonValue, key: str) -> JsonObject:
    """Read a nested object

    The returned node is part of the same tree as ``node`` (no copy) and is a
    valid ``node`` argument for any accessor, so reads can nest to any depth.
    """
    return _require(_lookup(node, key), key, JsonObject)


def has_key(node: JsonValue, key: str) -> bool:
    """Whether an object node has a member named key"""
    return key in _as_object(node)


# ============================================================================
# Array accessors
# ============================================================================


def read_array(node: JsonValue, key: str) -> tuple[JsonValue, ...]:
    """Read an array of values of any kind"""
    value = _require(_lookup(node, key), key, JsonArray)
    return value.items


def _read_homogeneous[V: JsonValue](node: JsonValue, key: str, expected: type[V]) -> list[V]:
    # All-or-nothing: the first element of the wrong kind fails the whole read
    items: list[V] = []
    for index, item in enumerate(read_array(node, key)):
        if not isinstance(item, expected):
            raise TypeMismatchError(item.path, key, expected.kind, item.kind, index=index)
        items.append(item)
    return items


def read_array_of_string(node: JsonValue, key: str) -> list[str]:
    """Read an array whose elements are all strings

    Args:
        node: Object node to read from
        key: Member name

    Returns:
        A new list of the strings, in array order

    Raises:
        TypeMismatchError: The value is not an array, or one of its elements is
            not a string. Non-string elements are never skipped.
    """
    return [item.value for item in _read_homogeneous(node, key, JsonString)]


def read_array_of_int(node: JsonValue, key: str) -> list[int]:
    """Read an array of numbers, each truncated toward zero"""
    items = _read_homogeneous(node, key, JsonNumber)
    return [_truncate(item, key, index) for index, item in enumerate(items)]


def read_array_of_bool(node: JsonValue, key: str) -> list[bool]:
    """Read an array whose elements are all booleans"""
    return [item.value for item in _read_homogeneous(node, key, JsonBool)]


def read_array_of_object(node: JsonValue, key: str) -> list[JsonObject]:
    """Read an array of objects, e.g. a list of level definitions"""
    return _read_homogeneous(node, key, JsonObject)


# ============================================================================
# Path traversal
# ============================================================================


def read_path(node: JsonValue, path: str | Sequence[str]) -> JsonValue:
    """Follow a chain of object keys from node

    Args:
        node: Object node to start from
        path: Dotted key path such as ``"screenSize.width"``, or a sequence of
            keys when a key itself contains a dot

    Returns:
        The value at the end of the path

    Raises:
        ValueError: path is empty
    """
    keys = path.split(".") if isinstance(path, str) else list(path)
    if not keys or path == "":
        raise ValueError("Path must name at least one key")

    current = node
    for key in keys:
        current = _lookup(current, key)
    return current


__all__ = [
    "read_value",
    "read_string",
    "read_number_as_int",
    "read_number_as_float",
    "read_bool",
    "read_object",
    "has_key",
    "read_array",
    "read_array_of_string",
    "read_array_of_int",
    "read_array_of_bool",
    "read_array_of_object",
    "read_path",
]
