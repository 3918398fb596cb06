"""Shared helpers for reading and writing parsed JSON values."""

from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar

from ..models import JsonKind, json_kind

_T = TypeVar("_T")


def opt_string(obj: dict, key: str) -> Optional[str]:
    """Return obj[key] if it is a string, None for any other JSON type."""
    value = obj.get(key)
    return value if json_kind(value) is JsonKind.STRING else None


def opt_boolean(obj: dict, key: str, default: bool = False) -> bool:
    value = obj.get(key)
    return value if json_kind(value) is JsonKind.BOOLEAN else default


def opt_positive_int(obj: dict, key: str) -> Optional[int]:
    """Return obj[key] as an int if it is a positive integral number."""
    value = obj.get(key)
    if json_kind(value) is not JsonKind.NUMBER or value <= 0:
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    return int(value)


def opt_positive_float(obj: dict, key: str) -> Optional[float]:
    """Return obj[key] as a float if it is a positive number."""
    value = obj.get(key)
    if json_kind(value) is not JsonKind.NUMBER or value <= 0:
        return None
    return float(value)


def opt_strings(obj: dict, key: str) -> list[str]:
    """
    Read a field that holds either a single string or an array of strings.

    Non-string array entries are skipped.
    """
    value = obj.get(key)
    kind = json_kind(value)
    if kind is JsonKind.STRING:
        return [value]
    if kind is JsonKind.ARRAY:
        return [v for v in value if json_kind(v) is JsonKind.STRING]
    return []


def unique(values: Iterable[str]) -> tuple[str, ...]:
    """Remove duplicates while preserving order."""
    seen = set()
    unique_values = []
    for v in values:
        if v not in seen:
            seen.add(v)
            unique_values.append(v)
    return tuple(unique_values)


def parse_objects(values: list, transform: Callable[[Any], Optional[_T]]) -> list[_T]:
    """
    Apply transform to each element, dropping elements that yield None.

    Elements are processed in order, so side effects of transform (such as
    logged warnings) follow the input order.
    """
    results = []
    for value in values:
        parsed = transform(value)
        if parsed is not None:
            results.append(parsed)
    return results


def put_if_not_empty(obj: dict, key: str, value: Any) -> None:
    """Set obj[key] unless value is None or an empty collection.

    Empty strings are kept: they are present values, not absent ones.
    """
    if value is None:
        return
    if isinstance(value, (list, tuple, Mapping)) and not value:
        return
    obj[key] = value
