"""Reference objects and helpers for values that may be references."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


@dataclass
class Reference:
    """A ``$ref`` pointing to an object defined elsewhere."""

    reference: str
    summary: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"$ref": self.reference}
        if self.summary is not None:
            out["summary"] = self.summary
        if self.description is not None:
            out["description"] = self.description
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Reference:
        if not is_reference_dict(data):
            raise ValueError("a reference requires a string `$ref` field")
        summary = data.get("summary")
        description = data.get("description")
        for key, value in (("summary", summary), ("description", description)):
            if value is not None and not isinstance(value, str):
                raise TypeError(f"reference field `{key}` must be a string")
        return cls(data["$ref"], summary, description)


def ref(target: str) -> Reference:
    """Build a reference to ``target`` without summary or description."""
    return Reference(target)


def as_item(value: T | Reference) -> T | None:
    """Return the value unless it is a reference, in which case ``None``."""
    return None if isinstance(value, Reference) else value


def is_reference_dict(data: Any) -> bool:
    """Whether ``data`` is a mapping that reads as a reference."""
    return isinstance(data, Mapping) and isinstance(data.get("$ref"), str)


def item_or_reference_from_dict(
    data: Any, item_from_dict: Callable[[Any], T]
) -> T | Reference:
    """Read a reference if ``data`` is one, otherwise read an item with ``item_from_dict``."""
    if is_reference_dict(data):
        return Reference.from_dict(data)
    return item_from_dict(data)


def item_or_reference_to_dict(value: Any) -> Any:
    """Serialise either a reference or an item that has ``to_dict``."""
    return value.to_dict()


def variant_or_unknown(enum_cls: type[E], value: Any) -> E | str | None:
    """Read a known enum member, keep an unknown string as-is, or ``None`` when empty."""
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        if isinstance(value, str):
            return value
        raise TypeError(f"expected a string or a {enum_cls.__name__} value, got {value!r}") from None


def extract_extensions(data: Mapping[str, Any]) -> dict[str, Any]:
    """Collect the ``x-`` prefixed specification extensions of an object."""
    return {key: value for key, value in data.items() if isinstance(key, str) and key.startswith("x-")}