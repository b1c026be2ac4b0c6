"""Schema objects with OpenAPI additions, and discriminators."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from oasgen.info import ExternalDocumentation, _compact, _dump, _mapping, _nested, _required_str
from oasgen.reference import extract_extensions

_SCHEMA_OWN_KEYS = ("externalDocs", "example")


@dataclass
class SchemaObject:
    """A JSON schema together with the OpenAPI ``externalDocs`` and ``example`` fields.

    ``json_schema`` holds the JSON schema keywords; they are written at the
    same level as the OpenAPI fields.
    """

    json_schema: dict[str, Any] = field(default_factory=dict)
    external_docs: ExternalDocumentation | None = None
    example: Any = None

    def to_dict(self) -> dict[str, Any]:
        if not isinstance(self.json_schema, Mapping):
            raise TypeError("a schema must be a mapping to be written alongside other fields")
        out: dict[str, Any] = dict(self.json_schema)
        out.update(_compact({"externalDocs": _dump(self.external_docs), "example": self.example}))
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SchemaObject:
        data = _mapping(data, "schema")
        return cls(
            json_schema={k: v for k, v in data.items() if k not in _SCHEMA_OWN_KEYS},
            external_docs=_nested(data, "externalDocs", ExternalDocumentation.from_dict),
            example=data.get("example"),
        )


@dataclass
class Discriminator:
    """Names the payload property that selects one of several alternative schemas."""

    property_name: str = ""
    mapping: dict[str, str] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"propertyName": self.property_name, "mapping": dict(self.mapping) or None},
            self.extensions,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Discriminator:
        data = _mapping(data, "discriminator")
        property_name = _required_str(data, "propertyName")
        mapping = _mapping(data.get("mapping", {}), "discriminator mapping")
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in mapping.items()):
            raise TypeError("field `mapping` must map strings to strings")
        return cls(
            property_name=property_name,
            mapping=dict(mapping),
            extensions=extract_extensions(data),
        )