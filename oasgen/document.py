"""The OpenAPI document root and its reusable components."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from oasgen.info import ExternalDocumentation, Info, Server, Tag
from oasgen.operation import (
    Operation,
    PathItem,
    Paths,
    SecurityRequirement,
    callback_from_dict,
    callback_to_dict,
)
from oasgen.parameter import Example, Header, Parameter
from oasgen.reference import (
    Reference,
    extract_extensions,
    is_reference_dict,
    item_or_reference_from_dict,
    item_or_reference_to_dict,
)
from oasgen.responses import Link, RequestBody, Response
from oasgen.schema import SchemaObject

OPENAPI_VERSION = "3.1.0"

_T = TypeVar("_T")


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise TypeError(f"field `{key}` must be a list")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"field `{key}` must be a string")
    return value


def _refs_from(
    data: Mapping[str, Any], key: str, reader: Callable[[Any], _T]
) -> dict[str, _T | Reference]:
    values = _mapping(data.get(key, {}), f"field `{key}`")
    return {name: item_or_reference_from_dict(value, reader) for name, value in values.items()}


def _refs_to(values: Mapping[str, Any]) -> dict[str, Any]:
    return {name: item_or_reference_to_dict(value) for name, value in values.items()}


def _raw_or_reference(value: Any) -> dict[str, Any] | Reference:
    if is_reference_dict(value):
        return Reference.from_dict(value)
    return dict(_mapping(value, "security scheme"))


def _security_from(data: Mapping[str, Any]) -> list[SecurityRequirement]:
    requirements: list[SecurityRequirement] = []
    for requirement in _list(data, "security"):
        parsed: SecurityRequirement = {}
        for name, scopes in _mapping(requirement, "security requirement").items():
            if not isinstance(scopes, list) or not all(isinstance(s, str) for s in scopes):
                raise TypeError(f"scopes of security scheme `{name}` must be a list of strings")
            parsed[name] = list(scopes)
        requirements.append(parsed)
    return requirements


@dataclass
class Components:
    """Reusable objects that other parts of the document may reference.

    Security schemes are kept as plain mappings or references.
    """

    security_schemes: dict[str, dict[str, Any] | Reference] = field(default_factory=dict)
    responses: dict[str, Response | Reference] = field(default_factory=dict)
    parameters: dict[str, Parameter | Reference] = field(default_factory=dict)
    examples: dict[str, Example | Reference] = field(default_factory=dict)
    request_bodies: dict[str, RequestBody | Reference] = field(default_factory=dict)
    headers: dict[str, Header | Reference] = field(default_factory=dict)
    schemas: dict[str, SchemaObject] = field(default_factory=dict)
    links: dict[str, Link | Reference] = field(default_factory=dict)
    callbacks: dict[str, dict[str, PathItem | Reference] | Reference] = field(
        default_factory=dict
    )
    path_items: dict[str, PathItem | Reference] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.security_schemes:
            out["securitySchemes"] = {
                name: value.to_dict() if isinstance(value, Reference) else dict(value)
                for name, value in self.security_schemes.items()
            }
        for key, values in (
            ("responses", self.responses),
            ("parameters", self.parameters),
            ("examples", self.examples),
            ("requestBodies", self.request_bodies),
            ("headers", self.headers),
        ):
            if values:
                out[key] = _refs_to(values)
        if self.schemas:
            out["schemas"] = {name: schema.to_dict() for name, schema in self.schemas.items()}
        if self.links:
            out["links"] = _refs_to(self.links)
        if self.callbacks:
            out["callbacks"] = {
                name: value.to_dict() if isinstance(value, Reference) else callback_to_dict(value)
                for name, value in self.callbacks.items()
            }
        if self.path_items:
            out["pathItems"] = _refs_to(self.path_items)
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Components:
        data = _mapping(data, "components")
        schemes = _mapping(data.get("securitySchemes", {}), "field `securitySchemes`")
        schemas = _mapping(data.get("schemas", {}), "field `schemas`")
        return cls(
            security_schemes={name: _raw_or_reference(v) for name, v in schemes.items()},
            responses=_refs_from(data, "responses", Response.from_dict),
            parameters=_refs_from(data, "parameters", Parameter.from_dict),
            examples=_refs_from(data, "examples", Example.from_dict),
            request_bodies=_refs_from(data, "requestBodies", RequestBody.from_dict),
            headers=_refs_from(data, "headers", Header.from_dict),
            schemas={name: SchemaObject.from_dict(s) for name, s in schemas.items()},
            links=_refs_from(data, "links", Link.from_dict),
            callbacks=_refs_from(data, "callbacks", callback_from_dict),
            path_items=_refs_from(data, "pathItems", PathItem.from_dict),
            extensions=extract_extensions(data),
        )


@dataclass
class OpenApi:
    """The root of an OpenAPI document. The version written is always 3.1.0."""

    info: Info = field(default_factory=Info)
    json_schema_dialect: str | None = None
    servers: list[Server] = field(default_factory=list)
    paths: Paths | None = None
    webhooks: dict[str, PathItem | Reference] = field(default_factory=dict)
    components: Components | None = None
    security: list[SecurityRequirement] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    external_docs: ExternalDocumentation | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @property
    def openapi(self) -> str:
        return OPENAPI_VERSION

    def operations(self) -> Iterator[tuple[str, str, Operation]]:
        """Yield ``(path, method, operation)``; referenced path items are skipped."""
        if self.paths is None:
            return
        for path, item in self.paths:
            if isinstance(item, Reference):
                continue
            for method, operation in item.operations():
                yield path, method, operation

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"openapi": OPENAPI_VERSION, "info": self.info.to_dict()}
        if self.json_schema_dialect is not None:
            out["jsonSchemaDialect"] = self.json_schema_dialect
        if self.servers:
            out["servers"] = [server.to_dict() for server in self.servers]
        if self.paths is not None:
            out["paths"] = self.paths.to_dict()
        if self.webhooks:
            out["webhooks"] = _refs_to(self.webhooks)
        if self.components is not None:
            out["components"] = self.components.to_dict()
        if self.security:
            out["security"] = [
                {name: list(scopes) for name, scopes in req.items()} for req in self.security
            ]
        if self.tags:
            out["tags"] = [tag.to_dict() for tag in self.tags]
        if self.external_docs is not None:
            out["externalDocs"] = self.external_docs.to_dict()
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OpenApi:
        data = _mapping(data, "document")
        if "openapi" not in data:
            raise ValueError("missing field `openapi`")
        if "info" not in data:
            raise ValueError("missing field `info`")
        paths = data.get("paths")
        components = data.get("components")
        docs = data.get("externalDocs")
        return cls(
            info=Info.from_dict(data["info"]),
            json_schema_dialect=_optional_str(data, "jsonSchemaDialect"),
            servers=[Server.from_dict(s) for s in _list(data, "servers")],
            paths=Paths.from_dict(paths) if paths is not None else None,
            webhooks=_refs_from(data, "webhooks", PathItem.from_dict),
            components=Components.from_dict(components) if components is not None else None,
            security=_security_from(data),
            tags=[Tag.from_dict(t) for t in _list(data, "tags")],
            external_docs=ExternalDocumentation.from_dict(docs) if docs is not None else None,
            extensions=extract_extensions(data),
        )

    def to_json(self, indent: int | None = None) -> str:
        """Serialise the document as JSON text."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> OpenApi:
        """Read a document from JSON text."""
        return cls.from_dict(json.loads(text))