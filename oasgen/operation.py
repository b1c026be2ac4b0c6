"""Operations, path items, paths, callbacks and security requirements."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from oasgen.info import ExternalDocumentation, Server
from oasgen.parameter import Parameter
from oasgen.reference import (
    Reference,
    extract_extensions,
    item_or_reference_from_dict,
    item_or_reference_to_dict,
)
from oasgen.responses import RequestBody, Responses

SecurityRequirement = dict[str, list[str]]
Callback = dict[str, "PathItem | Reference"]

_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


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


def _security_from(data: Mapping[str, Any]) -> list[SecurityRequirement]:
    requirements = []
    for requirement in _list(data, "security"):
        requirement = _mapping(requirement, "security requirement")
        parsed: SecurityRequirement = {}
        for name, scopes in requirement.items():
            if not isinstance(scopes, list) or not all(isinstance(s, str) for s in scopes):
                raise TypeError(f"scopes of security scheme `{name}` must be a list of strings")
            parsed[name] = list(scopes)
        requirements.append(parsed)
    return requirements


def _parameters_from(data: Mapping[str, Any]) -> list[Parameter | Reference]:
    return [
        item_or_reference_from_dict(value, Parameter.from_dict)
        for value in _list(data, "parameters")
    ]


def _servers_from(data: Mapping[str, Any]) -> list[Server]:
    return [Server.from_dict(server) for server in _list(data, "servers")]


def callback_to_dict(callback: Mapping[str, PathItem | Reference]) -> dict[str, Any]:
    """Write a callback: a map of runtime expressions to path items."""
    return {expr: item_or_reference_to_dict(item) for expr, item in callback.items()}


def callback_from_dict(data: Mapping[str, Any]) -> dict[str, PathItem | Reference]:
    """Read a callback: a map of runtime expressions to path items."""
    data = _mapping(data, "callback")
    return {
        expr: item_or_reference_from_dict(item, PathItem.from_dict)
        for expr, item in data.items()
    }


class _CallbackRef:
    """Marks a callback that is a reference rather than a map."""


def _callbacks_from(data: Mapping[str, Any]) -> dict[str, dict[str, PathItem | Reference] | Reference]:
    callbacks = _mapping(data.get("callbacks", {}), "callbacks")
    return {
        name: item_or_reference_from_dict(value, callback_from_dict)
        for name, value in callbacks.items()
    }


def _callbacks_to(callbacks: Mapping[str, Any]) -> dict[str, Any]:
    return {
        name: value.to_dict() if isinstance(value, Reference) else callback_to_dict(value)
        for name, value in callbacks.items()
    }


@dataclass
class Operation:
    """A single API operation on a path."""

    tags: list[str] = field(default_factory=list)
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    operation_id: str | None = None
    parameters: list[Parameter | Reference] = field(default_factory=list)
    request_body: RequestBody | Reference | None = None
    responses: Responses | None = None
    deprecated: bool = False
    security: list[SecurityRequirement] = field(default_factory=list)
    servers: list[Server] = field(default_factory=list)
    callbacks: dict[str, dict[str, PathItem | Reference] | Reference] = field(
        default_factory=dict
    )
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.tags:
            out["tags"] = list(self.tags)
        if self.summary is not None:
            out["summary"] = self.summary
        if self.description is not None:
            out["description"] = self.description
        if self.external_docs is not None:
            out["externalDocs"] = self.external_docs.to_dict()
        if self.operation_id is not None:
            out["operationId"] = self.operation_id
        if self.parameters:
            out["parameters"] = [item_or_reference_to_dict(p) for p in self.parameters]
        if self.request_body is not None:
            out["requestBody"] = item_or_reference_to_dict(self.request_body)
        if self.responses is not None:
            out["responses"] = self.responses.to_dict()
        if self.deprecated:
            out["deprecated"] = True
        if self.security:
            out["security"] = [
                {name: list(scopes) for name, scopes in req.items()} for req in self.security
            ]
        if self.servers:
            out["servers"] = [server.to_dict() for server in self.servers]
        if self.callbacks:
            out["callbacks"] = _callbacks_to(self.callbacks)
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Operation:
        data = _mapping(data, "operation")
        tags = _list(data, "tags")
        if not all(isinstance(tag, str) for tag in tags):
            raise TypeError("field `tags` must be a list of strings")
        docs = data.get("externalDocs")
        body = data.get("requestBody")
        responses = data.get("responses")
        deprecated = data.get("deprecated", False)
        if not isinstance(deprecated, bool):
            raise TypeError("field `deprecated` must be a boolean")
        return cls(
            tags=list(tags),
            summary=_optional_str(data, "summary"),
            description=_optional_str(data, "description"),
            external_docs=ExternalDocumentation.from_dict(docs) if docs is not None else None,
            operation_id=_optional_str(data, "operationId"),
            parameters=_parameters_from(data),
            request_body=(
                item_or_reference_from_dict(body, RequestBody.from_dict)
                if body is not None
                else None
            ),
            responses=Responses.from_dict(responses) if responses is not None else None,
            deprecated=deprecated,
            security=_security_from(data),
            servers=_servers_from(data),
            callbacks=_callbacks_from(data),
            extensions=extract_extensions(data),
        )


@dataclass
class PathItem:
    """The operations available on a single path."""

    reference: str | None = None
    summary: str | None = None
    description: str | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] = field(default_factory=list)
    parameters: list[Parameter | Reference] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield ``(method, operation)`` for every operation that is set."""
        for method in _METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation

    def __iter__(self) -> Iterator[tuple[str, Operation]]:
        return self.operations()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.reference is not None:
            out["$ref"] = self.reference
        if self.summary is not None:
            out["summary"] = self.summary
        if self.description is not None:
            out["description"] = self.description
        for method, operation in self.operations():
            out[method] = operation.to_dict()
        if self.servers:
            out["servers"] = [server.to_dict() for server in self.servers]
        if self.parameters:
            out["parameters"] = [item_or_reference_to_dict(p) for p in self.parameters]
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PathItem:
        data = _mapping(data, "path item")
        operations = {
            method: Operation.from_dict(data[method])
            for method in _METHODS
            if data.get(method) is not None
        }
        return cls(
            reference=_optional_str(data, "$ref"),
            summary=_optional_str(data, "summary"),
            description=_optional_str(data, "description"),
            servers=_servers_from(data),
            parameters=_parameters_from(data),
            extensions=extract_extensions(data),
            **operations,
        )


@dataclass
class Paths:
    """The relative paths of the API's endpoints and their path items."""

    paths: dict[str, PathItem | Reference] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def __iter__(self) -> Iterator[tuple[str, PathItem | Reference]]:
        return iter(self.paths.items())

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            path: item_or_reference_to_dict(item) for path, item in self.paths.items()
        }
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Paths:
        data = _mapping(data, "paths")
        return cls(
            paths={
                path: item_or_reference_from_dict(item, PathItem.from_dict)
                for path, item in data.items()
                if isinstance(path, str) and path.startswith("/")
            },
            extensions=extract_extensions(data),
        )