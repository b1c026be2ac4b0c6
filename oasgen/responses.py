"""Responses, response collections, links and request bodies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from oasgen.info import Server
from oasgen.parameter import Header, MediaType
from oasgen.reference import (
    Reference,
    extract_extensions,
    item_or_reference_from_dict,
    item_or_reference_to_dict,
)
from oasgen.status_code import StatusCode


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _required_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"field `{key}` must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"field `{key}` must be a string")
    return value


def _content_from(data: Mapping[str, Any]) -> dict[str, MediaType]:
    content = _mapping(data.get("content", {}), "content")
    return {name: MediaType.from_dict(media) for name, media in content.items()}


def _content_to(content: Mapping[str, MediaType]) -> dict[str, Any]:
    return {name: media.to_dict() for name, media in content.items()}


@dataclass(kw_only=True)
class Link:
    """A design-time link from a response to another operation.

    Exactly one of ``operation_ref`` and ``operation_id`` must be set.
    """

    description: str | None = None
    operation_ref: str | None = None
    operation_id: str | None = None
    request_body: Any = None
    parameters: dict[str, Any] = field(default_factory=dict)
    server: Server | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if (self.operation_ref is None) == (self.operation_id is None):
            raise ValueError("a link needs exactly one of `operationRef` or `operationId`")

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.description is not None:
            out["description"] = self.description
        if self.operation_ref is not None:
            out["operationRef"] = self.operation_ref
        else:
            out["operationId"] = self.operation_id
        if self.request_body is not None:
            out["requestBody"] = self.request_body
        if self.parameters:
            out["parameters"] = dict(self.parameters)
        if self.server is not None:
            out["server"] = self.server.to_dict()
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Link:
        data = _mapping(data, "link")
        server = data.get("server")
        return cls(
            description=_optional_str(data, "description"),
            operation_ref=_optional_str(data, "operationRef"),
            operation_id=_optional_str(data, "operationId"),
            request_body=data.get("requestBody"),
            parameters=dict(_mapping(data.get("parameters", {}), "link parameters")),
            server=Server.from_dict(server) if server is not None else None,
            extensions=extract_extensions(data),
        )


@dataclass
class Response:
    """A single response: description, headers, content and links."""

    description: str = ""
    headers: dict[str, Header | Reference] = field(default_factory=dict)
    content: dict[str, MediaType] = field(default_factory=dict)
    links: dict[str, Link | Reference] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"description": self.description}
        if self.headers:
            out["headers"] = {
                name: item_or_reference_to_dict(h) for name, h in self.headers.items()
            }
        if self.content:
            out["content"] = _content_to(self.content)
        if self.links:
            out["links"] = {
                name: item_or_reference_to_dict(link) for name, link in self.links.items()
            }
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Response:
        data = _mapping(data, "response")
        headers = _mapping(data.get("headers", {}), "response headers")
        links = _mapping(data.get("links", {}), "response links")
        return cls(
            description=_required_str(data, "description"),
            headers={
                name: item_or_reference_from_dict(h, Header.from_dict)
                for name, h in headers.items()
            },
            content=_content_from(data),
            links={
                name: item_or_reference_from_dict(link, Link.from_dict)
                for name, link in links.items()
            },
            extensions=extract_extensions(data),
        )


@dataclass
class Responses:
    """The expected responses of an operation, keyed by status code."""

    default: Response | Reference | None = None
    responses: dict[StatusCode, Response | Reference] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.default is not None:
            out["default"] = item_or_reference_to_dict(self.default)
        for status, response in self.responses.items():
            out[str(status)] = item_or_reference_to_dict(response)
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Responses:
        data = _mapping(data, "responses")
        default = data.get("default")
        responses: dict[StatusCode, Response | Reference] = {}
        for key, value in data.items():
            if key == "default":
                continue
            try:
                status = StatusCode.parse(key)
            except (ValueError, TypeError):
                # Only keys that read as status codes are responses.
                continue
            responses[status] = item_or_reference_from_dict(value, Response.from_dict)
        return cls(
            default=(
                item_or_reference_from_dict(default, Response.from_dict)
                if default is not None
                else None
            ),
            responses=responses,
            extensions=extract_extensions(data),
        )


@dataclass
class RequestBody:
    """The body expected by an operation, per media type."""

    description: str | None = None
    content: dict[str, MediaType] = field(default_factory=dict)
    required: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.description is not None:
            out["description"] = self.description
        if self.content:
            out["content"] = _content_to(self.content)
        if self.required:
            out["required"] = True
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RequestBody:
        data = _mapping(data, "request body")
        required = data.get("required", False)
        if not isinstance(required, bool):
            raise TypeError("field `required` must be a boolean")
        return cls(
            description=_optional_str(data, "description"),
            content=_content_from(data),
            required=required,
            extensions=extract_extensions(data),
        )