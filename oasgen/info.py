"""API metadata objects: info, contact, license, tags, servers and external docs."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from oasgen.reference import extract_extensions

_T = TypeVar("_T")


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


def _compact(pairs: dict[str, Any], extensions: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Drop unset values, then append the extensions."""
    out = {key: value for key, value in pairs.items() if value is not None}
    if extensions:
        out.update(extensions)
    return out


def _nested(data: Mapping[str, Any], key: str, read: Callable[[Any], _T]) -> _T | None:
    value = data.get(key)
    return read(value) if value is not None else None


def _dump(obj: Any) -> dict[str, Any] | None:
    return obj.to_dict() if obj is not None else None


@dataclass
class Contact:
    """Contact information for the exposed API."""

    name: str | None = None
    url: str | None = None
    email: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _compact({"name": self.name, "url": self.url, "email": self.email}, self.extensions)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Contact:
        data = _mapping(data, "contact")
        return cls(
            name=_optional_str(data, "name"),
            url=_optional_str(data, "url"),
            email=_optional_str(data, "email"),
            extensions=extract_extensions(data),
        )


@dataclass
class License:
    """License information for the exposed API."""

    name: str = ""
    identifier: str | None = None
    url: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"name": self.name, "identifier": self.identifier, "url": self.url}, self.extensions
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> License:
        data = _mapping(data, "license")
        return cls(
            name=_required_str(data, "name"),
            identifier=_optional_str(data, "identifier"),
            url=_optional_str(data, "url"),
            extensions=extract_extensions(data),
        )


@dataclass
class ExternalDocumentation:
    """A link to an external resource for extended documentation."""

    description: str | None = None
    url: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _compact({"description": self.description, "url": self.url}, self.extensions)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ExternalDocumentation:
        data = _mapping(data, "external documentation")
        return cls(
            description=_optional_str(data, "description"),
            url=_required_str(data, "url"),
            extensions=extract_extensions(data),
        )


@dataclass
class Tag:
    """Metadata for a tag used by operations."""

    name: str = ""
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "description": self.description,
                "externalDocs": _dump(self.external_docs),
            },
            self.extensions,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tag:
        data = _mapping(data, "tag")
        return cls(
            name=_required_str(data, "name"),
            description=_optional_str(data, "description"),
            external_docs=_nested(data, "externalDocs", ExternalDocumentation.from_dict),
            extensions=extract_extensions(data),
        )


@dataclass
class ServerVariable:
    """A variable substituted into a server URL template."""

    enumeration: list[str] = field(default_factory=list)
    default: str = ""
    description: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out = _compact({"enum": list(self.enumeration) or None, "default": self.default})
        # Always written, even when unset.
        out["description"] = self.description
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ServerVariable:
        data = _mapping(data, "server variable")
        enumeration = data.get("enum", [])
        if not isinstance(enumeration, list) or not all(isinstance(v, str) for v in enumeration):
            raise TypeError("field `enum` must be a list of strings")
        return cls(
            enumeration=list(enumeration),
            default=_required_str(data, "default"),
            description=_optional_str(data, "description"),
            extensions=extract_extensions(data),
        )


@dataclass
class Server:
    """A server hosting the API."""

    url: str = ""
    description: str | None = None
    variables: dict[str, ServerVariable] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        variables = {name: var.to_dict() for name, var in self.variables.items()}
        return _compact(
            {"url": self.url, "description": self.description, "variables": variables or None},
            self.extensions,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Server:
        data = _mapping(data, "server")
        variables = _mapping(data.get("variables", {}), "server variables")
        return cls(
            url=_required_str(data, "url"),
            description=_optional_str(data, "description"),
            variables={name: ServerVariable.from_dict(var) for name, var in variables.items()},
            extensions=extract_extensions(data),
        )


@dataclass
class Info:
    """Metadata about the API."""

    title: str = ""
    summary: str | None = None
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None
    version: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "title": self.title,
                "summary": self.summary,
                "description": self.description,
                "termsOfService": self.terms_of_service,
                "contact": _dump(self.contact),
                "license": _dump(self.license),
                "version": self.version,
            },
            self.extensions,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Info:
        data = _mapping(data, "info")
        return cls(
            title=_required_str(data, "title"),
            summary=_optional_str(data, "summary"),
            description=_optional_str(data, "description"),
            terms_of_service=_optional_str(data, "termsOfService"),
            contact=_nested(data, "contact", Contact.from_dict),
            license=_nested(data, "license", License.from_dict),
            version=_required_str(data, "version"),
            extensions=extract_extensions(data),
        )