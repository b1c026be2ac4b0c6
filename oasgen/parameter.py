"""Parameters, headers, media types, encodings and examples."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeVar, Union

from oasgen.info import _compact, _dump, _mapping, _nested, _optional_str, _required_str
from oasgen.reference import (
    Reference,
    extract_extensions,
    item_or_reference_from_dict,
    item_or_reference_to_dict,
)
from oasgen.schema import SchemaObject

_E = TypeVar("_E", bound=Enum)


class PathStyle(Enum):
    MATRIX = "matrix"
    LABEL = "label"
    SIMPLE = "simple"


class QueryStyle(Enum):
    FORM = "form"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"


class CookieStyle(Enum):
    FORM = "form"


class HeaderStyle(Enum):
    SIMPLE = "simple"


def _optional_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise TypeError(f"field `{key}` must be a boolean")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    return bool(_optional_bool(data, key))


def _enum(enum_cls: type[_E], data: Mapping[str, Any], key: str, default: _E | None) -> _E | None:
    value = data.get(key)
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"unknown value {value!r} for field `{key}`") from None


def _refs_from(data: Mapping[str, Any], key: str, read: Any) -> dict[str, Any]:
    values = _mapping(data.get(key, {}), key)
    return {name: item_or_reference_from_dict(value, read) for name, value in values.items()}


def _refs_to(values: Mapping[str, Any]) -> dict[str, Any] | None:
    return {name: item_or_reference_to_dict(value) for name, value in values.items()} or None


@dataclass
class Example:
    """An example value, given inline or by an external URI."""

    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "summary": self.summary,
                "description": self.description,
                "value": self.value,
                "externalValue": self.external_value,
            },
            self.extensions,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Example:
        data = _mapping(data, "example")
        return cls(
            summary=_optional_str(data, "summary"),
            description=_optional_str(data, "description"),
            value=data.get("value"),
            external_value=_optional_str(data, "externalValue"),
            extensions=extract_extensions(data),
        )


@dataclass
class Encoding:
    """How a single schema property is encoded in a request body."""

    content_type: str | None = None
    headers: dict[str, Header | Reference] = field(default_factory=dict)
    style: QueryStyle | None = None
    explode: bool = False
    allow_reserved: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        # The content type is always written, even when unset.
        out: dict[str, Any] = {"contentType": self.content_type}
        out.update(
            _compact(
                {
                    "headers": _refs_to(self.headers),
                    "style": self.style.value if self.style is not None else None,
                    "explode": self.explode or None,
                    "allowReserved": self.allow_reserved or None,
                },
                self.extensions,
            )
        )
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Encoding:
        data = _mapping(data, "encoding")
        return cls(
            content_type=_optional_str(data, "contentType"),
            headers=_refs_from(data, "headers", Header.from_dict),
            style=_enum(QueryStyle, data, "style", None),
            explode=_bool(data, "explode"),
            allow_reserved=_bool(data, "allowReserved"),
            extensions=extract_extensions(data),
        )


@dataclass
class MediaType:
    """The schema and examples of one media type."""

    schema: SchemaObject | None = None
    example: Any = None
    examples: dict[str, Example | Reference] = field(default_factory=dict)
    encoding: dict[str, Encoding] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        encoding = {name: enc.to_dict() for name, enc in self.encoding.items()}
        return _compact(
            {
                "schema": _dump(self.schema),
                "example": self.example,
                "examples": _refs_to(self.examples),
                "encoding": encoding or None,
            },
            self.extensions,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MediaType:
        data = _mapping(data, "media type")
        encoding = _mapping(data.get("encoding", {}), "encoding")
        return cls(
            schema=_nested(data, "schema", SchemaObject.from_dict),
            example=data.get("example"),
            examples=_refs_from(data, "examples", Example.from_dict),
            encoding={name: Encoding.from_dict(enc) for name, enc in encoding.items()},
            extensions=extract_extensions(data),
        )


Content = dict[str, MediaType]
ParameterFormat = Union[SchemaObject, Content]


def format_to_dict(value: ParameterFormat) -> dict[str, Any]:
    """Write a parameter format as either a ``schema`` or a ``content`` entry."""
    if isinstance(value, SchemaObject):
        return {"schema": value.to_dict()}
    if isinstance(value, Mapping):
        return {"content": {name: media.to_dict() for name, media in value.items()}}
    raise TypeError(f"a parameter format must be a schema or a content map, got {value!r}")


def format_from_dict(data: Mapping[str, Any]) -> ParameterFormat:
    """Read the first ``schema`` or ``content`` entry of an object."""
    data = _mapping(data, "parameter")
    for key, value in data.items():
        if key == "schema":
            return SchemaObject.from_dict(value)
        if key == "content":
            content = _mapping(value, "content")
            return {name: MediaType.from_dict(media) for name, media in content.items()}
    raise ValueError("expected a `schema` or a `content` field")


def _shared_to_dict(obj: Header | ParameterData) -> dict[str, Any]:
    """Write the fields that headers and parameters have in common."""
    out = _compact({"required": obj.required or None, "deprecated": obj.deprecated})
    out.update(format_to_dict(obj.format))
    out.update(_compact({"example": obj.example, "examples": _refs_to(obj.examples)}))
    return out


def _shared_from_dict(data: Mapping[str, Any]) -> dict[str, Any]:
    """Read the fields that headers and parameters have in common."""
    return {
        "description": _optional_str(data, "description"),
        "required": _bool(data, "required"),
        "deprecated": _optional_bool(data, "deprecated"),
        "format": format_from_dict(data),
        "example": data.get("example"),
        "examples": _refs_from(data, "examples", Example.from_dict),
        "extensions": extract_extensions(data),
    }


@dataclass(kw_only=True)
class Header:
    """A header description; like a parameter without name and location."""

    description: str | None = None
    style: HeaderStyle = HeaderStyle.SIMPLE
    required: bool = False
    deprecated: bool | None = None
    format: ParameterFormat
    example: Any = None
    examples: dict[str, Example | Reference] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out = _compact({"description": self.description, "style": self.style.value})
        out.update(_shared_to_dict(self))
        out.update(self.extensions)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Header:
        data = _mapping(data, "header")
        return cls(
            style=_enum(HeaderStyle, data, "style", HeaderStyle.SIMPLE),
            **_shared_from_dict(data),
        )


@dataclass(kw_only=True)
class ParameterData:
    """The fields shared by parameters of every location."""

    name: str
    description: str | None = None
    required: bool = False
    deprecated: bool | None = None
    format: ParameterFormat
    example: Any = None
    examples: dict[str, Example | Reference] = field(default_factory=dict)
    explode: bool | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out = _compact({"name": self.name, "description": self.description})
        out.update(_shared_to_dict(self))
        out.update(_compact({"explode": self.explode}, self.extensions))
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParameterData:
        data = _mapping(data, "parameter")
        return cls(
            name=_required_str(data, "name"),
            explode=_optional_bool(data, "explode"),
            **_shared_from_dict(data),
        )


@dataclass
class Parameter:
    """A single operation parameter; the subclass gives its location."""

    location: ClassVar[str]
    default_style: ClassVar[Enum | None] = None
    parameter_data: ParameterData

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"in": self.location}
        out.update(self.parameter_data.to_dict())
        out.update(self._location_fields())
        return out

    def _location_fields(self) -> dict[str, Any]:
        if self.default_style is None:
            raise TypeError("a parameter needs a location")
        return {"style": self.style.value}

    @classmethod
    def _from_fields(cls, parameter_data: ParameterData, data: Mapping[str, Any]) -> Parameter:
        if cls.default_style is None:
            raise TypeError("a parameter needs a location")
        style = _enum(type(cls.default_style), data, "style", cls.default_style)
        return cls(parameter_data, style)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Parameter:
        data = _mapping(data, "parameter")
        if "in" not in data:
            raise ValueError("missing field `in`")
        location = data["in"]
        target = _BY_LOCATION.get(location)
        if target is None:
            raise ValueError(f"unknown parameter location {location!r}")
        if not issubclass(target, cls):
            raise ValueError(f"expected a {cls.location} parameter, got {location!r}")
        return target._from_fields(ParameterData.from_dict(data), data)


@dataclass
class QueryParameter(Parameter):
    location: ClassVar[str] = "query"
    default_style: ClassVar[Enum | None] = QueryStyle.FORM
    allow_reserved: bool = False
    style: QueryStyle = QueryStyle.FORM
    allow_empty_value: bool | None = None

    def _location_fields(self) -> dict[str, Any]:
        return _compact(
            {
                "allowReserved": self.allow_reserved or None,
                "style": self.style.value,
                "allowEmptyValue": self.allow_empty_value,
            }
        )

    @classmethod
    def _from_fields(cls, parameter_data: ParameterData, data: Mapping[str, Any]) -> QueryParameter:
        return cls(
            parameter_data=parameter_data,
            allow_reserved=_bool(data, "allowReserved"),
            style=_enum(QueryStyle, data, "style", QueryStyle.FORM),
            allow_empty_value=_optional_bool(data, "allowEmptyValue"),
        )


@dataclass
class HeaderParameter(Parameter):
    location: ClassVar[str] = "header"
    default_style: ClassVar[Enum | None] = HeaderStyle.SIMPLE
    style: HeaderStyle = HeaderStyle.SIMPLE


@dataclass
class PathParameter(Parameter):
    location: ClassVar[str] = "path"
    default_style: ClassVar[Enum | None] = PathStyle.SIMPLE
    style: PathStyle = PathStyle.SIMPLE


@dataclass
class CookieParameter(Parameter):
    location: ClassVar[str] = "cookie"
    default_style: ClassVar[Enum | None] = CookieStyle.FORM
    style: CookieStyle = CookieStyle.FORM


_BY_LOCATION: dict[str, type[Parameter]] = {
    kind.location: kind
    for kind in (QueryParameter, HeaderParameter, PathParameter, CookieParameter)
}