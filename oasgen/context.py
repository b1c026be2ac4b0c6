"""Thread-local settings and shared state for documentation generation."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from oasgen.errors import GenerationError

_R = TypeVar("_R")

COMPONENTS_SCHEMAS_PATH = "#/components/schemas/"
_DEFAULT_DEFINITIONS_PATH = "#/definitions/"

JsonSchema = Mapping[str, Any] | bool


@dataclass
class SchemaGenerator:
    """Collects named schema definitions and the settings used to refer to them."""

    inline_subschemas: bool = True
    definitions_path: str = _DEFAULT_DEFINITIONS_PATH
    _definitions: dict[str, JsonSchema] = field(default_factory=dict, repr=False)

    def add_definition(self, name: str, schema: JsonSchema) -> dict[str, str]:
        """Store a definition and return a reference to it."""
        self._definitions[name] = schema
        return {"$ref": f"{self.definitions_path}{name}"}

    def definitions(self) -> dict[str, JsonSchema]:
        """The definitions collected so far."""
        return self._definitions

    def take_definitions(self) -> dict[str, JsonSchema]:
        """Return the collected definitions and clear them."""
        taken, self._definitions = self._definitions, {}
        return taken


def _default_error_filter(_: GenerationError) -> bool:
    return True


@dataclass
class GenContext:
    """Settings and a schema generator for documentation generation."""

    schema: SchemaGenerator = field(default_factory=SchemaGenerator)
    infer_responses: bool = False
    extract_schemas: bool = False
    no_content_status: int = 204
    show_error: Callable[[GenerationError], bool] = _default_error_filter
    error_handler: Callable[[GenerationError], None] | None = None

    def reset_error_filter(self) -> None:
        self.show_error = _default_error_filter

    def error(self, error: GenerationError) -> None:
        """Report an error to the handler, if one is set and the filter lets it through."""
        if self.error_handler is None or not self.show_error(error):
            return
        self.error_handler(error)

    def resolve_schema(self, schema: Mapping[str, Any]) -> Mapping[str, Any]:
        """Resolve a ``$ref`` schema to its definition, or return it unchanged."""
        target = schema.get("$ref")
        if not isinstance(target, str):
            return schema
        name = target[len(COMPONENTS_SCHEMAS_PATH):] if target.startswith(
            COMPONENTS_SCHEMAS_PATH
        ) else target
        resolved = self.schema.definitions().get(name)
        if isinstance(resolved, Mapping):
            return resolved
        return schema


_local = threading.local()


def _current() -> GenContext:
    ctx = getattr(_local, "ctx", None)
    if ctx is None:
        ctx = _local.ctx = GenContext()
    return ctx


def in_context(callback: Callable[[GenContext], _R]) -> _R:
    """Call ``callback`` with this thread's context and return its result."""
    return callback(_current())


def on_error(handler: Callable[[GenerationError], None]) -> None:
    """Set this thread's error handler, replacing any existing one."""
    _current().error_handler = handler


def extract_schemas(extract: bool) -> None:
    """Collect schemas for ``#/components/schemas`` instead of inlining them."""
    ctx = _current()
    if extract:
        ctx.schema = SchemaGenerator(
            inline_subschemas=False, definitions_path=COMPONENTS_SCHEMAS_PATH
        )
    else:
        ctx.schema = SchemaGenerator(inline_subschemas=True)
    ctx.extract_schemas = extract


def inferred_empty_response_status(status: int) -> None:
    """Set the status code inferred for empty responses."""
    _current().no_content_status = status


def infer_responses(infer: bool) -> None:
    """Enable or disable inferring responses from handler return types."""
    _current().infer_responses = infer


def reset_context() -> None:
    """Replace this thread's context with a fresh one."""
    _local.ctx = GenContext()