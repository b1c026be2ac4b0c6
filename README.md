# oasgen

`oasgen` models OpenAPI 3.1 documents as Python dataclasses. It reads and
writes them as JSON-compatible dictionaries. It also keeps a per-thread context
that holds generation settings and an error handler.

It has no dependencies outside the standard library.

## Installation

```
pip install oasgen
```

To run the test suite:

```
pip install "oasgen[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `oasgen.document` | `OpenApi` (the document root) and `Components` |
| `oasgen.info` | `Info`, `Contact`, `License`, `ExternalDocumentation`, `Tag`, `Server`, `ServerVariable` |
| `oasgen.operation` | `Operation`, `PathItem`, `Paths`, `callback_to_dict`, `callback_from_dict` |
| `oasgen.responses` | `Response`, `Responses`, `Link`, `RequestBody` |
| `oasgen.parameter` | `Parameter` and its subclasses `QueryParameter`, `HeaderParameter`, `PathParameter`, `CookieParameter`; `ParameterData`, `Header`, `MediaType`, `Encoding`, `Example`; the style enums `PathStyle`, `QueryStyle`, `CookieStyle`, `HeaderStyle` |
| `oasgen.schema` | `SchemaObject`, `Discriminator` |
| `oasgen.reference` | `Reference` and helpers for values that may be references |
| `oasgen.status_code` | `StatusCode` |
| `oasgen.errors` | `GenerationError` and its subclasses |
| `oasgen.context` | `GenContext`, `SchemaGenerator` and the per-thread settings functions |

Every object has a `to_dict()` method and a `from_dict(data)` class method.

## Building a document

```python
from oasgen.document import OpenApi
from oasgen.info import Info
from oasgen.operation import Operation, PathItem, Paths
from oasgen.parameter import ParameterData, QueryParameter
from oasgen.responses import Response, Responses
from oasgen.schema import SchemaObject
from oasgen.status_code import StatusCode

limit = QueryParameter(
    parameter_data=ParameterData(
        name="limit",
        format=SchemaObject(json_schema={"type": "integer"}),
    )
)

api = OpenApi(info=Info(title="Pets", version="1.0.0"))
api.paths = Paths(paths={
    "/pets": PathItem(get=Operation(
        operation_id="listPets",
        parameters=[limit],
        responses=Responses(responses={StatusCode.parse("200"): Response(description="ok")}),
    )),
})

print(api.to_json(indent=2))

for path, method, operation in api.operations():
    print(path, method, operation.operation_id)
```

`OpenApi.operations()` yields `(path, method, operation)` tuples. It skips path
items that are references. `PathItem.operations()` and iterating a `PathItem`
yield `(method, operation)` pairs in the order get, put, post, delete, options,
head, patch, trace.

## Reading a document

`OpenApi.from_json(text)` and `OpenApi.from_dict(data)` read an existing
document. A missing required field raises `ValueError`. A field of the wrong
type raises `TypeError`. Keys that start with `x-` are kept in each object's
`extensions`.

The `openapi` field is always written as `"3.1.0"`, whatever value was read.
`Paths.from_dict` keeps only keys that start with `/`. `Responses.from_dict`
keeps only `default` and keys that read as status codes. `Parameter.from_dict`
picks the subclass from the `in` field.

A `Link` needs exactly one of `operation_ref` and `operation_id`. Otherwise
creating it raises `ValueError`. Security schemes in `Components` are kept as
plain dictionaries or references.

## Status codes

`StatusCode.parse` accepts the following:

- integers from 100 to 999;
- three-character strings holding such a number;
- ranges such as `"2XX"`, in either case.

An out-of-range or malformed value raises `ValueError`. A value that is neither
an `int` nor a `str`, including a `bool`, raises `TypeError`.

```python
str(StatusCode.parse("4xx"))  # "4XX"
```

Single codes sort before ranges.

## References

Any field that allows a `$ref` accepts either an item or a
`oasgen.reference.Reference`.

- `oasgen.reference.ref("#/components/schemas/Pet")` builds a reference.
- `as_item(value)` returns the item itself, or `None` when the value is a reference.
- `item_or_reference_from_dict(data, reader)` reads either a reference or an item.

## Generation context

`oasgen.context` keeps one `GenContext` per thread:

- `extract_schemas(True)` gives the context a fresh `SchemaGenerator`. Its
  references point at `#/components/schemas/` instead of inlining schemas.
  `extract_schemas(False)` switches back.
- `SchemaGenerator.add_definition(name, schema)` stores a definition and returns
  a `{"$ref": ...}` to it.
- `take_definitions()` returns the stored definitions and clears them.
- `GenContext.resolve_schema(schema)` follows such a reference to its stored
  definition, or returns the schema unchanged.
- `infer_responses(True)` sets the `infer_responses` flag.
- `inferred_empty_response_status(200)` sets the status code recorded for empty
  responses. The default is 204.
- `on_error(handler)` sets the handler that `GenContext.error(error)` calls with
  `oasgen.errors.GenerationError` instances such as `ResponseExists` or
  `DuplicateParameter`. Setting a new handler replaces the previous one. With no
  handler set, errors are dropped.
- `reset_context()` restores the defaults.

`in_context(callback)` calls `callback` with the current `GenContext` and
returns its result.

## What it does not do

- It does not derive JSON schemas from Python types. Schemas are supplied as
  dictionaries.
- It does not attach to any web framework or router. Operations and paths are
  built by hand.
- It does not validate documents against the OpenAPI specification beyond the
  type checks made while reading.
- It reads and writes JSON only. Other formats are not supported.