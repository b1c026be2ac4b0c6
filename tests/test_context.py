import threading

import pytest

from oasgen.context import (
    GenContext,
    SchemaGenerator,
    extract_schemas,
    in_context,
    infer_responses,
    inferred_empty_response_status,
    on_error,
    reset_context,
)
from oasgen.errors import DuplicateRequestBody, InferredResponseConflict


@pytest.fixture(autouse=True)
def fresh_context():
    reset_context()
    yield
    reset_context()


def test_defaults():
    ctx = GenContext()
    assert ctx.no_content_status == 204
    assert ctx.infer_responses is False
    assert ctx.extract_schemas is False
    assert ctx.schema.inline_subschemas is True


def test_in_context_returns_result():
    assert in_context(lambda ctx: ctx.no_content_status) == 204


def test_settings_functions():
    infer_responses(True)
    inferred_empty_response_status(200)
    assert in_context(lambda ctx: (ctx.infer_responses, ctx.no_content_status)) == (True, 200)


def test_reset_context_restores_defaults():
    infer_responses(True)
    reset_context()
    assert in_context(lambda ctx: ctx.infer_responses) is False


def test_extract_schemas_settings():
    extract_schemas(True)
    ctx = in_context(lambda c: c)
    assert ctx.extract_schemas is True
    assert ctx.schema.inline_subschemas is False
    assert ctx.schema.definitions_path == "#/components/schemas/"
    extract_schemas(False)
    assert ctx.extract_schemas is False
    assert ctx.schema.inline_subschemas is True


def test_error_without_handler_is_ignored():
    ctx = GenContext()
    ctx.error(DuplicateRequestBody())
    assert ctx.error_handler is None


def test_on_error_handler_receives_errors():
    seen = []
    on_error(seen.append)
    err = InferredResponseConflict(200)
    in_context(lambda ctx: ctx.error(err))
    assert seen == [err]


def test_error_filter_and_reset():
    seen = []
    ctx = GenContext(error_handler=seen.append)
    ctx.show_error = lambda e: False
    ctx.error(DuplicateRequestBody())
    assert seen == []
    ctx.reset_error_filter()
    ctx.error(DuplicateRequestBody())
    assert len(seen) == 1


def test_take_definitions_clears():
    gen = SchemaGenerator(definitions_path="#/components/schemas/")
    ref = gen.add_definition("Pet", {"type": "object"})
    assert ref == {"$ref": "#/components/schemas/Pet"}
    assert gen.take_definitions() == {"Pet": {"type": "object"}}
    assert gen.definitions() == {}


def test_resolve_schema_with_prefix():
    ctx = GenContext()
    ctx.schema.add_definition("Pet", {"type": "object"})
    assert ctx.resolve_schema({"$ref": "#/components/schemas/Pet"}) == {"type": "object"}


def test_resolve_schema_plain_name():
    ctx = GenContext()
    ctx.schema.add_definition("Pet", {"type": "object"})
    assert ctx.resolve_schema({"$ref": "Pet"}) == {"type": "object"}


def test_resolve_schema_unresolved_returns_input():
    ctx = GenContext()
    ctx.schema.add_definition("Flag", True)
    missing = {"$ref": "#/components/schemas/Missing"}
    boolean = {"$ref": "#/components/schemas/Flag"}
    plain = {"type": "string"}
    assert ctx.resolve_schema(missing) is missing
    assert ctx.resolve_schema(boolean) is boolean
    assert ctx.resolve_schema(plain) is plain


def test_context_is_thread_local():
    infer_responses(True)
    result = []
    thread = threading.Thread(target=lambda: result.append(in_context(lambda c: c.infer_responses)))
    thread.start()
    thread.join()
    assert result == [False]
    assert in_context(lambda c: c.infer_responses) is True