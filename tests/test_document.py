import json

import pytest

from oasgen.document import Components, OpenApi
from oasgen.info import Info, Tag
from oasgen.operation import Operation, PathItem, Paths
from oasgen.reference import Reference
from oasgen.responses import Response
from oasgen.schema import SchemaObject


def _sample() -> OpenApi:
    return OpenApi(
        info=Info(title="pets", version="1.0", description="an example API"),
        paths=Paths(
            paths={
                "/pets": PathItem(
                    get=Operation(operation_id="listPets"),
                    post=Operation(operation_id="createPet"),
                ),
                "/other": Reference("#/components/pathItems/Other"),
            }
        ),
        components=Components(
            schemas={"Pet": SchemaObject({"type": "object"})},
            responses={"NotFound": Response(description="not found")},
            security_schemes={"key": {"type": "apiKey", "in": "header", "name": "token"}},
        ),
        tags=[Tag(name="pets")],
        security=[{"key": []}],
        extensions={"x-extra": 1},
    )


def test_default_document_writes_version_and_info():
    assert OpenApi().to_dict() == {"openapi": "3.1.0", "info": {"title": "", "version": ""}}


def test_version_is_fixed():
    assert OpenApi().openapi == "3.1.0"
    data = _sample().to_dict()
    data["openapi"] = "3.0.0"
    assert OpenApi.from_dict(data).to_dict()["openapi"] == "3.1.0"


def test_round_trip_dict():
    api = _sample()
    assert OpenApi.from_dict(api.to_dict()) == api


def test_round_trip_json():
    api = _sample()
    text = api.to_json(indent=2)
    assert json.loads(text) == api.to_dict()
    assert OpenApi.from_json(text) == api


def test_operations_skip_references_and_follow_method_order():
    api = _sample()
    result = [(path, method, op.operation_id) for path, method, op in api.operations()]
    assert result == [("/pets", "get", "listPets"), ("/pets", "post", "createPet")]


def test_operations_without_paths():
    assert list(OpenApi().operations()) == []


def test_missing_openapi_field():
    with pytest.raises(ValueError):
        OpenApi.from_dict({"info": {"title": "a", "version": "1"}})


def test_missing_info_field():
    with pytest.raises(ValueError):
        OpenApi.from_dict({"openapi": "3.1.0"})


def test_components_use_camel_case_keys():
    components = Components(
        path_items={"P": PathItem(summary="s")},
        schemas={"A": SchemaObject({"type": "string"})},
    )
    data = components.to_dict()
    assert set(data) == {"pathItems", "schemas"}
    assert Components.from_dict(data) == components


def test_empty_components_write_nothing():
    assert Components().to_dict() == {}


def test_components_security_scheme_reference():
    components = Components(security_schemes={"s": Reference("#/x")})
    assert components.to_dict() == {"securitySchemes": {"s": {"$ref": "#/x"}}}
    assert Components.from_dict(components.to_dict()) == components


def test_components_callbacks_round_trip():
    components = Components(
        callbacks={
            "onEvent": {"{$request.body#/url}": PathItem(post=Operation(summary="s"))},
            "shared": Reference("#/components/callbacks/shared"),
        }
    )
    assert Components.from_dict(components.to_dict()) == components


def test_extensions_preserved():
    data = _sample().to_dict()
    assert data["x-extra"] == 1
    assert OpenApi.from_dict(data).extensions == {"x-extra": 1}


def test_invalid_security_requirement():
    data = OpenApi().to_dict()
    data["security"] = [{"key": "not-a-list"}]
    with pytest.raises(TypeError):
        OpenApi.from_dict(data)