import pytest

from oasgen.info import ExternalDocumentation, Server
from oasgen.operation import (
    Operation,
    PathItem,
    Paths,
    callback_from_dict,
    callback_to_dict,
)
from oasgen.parameter import ParameterData, QueryParameter
from oasgen.reference import Reference
from oasgen.responses import RequestBody, Response, Responses
from oasgen.schema import SchemaObject
from oasgen.status_code import StatusCode


def _operation(op_id="listUsers"):
    return Operation(
        tags=["users"],
        summary="list",
        description="lists users",
        external_docs=ExternalDocumentation(url="/docs"),
        operation_id=op_id,
        parameters=[
            QueryParameter(ParameterData(name="limit", format=SchemaObject({"type": "integer"}))),
            Reference("#/components/parameters/page"),
        ],
        request_body=RequestBody(description="filter", required=True),
        responses=Responses(responses={StatusCode(200): Response(description="ok")}),
        deprecated=True,
        security=[{"bearer": []}, {"oauth": ["read", "write"]}],
        servers=[Server(url="/v1")],
        callbacks={
            "onEvent": {"{$request.body#/url}": PathItem(post=Operation(summary="event"))},
            "shared": Reference("#/components/callbacks/shared"),
        },
        extensions={"x-rank": 1},
    )


def test_operation_round_trip():
    operation = _operation()
    assert Operation.from_dict(operation.to_dict()) == operation


def test_operation_uses_camel_case_keys():
    out = _operation().to_dict()
    assert out["operationId"] == "listUsers"
    assert out["externalDocs"] == {"url": "/docs"}
    assert out["requestBody"]["description"] == "filter"


def test_empty_operation_is_empty_dict():
    assert Operation().to_dict() == {}
    assert Operation.from_dict({}) == Operation()


def test_operation_rejects_bad_parameters():
    with pytest.raises(TypeError):
        Operation.from_dict({"parameters": {"name": "x"}})


def test_operation_rejects_bad_security():
    with pytest.raises(TypeError):
        Operation.from_dict({"security": [{"bearer": "read"}]})


def test_path_item_iterates_in_method_order():
    get_op = Operation(summary="get")
    post_op = Operation(summary="post")
    trace_op = Operation(summary="trace")
    item = PathItem(trace=trace_op, post=post_op, get=get_op)
    assert list(item) == [("get", get_op), ("post", post_op), ("trace", trace_op)]
    assert list(item.operations()) == list(item)


def test_path_item_round_trip():
    item = PathItem(
        summary="users",
        get=_operation(),
        delete=Operation(operation_id="deleteUsers"),
        servers=[Server(url="/v2")],
        parameters=[Reference("#/components/parameters/tenant")],
        extensions={"x-group": "admin"},
    )
    assert PathItem.from_dict(item.to_dict()) == item


def test_paths_skip_keys_without_leading_slash():
    paths = Paths.from_dict(
        {
            "/users": {"get": {"summary": "list"}},
            "/shared": {"$ref": "#/components/pathItems/shared"},
            "users": {"get": {}},
            "x-meta": 1,
        }
    )
    assert [path for path, _ in paths] == ["/users", "/shared"]
    assert paths.paths["/shared"] == Reference("#/components/pathItems/shared")
    assert paths.paths["/users"].get == Operation(summary="list")
    assert paths.extensions == {"x-meta": 1}


def test_paths_round_trip():
    paths = Paths(paths={"/a": PathItem(get=Operation()), "/b": Reference("#/b")})
    assert Paths.from_dict(paths.to_dict()) == paths


def test_callback_round_trip():
    callback = {
        "{$request.body#/callback}": PathItem(post=Operation(operation_id="notify")),
        "{$request.body#/other}": Reference("#/components/pathItems/other"),
    }
    out = callback_to_dict(callback)
    assert out["{$request.body#/other}"] == {"$ref": "#/components/pathItems/other"}
    assert callback_from_dict(out) == callback


def test_callback_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        callback_from_dict(["not", "a", "map"])