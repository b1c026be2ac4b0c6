import pytest

from oasgen.info import ExternalDocumentation
from oasgen.schema import Discriminator, SchemaObject


def test_schema_round_trip_with_all_fields():
    data = {
        "type": "object",
        "properties": {"name": {"type": "string"}},
        "externalDocs": {"url": "https://docs.example.com"},
        "example": {"name": "Tom"},
    }
    schema = SchemaObject.from_dict(data)
    assert schema.to_dict() == data


def test_schema_keywords_go_into_json_schema():
    schema = SchemaObject.from_dict({"type": "string", "example": "hi"})
    assert schema.json_schema == {"type": "string"}
    assert schema.example == "hi"
    assert schema.external_docs is None


def test_schema_external_docs_parsed():
    schema = SchemaObject.from_dict({"externalDocs": {"url": "https://docs.example.com"}})
    assert schema.external_docs == ExternalDocumentation(url="https://docs.example.com")


def test_schema_omits_unset_openapi_fields():
    schema = SchemaObject(json_schema={"type": "string"})
    assert schema.to_dict() == {"type": "string"}


def test_schema_from_non_mapping_raises():
    with pytest.raises(TypeError):
        SchemaObject.from_dict(True)


def test_schema_non_mapping_json_schema_cannot_be_written():
    with pytest.raises(TypeError):
        SchemaObject(json_schema=True).to_dict()


def test_discriminator_round_trip():
    data = {"propertyName": "kind", "mapping": {"cat": "#/components/schemas/Cat"}, "x-note": 1}
    disc = Discriminator.from_dict(data)
    assert disc.property_name == "kind"
    assert disc.to_dict() == data


def test_discriminator_empty_mapping_omitted():
    assert Discriminator(property_name="kind").to_dict() == {"propertyName": "kind"}


def test_discriminator_drops_unknown_non_extension_keys():
    disc = Discriminator.from_dict({"propertyName": "kind", "other": 1, "x-a": 2})
    assert disc.extensions == {"x-a": 2}


def test_discriminator_requires_property_name():
    with pytest.raises(ValueError):
        Discriminator.from_dict({"mapping": {}})


def test_discriminator_mapping_must_be_strings():
    with pytest.raises(TypeError):
        Discriminator.from_dict({"propertyName": "kind", "mapping": {"a": 1}})