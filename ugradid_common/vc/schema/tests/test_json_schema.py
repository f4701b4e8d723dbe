import json

import pytest

from ....models.base import BaseModelError
from ..json_schema import (
    AdditionalProperties,
    Dependency,
    Items,
    JsonSchemaDocument,
)

PERSON = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "https://example.com/person.schema.json",
    "title": "Person",
    "description": "A person",
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "email": {"type": "string", "format": "email"},
        "age": {"type": ["integer", "null"], "minimum": 0},
        "tags": {"type": "array", "items": {"type": "string"}, "uniqueItems": True},
        "pair": {
            "type": "array",
            "items": [{"type": "string"}, {"type": "number"}],
            "additionalItems": {"type": "boolean"},
        },
        "address": {
            "type": "object",
            "properties": {"street": {"type": "string"}},
            "additionalProperties": {"type": "string"},
        },
    },
    "required": ["name"],
    "additionalProperties": False,
    "dependencies": {
        "email": ["name"],
        "address": {"required": ["age"]},
    },
}


def roundtrip(document: dict) -> dict:
    return JsonSchemaDocument.deserialize(document).serialize()


class TestAdditionalProperties:
    def test_boolean_variant(self):
        doc = JsonSchemaDocument.deserialize({"additionalProperties": False})
        assert doc.additional_properties.kind is AdditionalProperties.Kind.BOOLEAN
        assert doc.additional_properties.status is False
        assert doc.additional_properties.schema is None
        assert doc.serialize() == {"additionalProperties": False}

    def test_schema_variant(self):
        doc = JsonSchemaDocument.deserialize(
            {"additionalProperties": {"type": "string"}}
        )
        assert doc.additional_properties.kind is AdditionalProperties.Kind.SCHEMA
        assert doc.additional_properties.status is None
        assert doc.additional_properties.schema.declared_type() == ("string",)
        assert doc.serialize() == {"additionalProperties": {"type": "string"}}

    def test_allows_additional_properties(self):
        allowed = JsonSchemaDocument(additional_properties=True)
        assert allowed.allows_additional_properties()
        assert not JsonSchemaDocument(
            additional_properties=False
        ).allows_additional_properties()
        assert not JsonSchemaDocument().allows_additional_properties()
        assert not JsonSchemaDocument(
            additional_properties=JsonSchemaDocument(type="string")
        ).allows_additional_properties()

    def test_invalid(self):
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"additionalProperties": "yes"})
        with pytest.raises(TypeError):
            JsonSchemaDocument(additional_properties="yes")


class TestItems:
    def test_schema_variant(self):
        doc = JsonSchemaDocument.deserialize({"items": {"type": "string"}})
        assert doc.items.kind is Items.Kind.SCHEMA
        assert doc.items.schemas is None
        assert doc.serialize() == {"items": {"type": "string"}}

    def test_schema_list_variant(self):
        raw = {"items": [{"type": "string"}, {"type": "number"}]}
        doc = JsonSchemaDocument.deserialize(raw)
        assert doc.items.kind is Items.Kind.SCHEMA_LIST
        assert [item.declared_type() for item in doc.items.schemas] == [
            ("string",),
            ("number",),
        ]
        assert doc.serialize() == raw

    def test_invalid(self):
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"items": True})
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"items": ["string"]})


class TestDependencies:
    def test_variants(self):
        raw = {"dependencies": {"a": ["b", "c"], "d": {"required": ["e"]}}}
        doc = JsonSchemaDocument.deserialize(raw)
        assert doc.dependencies["a"].kind is Dependency.Kind.REQUIRED_PROPERTIES
        assert doc.dependencies["a"].required_properties == ["b", "c"]
        assert doc.dependencies["d"].kind is Dependency.Kind.SCHEMA
        assert doc.dependencies["d"].schema.required_fields() == ["e"]
        assert doc.serialize() == raw

    def test_invalid(self):
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"dependencies": {"a": "b"}})
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"dependencies": {"a": [1]}})


class TestType:
    def test_scalar(self):
        doc = JsonSchemaDocument.deserialize({"type": "string"})
        assert doc.declared_type() == ("string",)
        assert doc.serialize() == {"type": "string"}

    def test_list(self):
        doc = JsonSchemaDocument.deserialize({"type": ["string", "null"]})
        assert doc.declared_type() == ("string", "null")
        assert doc.serialize() == {"type": ["string", "null"]}

    def test_constructor_accepts_names(self):
        assert JsonSchemaDocument(type="object").serialize() == {"type": "object"}
        assert JsonSchemaDocument(type=["object", "null"]).serialize() == {
            "type": ["object", "null"]
        }

    def test_empty_list_cannot_encode(self):
        with pytest.raises(BaseModelError):
            JsonSchemaDocument(type=[]).serialize()

    def test_invalid(self):
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"type": 3})

    def test_empty_list_rejected_on_load(self):
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"type": []})


class TestJsonSchemaDocument:
    def test_roundtrip(self):
        assert roundtrip(PERSON) == PERSON

    def test_roundtrip_keywords(self):
        raw = {
            "$comment": "all the rest",
            "$ref": "#/definitions/positive",
            "definitions": {"positive": {"type": "number", "exclusiveMinimum": 0}},
            "allOf": [{"maxProperties": 3}],
            "anyOf": [{"minProperties": 1}],
            "oneOf": [{"required": ["a"]}, {"required": ["b"]}],
            "not": {"const": "forbidden"},
            "if": {"properties": {"kind": {"const": "a"}}},
            "then": {"required": ["a"]},
            "else": {"required": ["b"]},
            "contains": {"type": "integer"},
            "maxItems": 4,
            "minItems": 1,
            "maxLength": 10,
            "maximum": 9.5,
            "exclusiveMaximum": 10,
            "multipleOf": 0.5,
            "pattern": "^[a-z]+$",
            "patternProperties": {"^x-": {"type": "string"}},
            "propertyNames": {"maxLength": 8},
            "enum": ["a", 1, None],
            "examples": [{"a": 1}],
            "default": {"a": 1},
        }
        assert roundtrip(raw) == raw

    def test_absent_keywords_omitted(self):
        assert JsonSchemaDocument().serialize() == {}
        assert JsonSchemaDocument(description="d").serialize() == {"description": "d"}

    def test_unknown_keywords_ignored(self):
        doc = JsonSchemaDocument.deserialize({"type": "string", "x-custom": 1})
        assert doc.serialize() == {"type": "string"}

    def test_queries(self):
        doc = JsonSchemaDocument.deserialize(PERSON)
        properties = doc.get_properties()
        assert list(properties) == ["name", "email", "age", "tags", "pair", "address"]
        assert properties["email"].declared_format() == "email"
        assert properties["name"].declared_format() == ""
        assert properties["age"].declared_type() == ("integer", "null")
        assert doc.required_fields() == ["name"]
        assert not doc.allows_additional_properties()

    def test_queries_empty(self):
        doc = JsonSchemaDocument()
        assert doc.get_properties() == {}
        assert doc.required_fields() == []
        assert doc.declared_type() == ()

    def test_nested_invalid(self):
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"properties": {"a": "string"}})
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"minLength": -1})
        with pytest.raises(BaseModelError):
            JsonSchemaDocument.deserialize({"maximum": "ten"})

    def test_from_json(self):
        doc = JsonSchemaDocument.from_json(json.dumps(PERSON))
        assert doc == JsonSchemaDocument.deserialize(PERSON)
        assert json.loads(doc.to_json()) == PERSON
