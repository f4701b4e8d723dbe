from unittest import TestCase, mock

from marshmallow import EXCLUDE, INCLUDE, ValidationError, fields, validates_schema

from ...core.error import MalformedDocumentError
from ..base import BaseModel, BaseModelError, BaseModelSchema, resolve_class


class ModelImpl(BaseModel):
    class Meta:
        schema_class = "SchemaImpl"

    def __init__(self, *, attr=None, note=None):
        self.attr = attr
        self.note = note


class SchemaImpl(BaseModelSchema):
    class Meta:
        model_class = ModelImpl
        unknown = EXCLUDE

    attr = fields.String(required=True)
    note = fields.String()

    @validates_schema
    def validate_fields(self, data, **kwargs):
        if data["attr"] != "succeeds":
            raise ValidationError("")


class ModelImplWithUnknown(BaseModel):
    class Meta:
        schema_class = "SchemaImplWithUnknown"

    def __init__(self, *, attr=None, **kwargs):
        self.attr = attr
        self.extra = kwargs


class SchemaImplWithUnknown(BaseModelSchema):
    class Meta:
        model_class = ModelImplWithUnknown
        unknown = INCLUDE

    attr = fields.String(required=True)


class TestBase(TestCase):
    def test_deserialize(self):
        model = ModelImpl.deserialize({"attr": "succeeds"})
        assert isinstance(model, ModelImpl)
        assert model.attr == "succeeds"

    def test_deserialize_x(self):
        with self.assertRaises(BaseModelError):
            ModelImpl.deserialize({"attr": "fails"})

    def test_serialize_skips_none(self):
        model = ModelImpl(attr="succeeds")
        assert model.serialize() == {"attr": "succeeds"}
        assert model.serialize(as_string=True) == '{"attr":"succeeds"}'

    def test_ser_x(self):
        model = ModelImpl(attr="hello world")
        with mock.patch.object(
            model, "_get_schema_class", mock.MagicMock()
        ) as mock_get_schema_class:
            mock_get_schema_class.return_value = mock.MagicMock(
                return_value=mock.MagicMock(
                    dump=mock.MagicMock(side_effect=ValidationError("error"))
                )
            )
            with self.assertRaises(BaseModelError):
                model.serialize()

    def test_from_json(self):
        model = ModelImpl.from_json('{"attr": "succeeds", "note": "hi"}')
        assert model.note == "hi"
        assert ModelImpl.from_json(model.to_json()).attr == "succeeds"

    def test_from_json_x(self):
        with self.assertRaises(MalformedDocumentError):
            ModelImpl.from_json("{}{}")
        with self.assertRaises(MalformedDocumentError):
            ModelImpl.from_json("null")
        with self.assertRaises(MalformedDocumentError):
            ModelImpl.from_json("[]")

    def test_model_with_unknown(self):
        model = ModelImplWithUnknown.deserialize(
            {"attr": "succeeds", "another": "value"}
        )
        assert model.extra
        assert model.extra["another"] == "value"
        assert model.attr == "succeeds"

    def test_model_default_exclude(self):
        model = ModelImpl.deserialize({"attr": "succeeds", "another": "value"})
        assert not hasattr(model, "another")

    def test_schema_without_model_class(self):
        class NoModelSchema(BaseModelSchema):
            pass

        with self.assertRaises(TypeError):
            NoModelSchema()

    def test_resolve_class(self):
        assert resolve_class(ModelImpl) is ModelImpl
        assert resolve_class("SchemaImpl", ModelImpl) is SchemaImpl
        with self.assertRaises(TypeError):
            resolve_class("Missing", ModelImpl)

    def test_repr(self):
        assert repr(ModelImpl(attr="a")) == "<ModelImpl(attr='a', note=None)>"
