from unittest import TestCase

from marshmallow import Schema, ValidationError
from pydid import DID

from ..valid import (
    CREDENTIAL_CONTEXT_VALIDATE,
    CREDENTIAL_SUBJECT_VALIDATE,
    CREDENTIAL_TYPE_VALIDATE,
    RFC3339_DATETIME_VALIDATE,
    SCHEMA_VERSION_VALIDATE,
    URI_VALIDATE,
    DictOrDictListField,
    DIDField,
    StrOrDictField,
    UriOrDictField,
)


class FieldsSchema(Schema):
    str_or_dict = StrOrDictField()
    dict_or_dict_list = DictOrDictListField()
    uri_or_dict = UriOrDictField()
    did = DIDField()


class TestValid(TestCase):
    def test_uri(self):
        URI_VALIDATE("https://www.w3.org/2018/credentials/v1")
        URI_VALIDATE("did:ugra:abc123")
        with self.assertRaises(ValidationError):
            URI_VALIDATE("not a uri")

    def test_rfc3339_datetime(self):
        RFC3339_DATETIME_VALIDATE("2010-01-01T19:23:24Z")
        RFC3339_DATETIME_VALIDATE("2010-01-01T19:23:24.123+01:00")
        with self.assertRaises(ValidationError):
            RFC3339_DATETIME_VALIDATE("01/01/2010")
        with self.assertRaises(ValidationError):
            RFC3339_DATETIME_VALIDATE("2010-01-01T19:23:24Z\n")

    def test_schema_version(self):
        SCHEMA_VERSION_VALIDATE("1.0")
        SCHEMA_VERSION_VALIDATE("12.345")
        for invalid in ("1", "1.0.0", "v1.0", "1.a", "1.0\n"):
            with self.assertRaises(ValidationError):
                SCHEMA_VERSION_VALIDATE(invalid)

    def test_credential_type(self):
        CREDENTIAL_TYPE_VALIDATE(["VerifiableCredential"])
        CREDENTIAL_TYPE_VALIDATE(["VerifiableCredential", "AlumniCredential"])
        with self.assertRaises(ValidationError):
            CREDENTIAL_TYPE_VALIDATE(["AlumniCredential"])

    def test_credential_context(self):
        CREDENTIAL_CONTEXT_VALIDATE(["https://www.w3.org/2018/credentials/v1"])
        with self.assertRaises(ValidationError):
            CREDENTIAL_CONTEXT_VALIDATE([])
        with self.assertRaises(ValidationError):
            CREDENTIAL_CONTEXT_VALIDATE(
                [
                    "https://www.w3.org/2018/credentials/examples/v1",
                    "https://www.w3.org/2018/credentials/v1",
                ]
            )

    def test_credential_subject(self):
        CREDENTIAL_SUBJECT_VALIDATE({"id": "did:ugra:abc123", "name": "Alice"})
        CREDENTIAL_SUBJECT_VALIDATE([{"name": "Alice"}, {"id": "did:ugra:abc"}])
        with self.assertRaises(ValidationError):
            CREDENTIAL_SUBJECT_VALIDATE({"id": "not a uri"})

    def test_fields(self):
        loaded = FieldsSchema().load(
            {
                "str_or_dict": "value",
                "dict_or_dict_list": [{"a": 1}],
                "uri_or_dict": {"@vocab": "https://example.com/"},
                "did": "did:ugra:abc123",
            }
        )
        assert loaded["str_or_dict"] == "value"
        assert loaded["dict_or_dict_list"] == [{"a": 1}]
        assert isinstance(loaded["did"], DID)
        assert loaded["did"].method == "ugra"

        dumped = FieldsSchema().dump({"did": DID("did:ugra:abc123")})
        assert dumped["did"] == "did:ugra:abc123"

    def test_fields_x(self):
        for data in (
            {"str_or_dict": 1},
            {"dict_or_dict_list": [{"a": 1}, "b"]},
            {"dict_or_dict_list": "b"},
            {"uri_or_dict": "not a uri"},
            {"did": "ugra:abc123"},
            {"did": 42},
        ):
            with self.assertRaises(ValidationError):
                FieldsSchema().load(data)
