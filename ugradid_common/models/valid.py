"""Validators and polymorphic fields for schema fields."""

from marshmallow.exceptions import ValidationError
from marshmallow.fields import Field
from marshmallow.validate import Regexp, Validator
from pydid import DID, InvalidDIDError


class StrOrDictField(Field):
    """String or Dict field for Marshmallow."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, (str, dict)):
            raise ValidationError("Field should be str or dict")
        return super()._deserialize(value, attr, data, **kwargs)


class DictOrDictListField(Field):
    """Dict or Dict List field for Marshmallow."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, dict):
            if not isinstance(value, list) or not all(
                isinstance(item, dict) for item in value
            ):
                raise ValidationError("Field should be dict or list of dicts")
        return super()._deserialize(value, attr, data, **kwargs)


class UriOrDictField(StrOrDictField):
    """URI or Dict field for Marshmallow."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str):
            Uri()(value)
        return super()._deserialize(value, attr, data, **kwargs)


class DIDField(Field):
    """Decentralized identifier, held as a `pydid.DID`."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return str(value)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, DID):
            return value
        if not isinstance(value, str):
            raise ValidationError("Field should be a DID string")
        try:
            return DID(value)
        except InvalidDIDError as err:
            raise ValidationError(f"Value {value} is not a valid DID") from err


class Uri(Regexp):
    """Validate value against URI on any scheme."""

    EXAMPLE = "https://www.w3.org/2018/credentials/v1"
    PATTERN = r"\w+:(\/?\/?)[^\s]+"

    def __init__(self):
        """Initializer."""
        super().__init__(Uri.PATTERN, error="Value {input} is not URI")


class RFC3339DateTime(Regexp):
    """Validate value against RFC3339 datetime format."""

    EXAMPLE = "2010-01-01T19:23:24Z"
    PATTERN = (
        r"^([0-9]{4})-([0-9]{2})-([0-9]{2})([Tt ]([0-9]{2}):([0-9]{2}):"
        r"([0-9]{2})(\.[0-9]+)?)?(([Zz]|([+-])([0-9]{2}):([0-9]{2})))?\Z"
    )

    def __init__(self):
        """Initializer."""

        super().__init__(
            RFC3339DateTime.PATTERN,
            error="Value {input} is not a date in valid format",
        )


class SchemaVersion(Regexp):
    """Validate value against a major.minor schema version."""

    EXAMPLE = "1.0"
    PATTERN = r"^[0-9]+\.[0-9]+\Z"

    def __init__(self):
        """Initializer."""
        super().__init__(
            SchemaVersion.PATTERN, error="Value {input} is not a major.minor version"
        )


class CredentialType(Validator):
    """Credential Type."""

    CREDENTIAL_TYPE = "VerifiableCredential"
    EXAMPLE = [CREDENTIAL_TYPE, "AlumniCredential"]

    def __call__(self, value):
        """Validate input value."""
        if CredentialType.CREDENTIAL_TYPE not in value:
            raise ValidationError(f"type must include {CredentialType.CREDENTIAL_TYPE}")

        return value


class CredentialContext(Validator):
    """Credential Context."""

    FIRST_CONTEXT = "https://www.w3.org/2018/credentials/v1"
    EXAMPLE = [FIRST_CONTEXT, "https://www.w3.org/2018/credentials/examples/v1"]

    def __call__(self, value):
        """Validate input value."""
        if len(value) < 1 or value[0] != CredentialContext.FIRST_CONTEXT:
            raise ValidationError(
                f"First context must be {CredentialContext.FIRST_CONTEXT}"
            )

        return value


class CredentialSubject(Validator):
    """Credential subject."""

    EXAMPLE = {
        "id": "did:example:ebfeb1f712ebc6f1c276e12ec21",
        "alumniOf": {"id": "did:example:c276e12ec21ebfeb1f712ebc6f1"},
    }

    def __call__(self, value):
        """Validate input value."""
        subjects = value if isinstance(value, list) else [value]

        for subject in subjects:
            if "id" in subject:
                try:
                    Uri()(subject["id"])
                except ValidationError:
                    raise ValidationError(
                        f"credential subject id {subject['id']} must be URI"
                    ) from None

        return value


URI_VALIDATE = Uri()
RFC3339_DATETIME_VALIDATE = RFC3339DateTime()
RFC3339_DATETIME_EXAMPLE = RFC3339DateTime.EXAMPLE
SCHEMA_VERSION_VALIDATE = SchemaVersion()
SCHEMA_VERSION_EXAMPLE = SchemaVersion.EXAMPLE
CREDENTIAL_TYPE_VALIDATE = CredentialType()
CREDENTIAL_TYPE_EXAMPLE = CredentialType.EXAMPLE
CREDENTIAL_CONTEXT_VALIDATE = CredentialContext()
CREDENTIAL_CONTEXT_EXAMPLE = CredentialContext.EXAMPLE
CREDENTIAL_SUBJECT_VALIDATE = CredentialSubject()
CREDENTIAL_SUBJECT_EXAMPLE = CredentialSubject.EXAMPLE
