"""Verifiable Credential model and marshmallow schema.

Single values and arrays are both accepted on the wire for `@context`, `type`,
`credentialSubject` and `proof`. Decoding always yields lists for `@context`,
`type` and `proof`; encoding writes back single-element `type`,
`credentialSubject` and `proof` lists as scalars.
"""

from datetime import datetime
from typing import List, Optional, Type, Union

from marshmallow import INCLUDE, ValidationError, fields, post_dump, pre_load
from pytz import utc

from ..marshal import normalize_tree, plural, unplural
from ..models.base import BaseModel, BaseModelSchema, ModelType
from ..models.valid import (
    CREDENTIAL_CONTEXT_EXAMPLE,
    CREDENTIAL_CONTEXT_VALIDATE,
    CREDENTIAL_SUBJECT_EXAMPLE,
    CREDENTIAL_SUBJECT_VALIDATE,
    CREDENTIAL_TYPE_EXAMPLE,
    CREDENTIAL_TYPE_VALIDATE,
    RFC3339_DATETIME_EXAMPLE,
    RFC3339_DATETIME_VALIDATE,
    URI_VALIDATE,
    DictOrDictListField,
    StrOrDictField,
    UriOrDictField,
)
from ..registries import SchemaType
from .constants import (
    CONTEXT_KEY,
    CREDENTIAL_SUBJECT_KEY,
    CREDENTIALS_CONTEXT_V1_URL,
    PROOF_KEY,
    TYPE_KEY,
    VERIFIABLE_CREDENTIAL_TYPE,
)
from .proof import Proof

LOAD_NORMALIZERS = (
    plural(CONTEXT_KEY),
    plural(TYPE_KEY),
    unplural(CREDENTIAL_SUBJECT_KEY),
    plural(PROOF_KEY),
)
DUMP_NORMALIZERS = (
    plural(CONTEXT_KEY),
    unplural(TYPE_KEY),
    unplural(CREDENTIAL_SUBJECT_KEY),
    unplural(PROOF_KEY),
)


def generate_credential_id(issuer: str, id: str) -> str:
    """Compose a credential ID from the issuer and a local identifier."""
    return f"{issuer}#{id}"


def _rfc3339(date: Union[str, datetime, None]) -> Optional[str]:
    if isinstance(date, datetime):
        if not date.tzinfo:
            date = utc.localize(date)
        date = date.isoformat()
    return date


class CredentialStatus(BaseModel):
    """How to check whether a credential is revoked."""

    class Meta:
        """CredentialStatus metadata."""

        schema_class = "CredentialStatusSchema"

    def __init__(self, id: Optional[str] = None, type: Optional[str] = None):
        """Initialize the CredentialStatus instance."""
        self.id = id
        self.type = type

    def __eq__(self, other) -> bool:
        """Check equalness."""
        return type(other) is type(self) and other.__dict__ == self.__dict__


class CredentialStatusSchema(BaseModelSchema):
    """Credential status schema."""

    class Meta:
        """CredentialStatusSchema metadata."""

        model_class = CredentialStatus

    id = fields.Str(
        required=True,
        validate=URI_VALIDATE,
        metadata={
            "description": "Status location",
            "example": "https://example.edu/status/24",
        },
    )
    type = fields.Str(
        required=True,
        metadata={
            "description": "Status method",
            "example": "CredentialStatusList2017",
        },
    )


class CredentialSchemaRef(BaseModel):
    """Reference to the schema of the credential subject."""

    class Meta:
        """CredentialSchemaRef metadata."""

        schema_class = "CredentialSchemaRefSchema"

    def __init__(self, id: Optional[str] = None, type: Optional[str] = None):
        """Initialize the CredentialSchemaRef instance."""
        self.id = id
        self.type = type

    def __eq__(self, other) -> bool:
        """Check equalness."""
        return type(other) is type(self) and other.__dict__ == self.__dict__


class CredentialSchemaRefSchema(BaseModelSchema):
    """Credential schema reference schema."""

    class Meta:
        """CredentialSchemaRefSchema metadata."""

        model_class = CredentialSchemaRef

    id = fields.Str(
        required=True,
        validate=URI_VALIDATE,
        metadata={
            "description": "Schema ID",
            "example": "did:ugra:abc123;id=email;version=1.0",
        },
    )
    type = fields.Str(
        required=True,
        metadata={
            "description": "Schema type",
            "example": SchemaType.JSON_SCHEMA_VALIDATOR_2018.value,
        },
    )


class VerifiableCredential(BaseModel):
    """Verifiable Credential model.

    Based on https://www.w3.org/TR/vc-data-model
    """

    class Meta:
        """VerifiableCredential metadata."""

        schema_class = "VerifiableCredentialSchema"

    def __init__(
        self,
        context: Optional[List[Union[str, dict]]] = None,
        id: Optional[str] = None,
        type: Optional[List[str]] = None,
        issuer: Optional[Union[dict, str]] = None,
        issuance_date: Union[str, datetime, None] = None,
        expiration_date: Union[str, datetime, None] = None,
        credential_status: Optional[CredentialStatus] = None,
        credential_schema: Optional[CredentialSchemaRef] = None,
        credential_subject: Optional[Union[dict, List[dict]]] = None,
        proof: Optional[List[dict]] = None,
        **kwargs,
    ):
        """Initialize the VerifiableCredential instance."""
        self._context = context or [CREDENTIALS_CONTEXT_V1_URL]
        self.id = id
        self._type = type or [VERIFIABLE_CREDENTIAL_TYPE]
        self.issuer = issuer
        self.issuance_date = issuance_date
        self.expiration_date = expiration_date
        self.credential_status = credential_status
        self.credential_schema = credential_schema
        self.credential_subject = credential_subject
        self.proof = proof
        self.extra = kwargs

    @property
    def context(self) -> List[Union[str, dict]]:
        """Getter for context."""
        return self._context

    @context.setter
    def context(self, context: List[Union[str, dict]]):
        """Setter for context.

        First item must be credentials v1 url
        """
        CREDENTIAL_CONTEXT_VALIDATE(context)
        self._context = context

    @property
    def type(self) -> List[str]:
        """Getter for type."""
        return self._type

    @type.setter
    def type(self, type: List[str]):
        """Setter for type.

        Must include VerifiableCredential
        """
        CREDENTIAL_TYPE_VALIDATE(type)
        self._type = type

    @property
    def issuer_id(self) -> Optional[str]:
        """Getter for issuer id."""
        if not self.issuer:
            return None
        elif isinstance(self.issuer, str):
            return self.issuer

        return self.issuer.get("id")

    @property
    def issuance_date(self) -> Optional[str]:
        """Getter for issuance date."""
        return self._issuance_date

    @issuance_date.setter
    def issuance_date(self, date: Union[str, datetime, None]):
        """Setter for issuance date."""
        self._issuance_date = _rfc3339(date)

    @property
    def expiration_date(self) -> Optional[str]:
        """Getter for expiration date."""
        return self._expiration_date

    @expiration_date.setter
    def expiration_date(self, date: Union[str, datetime, None]):
        """Setter for expiration date."""
        self._expiration_date = _rfc3339(date)

    def is_type(self, vc_type: str) -> bool:
        """Check whether the credential has the given type."""
        return str(vc_type) in self.type

    def contains_context(self, context: str) -> bool:
        """Check whether the credential has the given context."""
        return str(context) in self.context

    def proofs(self, proof_cls: Type[Proof] = Proof) -> List[Proof]:
        """Load every proof with the given proof model."""
        return [proof_cls.deserialize(proof) for proof in self.proof or []]

    def credential_subject_as(
        self, model_cls: Type[ModelType]
    ) -> Union[ModelType, List[ModelType], None]:
        """Load the credential subject, or each of them, with a model class."""
        if self.credential_subject is None:
            return None
        if isinstance(self.credential_subject, list):
            return [
                model_cls.deserialize(subject) for subject in self.credential_subject
            ]
        return model_cls.deserialize(self.credential_subject)

    def __eq__(self, other) -> bool:
        """Check equalness."""
        return type(other) is type(self) and other.__dict__ == self.__dict__


class VerifiableCredentialSchema(BaseModelSchema):
    """Verifiable credential schema.

    Based on https://www.w3.org/TR/vc-data-model

    """

    class Meta:
        """Accept parameter overload."""

        unknown = INCLUDE
        model_class = VerifiableCredential

    context = fields.List(
        UriOrDictField(required=True),
        data_key=CONTEXT_KEY,
        required=True,
        validate=CREDENTIAL_CONTEXT_VALIDATE,
        metadata={
            "description": "The JSON-LD context of the credential",
            "example": CREDENTIAL_CONTEXT_EXAMPLE,
        },
    )
    id = fields.Str(
        required=False,
        validate=URI_VALIDATE,
        metadata={
            "description": "The ID of the credential",
            "example": generate_credential_id("did:ugra:abc123", "1872"),
        },
    )
    type = fields.List(
        fields.Str(required=True),
        required=True,
        validate=CREDENTIAL_TYPE_VALIDATE,
        metadata={
            "description": "The JSON-LD type of the credential",
            "example": CREDENTIAL_TYPE_EXAMPLE,
        },
    )
    issuer = StrOrDictField(
        required=True,
        metadata={
            "description": "The issuer. Either a string or an object with an id.",
            "example": "did:ugra:abc123",
        },
    )
    issuance_date = fields.Str(
        data_key="issuanceDate",
        required=True,
        validate=RFC3339_DATETIME_VALIDATE,
        metadata={
            "description": "The issuance date",
            "example": RFC3339_DATETIME_EXAMPLE,
        },
    )
    expiration_date = fields.Str(
        data_key="expirationDate",
        required=False,
        validate=RFC3339_DATETIME_VALIDATE,
        metadata={
            "description": "The expiration date",
            "example": RFC3339_DATETIME_EXAMPLE,
        },
    )
    credential_status = fields.Nested(
        CredentialStatusSchema, data_key="credentialStatus", required=False
    )
    credential_schema = fields.Nested(
        CredentialSchemaRefSchema, data_key="credentialSchema", required=False
    )
    credential_subject = DictOrDictListField(
        required=True,
        data_key=CREDENTIAL_SUBJECT_KEY,
        validate=CREDENTIAL_SUBJECT_VALIDATE,
        metadata={"example": CREDENTIAL_SUBJECT_EXAMPLE},
    )
    proof = fields.List(
        fields.Dict(),
        required=False,
        metadata={"description": "The proofs of the credential"},
    )

    @pre_load
    def pluralize(self, data, **kwargs):
        """Bring flexible-arity members into their list form."""
        if not isinstance(data, dict):
            raise ValidationError("Credential should be a JSON object")
        return normalize_tree(data, *LOAD_NORMALIZERS)

    @post_dump(pass_original=True)
    def add_unknown_properties(self, data: dict, original, **kwargs):
        """Add back unknown properties before outputting."""
        data.update(original.extra)
        return data

    @post_dump
    def unpluralize(self, data, **kwargs):
        """Write single-element members as scalars."""
        return normalize_tree(data, *DUMP_NORMALIZERS)
