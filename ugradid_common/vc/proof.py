"""Linked data proofs attached to credentials."""

from typing import Optional

from marshmallow import INCLUDE, fields, post_dump

from ..models.base import BaseModel, BaseModelSchema
from ..models.valid import (
    RFC3339_DATETIME_EXAMPLE,
    RFC3339_DATETIME_VALIDATE,
    URI_VALIDATE,
)
from ..registries import ProofType


class Proof(BaseModel):
    """Generic linked data proof.

    Members other than the common ones are kept in `extra`.
    """

    class Meta:
        """Proof metadata."""

        schema_class = "ProofSchema"

    def __init__(
        self,
        type: Optional[str] = None,
        proof_purpose: Optional[str] = None,
        verification_method: Optional[str] = None,
        created: Optional[str] = None,
        domain: Optional[str] = None,
        **kwargs,
    ):
        """Initialize the Proof instance."""
        self.type = type
        self.proof_purpose = proof_purpose
        self.verification_method = verification_method
        self.created = created
        self.domain = domain
        self.extra = kwargs

    def __eq__(self, other) -> bool:
        """Check equalness."""
        return type(other) is type(self) and other.__dict__ == self.__dict__


class ProofSchema(BaseModelSchema):
    """Linked data proof schema.

    Based on https://w3c-ccg.github.io/ld-proofs

    """

    class Meta:
        """Accept parameter overload."""

        unknown = INCLUDE
        model_class = Proof

    type = fields.Str(
        required=True,
        metadata={
            "description": "Signature suite used to create the proof",
            "example": ProofType.JSON_WEB_SIGNATURE_2020.value,
        },
    )
    proof_purpose = fields.Str(
        data_key="proofPurpose",
        required=True,
        metadata={"description": "Proof purpose", "example": "assertionMethod"},
    )
    verification_method = fields.Str(
        data_key="verificationMethod",
        required=True,
        validate=URI_VALIDATE,
        metadata={
            "description": "Information used for proof verification",
            "example": "did:ugra:abc123#key-1",
        },
    )
    created = fields.Str(
        required=True,
        validate=RFC3339_DATETIME_VALIDATE,
        metadata={"description": "Creation time", "example": RFC3339_DATETIME_EXAMPLE},
    )
    domain = fields.Str(
        required=False,
        metadata={
            "description": "Restricted domain of the proof",
            "example": "example.com",
        },
    )

    @post_dump(pass_original=True)
    def add_unknown_properties(self, data: dict, original, **kwargs):
        """Add back unknown properties before outputting."""
        data.update(original.extra)
        return data


class JSONWebSignature2020Proof(Proof):
    """Proof carrying a detached JSON Web Signature."""

    class Meta:
        """JSONWebSignature2020Proof metadata."""

        schema_class = "JSONWebSignature2020ProofSchema"

    def __init__(self, *args, jws: Optional[str] = None, **kwargs):
        """Initialize the JSONWebSignature2020Proof instance."""
        super().__init__(*args, **kwargs)
        self.jws = jws


class JSONWebSignature2020ProofSchema(ProofSchema):
    """JsonWebSignature2020 proof schema."""

    class Meta:
        """Accept parameter overload."""

        unknown = INCLUDE
        model_class = JSONWebSignature2020Proof

    jws = fields.Str(
        required=True,
        metadata={
            "description": "Detached JSON Web Signature",
            "example": "eyJhbGciOiJFZERTQSIsImI2NCI6ZmFsc2UsImNyaXQiOlsiYjY0Il19..c2ln",
        },
    )
