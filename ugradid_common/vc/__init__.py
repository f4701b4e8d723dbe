"""Verifiable Credentials."""

from .constants import (
    CREDENTIALS_CONTEXT_V1_URL,
    VERIFIABLE_CREDENTIAL_TYPE,
)
from .credential import (
    CredentialSchemaRef,
    CredentialStatus,
    VerifiableCredential,
    VerifiableCredentialSchema,
    generate_credential_id,
)
from .proof import JSONWebSignature2020Proof, Proof

__all__ = [
    "CREDENTIALS_CONTEXT_V1_URL",
    "VERIFIABLE_CREDENTIAL_TYPE",
    "CredentialSchemaRef",
    "CredentialStatus",
    "JSONWebSignature2020Proof",
    "Proof",
    "VerifiableCredential",
    "VerifiableCredentialSchema",
    "generate_credential_id",
]
