"""Verifiable credential constants."""

CREDENTIALS_CONTEXT_V1_URL = "https://www.w3.org/2018/credentials/v1"
VERIFIABLE_CREDENTIAL_TYPE = "VerifiableCredential"

CONTEXT_KEY = "@context"
TYPE_KEY = "type"
CREDENTIAL_SUBJECT_KEY = "credentialSubject"
PROOF_KEY = "proof"
