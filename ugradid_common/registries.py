"""Key, proof and schema type registries."""

from enum import Enum


class KeyType(str, Enum):
    """Verification method types."""

    # https://w3c-ccg.github.io/lds-jws2020/
    JSON_WEB_KEY_2020 = "JsonWebKey2020"
    # https://w3c-ccg.github.io/lds-ed25519-2018/
    ED25519_VERIFICATION_KEY_2018 = "Ed25519VerificationKey2018"
    # https://w3c-ccg.github.io/lds-ecdsa-secp256k1-2019/
    ECDSA_SECP256K1_VERIFICATION_KEY_2019 = "EcdsaSecp256k1VerificationKey2019"
    # https://w3c-ccg.github.io/lds-rsa2018/
    RSA_VERIFICATION_KEY_2018 = "RsaVerificationKey2018"


class ProofType(str, Enum):
    """Linked data proof types."""

    # https://w3c-ccg.github.io/lds-jws2020
    JSON_WEB_SIGNATURE_2020 = "JsonWebSignature2020"


class SchemaType(str, Enum):
    """Credential schema reference types."""

    # https://w3c-ccg.github.io/vc-json-schemas/
    JSON_SCHEMA_VALIDATOR_2018 = "JsonSchemaValidator2018"
