from ..registries import KeyType, ProofType, SchemaType


def test_values():
    assert KeyType.JSON_WEB_KEY_2020 == "JsonWebKey2020"
    assert KeyType("Ed25519VerificationKey2018") is (
        KeyType.ED25519_VERIFICATION_KEY_2018
    )
    assert ProofType.JSON_WEB_SIGNATURE_2020.value == "JsonWebSignature2020"
    assert SchemaType.JSON_SCHEMA_VALIDATOR_2018 == "JsonSchemaValidator2018"
    assert {k.value for k in KeyType} == {
        "JsonWebKey2020",
        "Ed25519VerificationKey2018",
        "EcdsaSecp256k1VerificationKey2019",
        "RsaVerificationKey2018",
    }
