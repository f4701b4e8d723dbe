"""DID document member names and loading."""

import json
import logging

from typing import Mapping, Union

from pydid import DIDDocument

from ..core.error import MalformedDocumentError
from ..marshal import normalize_tree, plural

LOGGER = logging.getLogger(__name__)

CONTEXT_KEY = "@context"
CONTROLLER_KEY = "controller"
AUTHENTICATION_KEY = "authentication"
ASSERTION_METHOD_KEY = "assertionMethod"
KEY_AGREEMENT_KEY = "keyAgreement"
CAPABILITY_INVOCATION_KEY = "capabilityInvocation"
CAPABILITY_DELEGATION_KEY = "capabilityDelegation"
VERIFICATION_METHOD_KEY = "verificationMethod"

VERIFICATION_RELATIONSHIP_KEYS = (
    AUTHENTICATION_KEY,
    ASSERTION_METHOD_KEY,
    KEY_AGREEMENT_KEY,
    CAPABILITY_INVOCATION_KEY,
    CAPABILITY_DELEGATION_KEY,
)

DID_DOCUMENT_NORMALIZERS = (
    plural(CONTEXT_KEY),
    plural(CONTROLLER_KEY),
    plural(VERIFICATION_METHOD_KEY),
    *(plural(key) for key in VERIFICATION_RELATIONSHIP_KEYS),
)


def load_did_document(raw: Union[str, bytes, Mapping]) -> DIDDocument:
    """Normalize a DID document and load it.

    Args:
        raw: JSON text or an already-parsed mapping

    Raises:
        MalformedDocumentError: If the input is not a valid DID document

    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as err:
            raise MalformedDocumentError("DID document is not valid JSON") from err
    if not isinstance(raw, Mapping):
        raise MalformedDocumentError("DID document is not a JSON object")

    try:
        return DIDDocument.deserialize(normalize_tree(raw, *DID_DOCUMENT_NORMALIZERS))
    except ValueError as err:
        LOGGER.exception("DID document validation error:")
        raise MalformedDocumentError("DID document validation failed") from err
