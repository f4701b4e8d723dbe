"""Decentralized identifiers."""

from .keys import DID_DOCUMENT_NORMALIZERS, load_did_document
from .resolver import (
    BaseDIDResolver,
    DIDDeactivatedError,
    DIDMethodNotSupported,
    DIDNotFoundError,
    DocumentMetadata,
    InvalidDIDError,
    ResolverError,
)

__all__ = [
    "DID_DOCUMENT_NORMALIZERS",
    "BaseDIDResolver",
    "DIDDeactivatedError",
    "DIDMethodNotSupported",
    "DIDNotFoundError",
    "DocumentMetadata",
    "InvalidDIDError",
    "ResolverError",
    "load_did_document",
]
