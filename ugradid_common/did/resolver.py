"""DID resolution interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Mapping, NamedTuple, Optional, Pattern, Tuple, Union

from pydid import DID, DIDDocument
from pydid import InvalidDIDError as DIDSyntaxError

from ..core.error import BaseError


class ResolverError(BaseError):
    """Base class for resolver exceptions."""


class InvalidDIDError(ResolverError):
    """Raised when the DID does not conform to the DID syntax."""


class DIDNotFoundError(ResolverError):
    """Raised when the resolver cannot find the DID document."""


class DIDDeactivatedError(ResolverError):
    """Raised when the DID has been deactivated."""


class DIDMethodNotSupported(ResolverError):
    """Raised when the resolver does not handle the DID method."""


class DocumentMetadata(NamedTuple):
    """DID document metadata.

    Based on https://www.w3.org/TR/did-core/#did-document-metadata
    """

    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    properties: Optional[Mapping[str, Any]] = None


class BaseDIDResolver(ABC):
    """Base class for DID resolvers."""

    @property
    def supported_did_regex(self) -> Pattern:
        """Supported DID regex for matching this resolver to DIDs it can resolve.

        Override this property with a class var or similar.
        """
        raise NotImplementedError(
            "supported_did_regex must be overriden by subclasses of BaseDIDResolver"
        )

    def supports(self, did: str) -> bool:
        """Return if this resolver supports the given DID."""
        return bool(self.supported_did_regex.match(did))

    def resolve(self, did: Union[str, DID]) -> Tuple[DIDDocument, DocumentMetadata]:
        """Resolve a DID to its document and document metadata.

        Raises:
            InvalidDIDError: If the DID is not syntactically valid
            DIDMethodNotSupported: If this resolver does not handle the method
            DIDNotFoundError: If there is no document for the DID
            DIDDeactivatedError: If the DID has been deactivated

        """
        if isinstance(did, DID):
            did = str(did)
        else:
            try:
                DID.validate(did)
            except DIDSyntaxError as err:
                raise InvalidDIDError("supplied DID is invalid") from err
        if not self.supports(did):
            raise DIDMethodNotSupported(
                f"{self.__class__.__name__} does not support DID method for: {did}"
            )
        return self._resolve(did)

    @abstractmethod
    def _resolve(self, did: str) -> Tuple[DIDDocument, DocumentMetadata]:
        """Resolve a DID using this resolver."""
