"""Data-interchange layer for DIDs, Verifiable Credentials and credential schemas."""

from .version import __version__

__all__ = ["__version__"]
