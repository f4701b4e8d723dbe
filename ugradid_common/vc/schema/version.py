"""Schema IDs and versions.

A schema ID has the form `<author_did>;id=<resource_id>;version=<major.minor>`.
"""

import re

from typing import NamedTuple

from pydid import DID, InvalidDIDError

from .error import UnrecognizedIDFormatError, UnrecognizedVersionFormatError

ID_PATTERN = re.compile(r"^(did:(?:ugra):\S+);id=(\S+);version=([0-9]+\.[0-9]+)\Z")
VERSION_PATTERN = re.compile(r"^[0-9]+\.[0-9]+\Z")

ID_MARKER = ";id="
VERSION_MARKER = ";version="


class Version(NamedTuple):
    """A major.minor schema version."""

    major: int
    minor: int

    @classmethod
    def parse(cls, version: str) -> "Version":
        """Parse a major.minor string.

        Raises:
            UnrecognizedVersionFormatError: If the string is not major.minor

        """
        if not isinstance(version, str) or not VERSION_PATTERN.match(version):
            raise UnrecognizedVersionFormatError(version)
        major, minor = version.split(".")
        return cls(int(major), int(minor))

    def increment_major(self) -> "Version":
        """Next major version, resetting the minor version."""
        return Version(self.major + 1, 0)

    def increment_minor(self) -> "Version":
        """Next minor version."""
        return Version(self.major, self.minor + 1)

    def __str__(self) -> str:
        """Render as major.minor."""
        return f"{self.major}.{self.minor}"


def generate_schema_id(author: str, resource_id: str, version: str) -> str:
    """Compose a schema ID from its parts."""
    return f"{author}{ID_MARKER}{resource_id}{VERSION_MARKER}{version}"


def _check_id(schema_id: str) -> str:
    if not isinstance(schema_id, str) or not ID_PATTERN.match(schema_id):
        raise UnrecognizedIDFormatError(schema_id)
    return schema_id


def extract_schema_version_from_id(schema_id: str) -> str:
    """Return the version portion of a schema ID."""
    _check_id(schema_id)
    return schema_id[schema_id.index(VERSION_MARKER) + len(VERSION_MARKER) :]


def extract_schema_resource_id(schema_id: str) -> str:
    """Return the resource ID portion of a schema ID."""
    _check_id(schema_id)
    start = schema_id.index(ID_MARKER) + len(ID_MARKER)
    return schema_id[start : schema_id.index(VERSION_MARKER)]


def extract_schema_author_did(schema_id: str) -> DID:
    """Return the author DID of a schema ID."""
    _check_id(schema_id)
    try:
        return DID(schema_id[: schema_id.index(ID_MARKER)])
    except InvalidDIDError as err:
        raise UnrecognizedIDFormatError(schema_id) from err
