"""URI values."""

import re

from urllib.parse import SplitResult, urlsplit

CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")


class URI(str):
    """A URI, kept as its original text with parsed components."""

    def __new__(cls, value: str) -> "URI":
        """Parse the value.

        Raises:
            ValueError: If the value cannot be parsed as a URI

        """
        if not isinstance(value, str):
            raise ValueError(f"URI must be a string, not {type(value).__name__}")
        if CONTROL_CHARACTERS.search(value):
            raise ValueError(f"Invalid control character in URI: {value!r}")
        instance = super().__new__(cls, value)
        instance._parts = urlsplit(value)
        return instance

    @property
    def parts(self) -> SplitResult:
        """Parsed components."""
        return self._parts

    @property
    def scheme(self) -> str:
        """URI scheme, without the colon."""
        return self._parts.scheme

    @property
    def fragment(self) -> str:
        """URI fragment, without the hash."""
        return self._parts.fragment

    def __repr__(self) -> str:
        """Return a human readable representation."""
        return f"URI({str.__repr__(self)})"


def parse_uri(value: str) -> URI:
    """Parse a raw URI.

    Raises:
        ValueError: If the value cannot be parsed

    """
    return URI(value)
