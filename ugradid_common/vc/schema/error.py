"""Credential schema errors."""

from typing import Sequence

from ...core.error import BaseError


class SchemaError(BaseError):
    """Base class for credential schema errors."""


class SchemaBuildError(SchemaError):
    """The schema builder was given an unusable attribute list."""


class DuplicateAttributeError(SchemaBuildError):
    """Two attributes share a name."""


class UnknownAttributeTypeError(SchemaBuildError):
    """An attribute declares a type the builder does not support."""


class InvalidAttributeError(SchemaBuildError):
    """An attribute is missing type-specific information."""


class SchemaValidationFailedError(SchemaError):
    """A document was rejected by the JSON Schema validator."""

    def __init__(self, errors: Sequence[str], *args, **kwargs):
        """Initialize with the accumulated validator messages."""
        self.errors = list(errors)
        super().__init__(f"Invalid schema: {', '.join(self.errors)}", *args, **kwargs)


class UnrecognizedVersionFormatError(SchemaError):
    """A schema version is not in the form major.minor."""

    def __init__(self, version: str, *args, **kwargs):
        """Initialize with the submitted version."""
        self.version = version
        super().__init__(
            f"'{version}' is an unrecognized version format", *args, **kwargs
        )


class UnrecognizedIDFormatError(SchemaError):
    """A schema ID is not in the form <author_did>;id=<id>;version=<major.minor>."""

    def __init__(self, schema_id: str, *args, **kwargs):
        """Initialize with the submitted schema ID."""
        self.schema_id = schema_id
        super().__init__(
            f"'{schema_id}' schema id is in an unrecognized format", *args, **kwargs
        )


class SchemaUpdateError(SchemaError):
    """A schema update could not be classified.

    The `result` attribute holds the (invalid) update result.
    """

    def __init__(self, message: str, result=None, *args, **kwargs):
        """Initialize with the update result that accompanies the failure."""
        self.result = result
        super().__init__(message, *args, **kwargs)


class InvalidUpdateInputError(SchemaUpdateError):
    """The previous/updated schema pair is missing or inconsistent."""


class NoChangeDetectedError(SchemaUpdateError):
    """The updated schema does not differ from the previous one."""
