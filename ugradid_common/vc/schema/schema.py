"""Credential schema record."""

import re

from typing import List, Mapping, NamedTuple, Optional, Union

from marshmallow import fields

from ...models.base import BaseModel, BaseModelSchema
from ...models.valid import (
    RFC3339_DATETIME_EXAMPLE,
    RFC3339_DATETIME_VALIDATE,
    SCHEMA_VERSION_EXAMPLE,
    SCHEMA_VERSION_VALIDATE,
    DIDField,
)
from .error import UnrecognizedIDFormatError
from .json_schema import JsonSchemaDocument, JsonSchemaDocumentSchema
from .version import ID_PATTERN, generate_schema_id

SCHEMA_TYPE = "https://w3c-ccg.github.io/vc-json-schemas/schema/1.0/schema.json"

SCHEMA_ID_EXAMPLE = generate_schema_id(
    "did:ugra:abc123", "17de181feb67447da4e78259d92d0240", SCHEMA_VERSION_EXAMPLE
)
TRAILING_VERSION = re.compile(r"[0-9]+\.[0-9]+\Z")


class SchemaMetadata:
    """Descriptive fields of a credential schema record."""

    def __init__(
        self,
        *,
        type: str = SCHEMA_TYPE,
        version: str = None,
        id: str = None,
        name: str = None,
        author=None,
        authored: str = None,
        proof: List[dict] = None,
    ):
        """Initialize schema metadata."""
        self.type = type
        self.version = version
        self.id = id
        self.name = name
        self.author = author
        self.authored = authored
        self.proof = proof

    def __eq__(self, other) -> bool:
        """Check equalness."""
        return type(other) is type(self) and other.__dict__ == self.__dict__

    def __repr__(self) -> str:
        """Return a human readable representation."""
        items = ("{}={}".format(k, repr(v)) for k, v in self.__dict__.items())
        return "<{}({})>".format(self.__class__.__name__, ", ".join(items))


class Schema(BaseModel):
    """A published credential schema: metadata plus a JSON Schema body.

    Records are never modified in place; an update is a new record.
    """

    class Meta:
        """Schema metadata."""

        schema_class = "SchemaRecordSchema"

    def __init__(
        self,
        metadata: Union[SchemaMetadata, Mapping, None] = None,
        body: Optional[JsonSchemaDocument] = None,
    ):
        """Initialize a Schema instance."""
        if isinstance(metadata, Mapping):
            metadata = SchemaMetadata(**metadata)
        self.metadata = metadata
        self.body = body

    @classmethod
    def create(
        cls,
        author: str,
        resource_id: str,
        version: str,
        body: JsonSchemaDocument,
        **metadata,
    ) -> "Schema":
        """Create a record, composing its ID from author, resource ID and version."""
        return cls(
            SchemaMetadata(
                id=generate_schema_id(author, resource_id, version),
                version=version,
                author=author,
                **metadata,
            ),
            body,
        )

    @property
    def id(self) -> Optional[str]:
        """Accessor for the schema ID."""
        return self.metadata.id if self.metadata else None

    @property
    def name(self) -> Optional[str]:
        """Accessor for the schema name."""
        return self.metadata.name if self.metadata else None

    @property
    def author(self) -> Optional[str]:
        """Accessor for the author DID, as a string."""
        if not self.metadata or self.metadata.author is None:
            return None
        return str(self.metadata.author)

    def validate_id(self):
        """Check the ID against the schema ID format.

        Raises:
            UnrecognizedIDFormatError: If the ID does not match

        """
        if not self.id or not ID_PATTERN.match(self.id):
            raise UnrecognizedIDFormatError(self.id)

    def version_from_id(self) -> str:
        """Return the major.minor version at the end of the ID."""
        match = TRAILING_VERSION.search(self.id or "")
        if not match:
            raise UnrecognizedIDFormatError(self.id)
        return match.group(0)

    def __eq__(self, other) -> bool:
        """Check equalness."""
        return type(other) is type(self) and other.__dict__ == self.__dict__


class SchemaRecordSchema(BaseModelSchema):
    """Credential schema record schema.

    Metadata fields sit at the top level of the wire form, beside `schema`.
    """

    class Meta:
        """SchemaRecordSchema metadata."""

        model_class = Schema

    type = fields.Str(
        attribute="metadata.type",
        required=True,
        metadata={"description": "Schema record type", "example": SCHEMA_TYPE},
    )
    version = fields.Str(
        attribute="metadata.version",
        required=True,
        validate=SCHEMA_VERSION_VALIDATE,
        metadata={"description": "Schema version", "example": SCHEMA_VERSION_EXAMPLE},
    )
    id = fields.Str(
        attribute="metadata.id",
        required=True,
        metadata={"description": "Schema identifier", "example": SCHEMA_ID_EXAMPLE},
    )
    name = fields.Str(
        attribute="metadata.name",
        metadata={"description": "Schema name", "example": "Email"},
    )
    author = DIDField(
        attribute="metadata.author",
        required=True,
        metadata={"description": "Author DID", "example": "did:ugra:abc123"},
    )
    authored = fields.Str(
        attribute="metadata.authored",
        validate=RFC3339_DATETIME_VALIDATE,
        metadata={
            "description": "Authoring time",
            "example": RFC3339_DATETIME_EXAMPLE,
        },
    )
    body = fields.Nested(JsonSchemaDocumentSchema, data_key="schema", required=True)
    proof = fields.List(
        fields.Dict(),
        attribute="metadata.proof",
        metadata={"description": "Proofs over the schema record"},
    )


class UpdateInput(NamedTuple):
    """A previous schema and its proposed successor."""

    previous_schema: Optional[Schema]
    updated_schema: Optional[Schema]


class UpdateResult(NamedTuple):
    """Classification of a schema update."""

    valid: bool = False
    major_change: bool = False
    minor_change: bool = False
    derived_version: str = ""
    message: str = ""
