"""Credential schemas: JSON Schema codec, builder, records and evolution."""

from .builder import (
    ArrayType,
    Attribute,
    AttributeType,
    Builder,
    FormatType,
    NumberType,
    ObjectType,
    StringType,
)
from .error import (
    DuplicateAttributeError,
    InvalidAttributeError,
    InvalidUpdateInputError,
    NoChangeDetectedError,
    SchemaBuildError,
    SchemaError,
    SchemaUpdateError,
    SchemaValidationFailedError,
    UnknownAttributeTypeError,
    UnrecognizedIDFormatError,
    UnrecognizedVersionFormatError,
)
from .evolution import validate_schema_update
from .json_schema import (
    DRAFT7_SCHEMA,
    AdditionalProperties,
    Dependency,
    Items,
    JsonSchemaDocument,
    JsonSchemaDocumentSchema,
)
from .schema import (
    Schema,
    SchemaMetadata,
    SchemaRecordSchema,
    UpdateInput,
    UpdateResult,
)
from .types import PrimitiveType, PrimitiveTypeList
from .version import (
    ID_PATTERN,
    VERSION_PATTERN,
    Version,
    extract_schema_author_did,
    extract_schema_resource_id,
    extract_schema_version_from_id,
    generate_schema_id,
)

__all__ = [
    "DRAFT7_SCHEMA",
    "ID_PATTERN",
    "VERSION_PATTERN",
    "AdditionalProperties",
    "ArrayType",
    "Attribute",
    "AttributeType",
    "Builder",
    "Dependency",
    "DuplicateAttributeError",
    "FormatType",
    "InvalidAttributeError",
    "InvalidUpdateInputError",
    "Items",
    "JsonSchemaDocument",
    "JsonSchemaDocumentSchema",
    "NoChangeDetectedError",
    "NumberType",
    "ObjectType",
    "PrimitiveType",
    "PrimitiveTypeList",
    "Schema",
    "SchemaBuildError",
    "SchemaError",
    "SchemaMetadata",
    "SchemaRecordSchema",
    "SchemaUpdateError",
    "SchemaValidationFailedError",
    "StringType",
    "UnknownAttributeTypeError",
    "UnrecognizedIDFormatError",
    "UnrecognizedVersionFormatError",
    "UpdateInput",
    "UpdateResult",
    "Version",
    "extract_schema_author_did",
    "extract_schema_resource_id",
    "extract_schema_version_from_id",
    "generate_schema_id",
    "validate_schema_update",
]
