"""Builder for simple draft-07 credential subject schemas."""

import logging

from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

from .error import (
    DuplicateAttributeError,
    InvalidAttributeError,
    UnknownAttributeTypeError,
)
from .json_schema import DRAFT7_SCHEMA, AdditionalProperties, Items, JsonSchemaDocument
from .types import PrimitiveType
from .validation import validate_json_schema

LOGGER = logging.getLogger(__name__)

TYPE_SCHEMA = PrimitiveType.OBJECT.value


class AttributeType(str, Enum):
    """Kinds of attribute the builder understands."""

    STRING = "string"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"
    BOOLEAN = "boolean"


class FormatType(str, Enum):
    """String formats the builder understands."""

    DATE = "date"
    TIME = "time"
    DATE_TIME = "date-time"
    EMAIL = "email"


class StringType(NamedTuple):
    """String constraints."""

    format: Optional[Union[FormatType, str]] = None


class NumberType(NamedTuple):
    """Numeric bounds."""

    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: Optional[float] = None
    exclusive_maximum: Optional[float] = None


class ArrayType(NamedTuple):
    """Item type of an array attribute, with its constraints."""

    item_type: Optional[Union[AttributeType, str]] = None
    string_type: Optional[StringType] = None
    number_type: Optional[NumberType] = None


class ObjectType(NamedTuple):
    """Nested attributes of an object attribute."""

    attributes: Sequence["Attribute"] = ()
    additional_properties: bool = False


class Attribute:
    """A named, typed credential subject attribute."""

    def __init__(
        self,
        name: str,
        type: Union[AttributeType, str],
        required: bool = False,
        *,
        string_type: Optional[StringType] = None,
        number_type: Optional[NumberType] = None,
        object_type: Optional[ObjectType] = None,
        array_type: Optional[ArrayType] = None,
    ):
        """Initialize the attribute."""
        self.name = name
        self.type = type
        self.required = required
        self.string_type = string_type
        self.number_type = number_type
        self.object_type = object_type
        self.array_type = array_type

    def __repr__(self) -> str:
        """Return a human readable representation."""
        return f"<Attribute(name={self.name!r}, type={self.type!r})>"


class Builder:
    """Compile an ordered attribute list into a draft-07 JSON Schema."""

    def __init__(
        self,
        name: str,
        description: str,
        attributes: Sequence[Attribute],
        additional_properties: bool = False,
    ):
        """Initialize the builder."""
        self.name = name
        self.description = description
        self.attributes = list(attributes or ())
        self.additional_properties = additional_properties

    def build(self) -> JsonSchemaDocument:
        """Build the schema and check it against the draft-07 meta-schema.

        Raises:
            SchemaBuildError: If the builder or an attribute is unusable
            SchemaValidationFailedError: If the meta-schema rejects the result

        """
        for field_name in ("name", "description", "attributes"):
            if not getattr(self, field_name):
                raise InvalidAttributeError(f"Schema builder requires a {field_name}")

        properties, required = build_properties(self.attributes)
        schema = JsonSchemaDocument(
            draft=DRAFT7_SCHEMA,
            description=self.description,
            type=TYPE_SCHEMA,
            properties=properties,
            required=required or None,
            additional_properties=AdditionalProperties.from_bool(
                self.additional_properties
            ),
        )

        validate_json_schema(schema)
        LOGGER.debug("Built schema %s with %d properties", self.name, len(properties))
        return schema


def build_properties(
    attributes: Sequence[Attribute],
) -> Tuple[Dict[str, JsonSchemaDocument], List[str]]:
    """Compile attributes into `properties` and `required`, preserving order."""
    properties: Dict[str, JsonSchemaDocument] = {}
    required: List[str] = []

    for attr in attributes:
        if attr.name in properties:
            raise DuplicateAttributeError(f"duplicate property: {attr.name}")
        properties[attr.name] = build_property(attr)
        if attr.required:
            required.append(attr.name)

    return properties, required


def build_property(attr: Attribute) -> JsonSchemaDocument:
    """Compile a single attribute."""
    attr_type = _attribute_type(attr.type)
    if attr_type is None:
        raise UnknownAttributeTypeError(f"unknown attr type: {attr.type}")

    if attr_type is AttributeType.ARRAY:
        array_type = attr.array_type
        if array_type is None or not array_type.item_type:
            raise InvalidAttributeError(f"field {attr.name} item type is empty")
        item_type = _attribute_type(array_type.item_type)
        if item_type not in (
            AttributeType.STRING,
            AttributeType.NUMBER,
            AttributeType.BOOLEAN,
        ):
            raise InvalidAttributeError(
                f"field {attr.name} has unsupported item type: {array_type.item_type}"
            )
        return JsonSchemaDocument(
            type=attr_type.value,
            items=Items.from_schema(
                _scalar(
                    attr.name, item_type, array_type.string_type, array_type.number_type
                )
            ),
        )

    if attr_type is AttributeType.OBJECT:
        if attr.object_type is None:
            raise InvalidAttributeError(f"field {attr.name} has no object properties")
        properties, required = build_properties(attr.object_type.attributes)
        return JsonSchemaDocument(
            type=attr_type.value,
            properties=properties,
            required=required or None,
            additional_properties=attr.object_type.additional_properties,
        )

    return _scalar(attr.name, attr_type, attr.string_type, attr.number_type)


def _attribute_type(value) -> Optional[AttributeType]:
    try:
        return AttributeType(value)
    except ValueError:
        return None


def _scalar(
    name: str,
    attr_type: AttributeType,
    string_type: Optional[StringType],
    number_type: Optional[NumberType],
) -> JsonSchemaDocument:
    schema = JsonSchemaDocument(type=attr_type.value)
    if attr_type is AttributeType.STRING and string_type and string_type.format:
        try:
            schema.format = FormatType(string_type.format).value
        except ValueError:
            raise InvalidAttributeError(
                f"field {name} has unsupported format: {string_type.format}"
            ) from None
    elif attr_type is AttributeType.NUMBER and number_type:
        schema.minimum = number_type.minimum
        schema.maximum = number_type.maximum
        schema.exclusive_minimum = number_type.exclusive_minimum
        schema.exclusive_maximum = number_type.exclusive_maximum
    return schema
