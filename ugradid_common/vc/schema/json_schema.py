"""JSON Schema draft-07 document model.

Four keywords accept more than one shape and carry no discriminant on the
wire: `additionalProperties`, `items`, the values of `dependencies`, and
`type`. Each is held as a tagged value recording which shape was present, and
is written back in exactly that shape.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from marshmallow import EXCLUDE, ValidationError, fields
from marshmallow.validate import Range

from ...models.base import BaseModel, BaseModelSchema
from .types import PrimitiveTypeList

DRAFT7_SCHEMA = "http://json-schema.org/draft-07/schema#"


class TaggedValue:
    """A value holding exactly one of two named alternatives."""

    class Kind(Enum):
        """Alternatives; overridden by subclasses."""

    def __init__(self, kind, value):
        """Initialize with the alternative in use and its payload."""
        self.kind = self.Kind(kind)
        self.value = value

    def __eq__(self, other) -> bool:
        """Check equality of kind and payload."""
        return (
            type(other) is type(self)
            and other.kind is self.kind
            and other.value == self.value
        )

    def __repr__(self) -> str:
        """Return a human readable representation."""
        return f"<{self.__class__.__name__}({self.kind.name}, {self.value!r})>"


class AdditionalProperties(TaggedValue):
    """Value of `additionalProperties`: a subschema or a boolean."""

    class Kind(Enum):
        """Alternatives for additionalProperties."""

        SCHEMA = "schema"
        BOOLEAN = "boolean"

    @classmethod
    def from_schema(cls, schema: "JsonSchemaDocument") -> "AdditionalProperties":
        """Constrain additional properties with a subschema."""
        return cls(cls.Kind.SCHEMA, schema)

    @classmethod
    def from_bool(cls, allowed: bool) -> "AdditionalProperties":
        """Allow or forbid additional properties outright."""
        return cls(cls.Kind.BOOLEAN, bool(allowed))

    @classmethod
    def coerce(cls, value) -> Optional["AdditionalProperties"]:
        """Accept a tagged value, a subschema or a boolean."""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.from_bool(value)
        if isinstance(value, JsonSchemaDocument):
            return cls.from_schema(value)
        raise TypeError(f"Cannot use {value!r} as additionalProperties")

    @property
    def schema(self) -> Optional["JsonSchemaDocument"]:
        """Subschema, when that alternative is in use."""
        return self.value if self.kind is self.Kind.SCHEMA else None

    @property
    def status(self) -> Optional[bool]:
        """Boolean, when that alternative is in use."""
        return self.value if self.kind is self.Kind.BOOLEAN else None


class Items(TaggedValue):
    """Value of `items`: one subschema for every item, or one per position."""

    class Kind(Enum):
        """Alternatives for items."""

        SCHEMA = "schema"
        SCHEMA_LIST = "schema_list"

    @classmethod
    def from_schema(cls, schema: "JsonSchemaDocument") -> "Items":
        """Apply one subschema to every item."""
        return cls(cls.Kind.SCHEMA, schema)

    @classmethod
    def from_schemas(cls, schemas: Sequence["JsonSchemaDocument"]) -> "Items":
        """Apply subschemas positionally."""
        return cls(cls.Kind.SCHEMA_LIST, list(schemas))

    @classmethod
    def coerce(cls, value) -> Optional["Items"]:
        """Accept a tagged value, a subschema or a list of subschemas."""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, JsonSchemaDocument):
            return cls.from_schema(value)
        if isinstance(value, (list, tuple)):
            return cls.from_schemas(value)
        raise TypeError(f"Cannot use {value!r} as items")

    @property
    def schema(self) -> Optional["JsonSchemaDocument"]:
        """Single subschema, when that alternative is in use."""
        return self.value if self.kind is self.Kind.SCHEMA else None

    @property
    def schemas(self) -> Optional[List["JsonSchemaDocument"]]:
        """Positional subschemas, when that alternative is in use."""
        return self.value if self.kind is self.Kind.SCHEMA_LIST else None


class Dependency(TaggedValue):
    """Value of one `dependencies` entry: a subschema or required names."""

    class Kind(Enum):
        """Alternatives for a dependency."""

        SCHEMA = "schema"
        REQUIRED_PROPERTIES = "required_properties"

    @classmethod
    def from_schema(cls, schema: "JsonSchemaDocument") -> "Dependency":
        """Schema dependency."""
        return cls(cls.Kind.SCHEMA, schema)

    @classmethod
    def from_required(cls, names: Sequence[str]) -> "Dependency":
        """Property dependency."""
        return cls(cls.Kind.REQUIRED_PROPERTIES, list(names))

    @classmethod
    def coerce(cls, value) -> "Dependency":
        """Accept a tagged value, a subschema or a list of property names."""
        if isinstance(value, cls):
            return value
        if isinstance(value, JsonSchemaDocument):
            return cls.from_schema(value)
        if isinstance(value, (list, tuple)):
            return cls.from_required(value)
        raise TypeError(f"Cannot use {value!r} as a dependency")

    @property
    def schema(self) -> Optional["JsonSchemaDocument"]:
        """Subschema, when that alternative is in use."""
        return self.value if self.kind is self.Kind.SCHEMA else None

    @property
    def required_properties(self) -> Optional[List[str]]:
        """Required property names, when that alternative is in use."""
        return self.value if self.kind is self.Kind.REQUIRED_PROPERTIES else None


def _load_subschema(value) -> "JsonSchemaDocument":
    if not isinstance(value, dict):
        raise ValidationError("Field should be a JSON Schema object")
    return JsonSchemaDocumentSchema().load(value)


def _dump_subschema(schema: "JsonSchemaDocument") -> dict:
    return JsonSchemaDocumentSchema().dump(schema)


class AdditionalPropertiesField(fields.Field):
    """Subschema or boolean field for Marshmallow."""

    def _serialize(self, value: Optional[AdditionalProperties], attr, obj, **kwargs):
        if value is None:
            return None
        if value.kind is AdditionalProperties.Kind.SCHEMA:
            return _dump_subschema(value.value)
        return value.value

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            return AdditionalProperties.from_bool(value)
        if isinstance(value, dict):
            return AdditionalProperties.from_schema(_load_subschema(value))
        raise ValidationError("Field should be a JSON Schema object or a boolean")


class ItemsField(fields.Field):
    """Subschema or subschema list field for Marshmallow."""

    def _serialize(self, value: Optional[Items], attr, obj, **kwargs):
        if value is None:
            return None
        if value.kind is Items.Kind.SCHEMA_LIST:
            return [_dump_subschema(schema) for schema in value.value]
        return _dump_subschema(value.value)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, list):
            return Items.from_schemas([_load_subschema(item) for item in value])
        if isinstance(value, dict):
            return Items.from_schema(_load_subschema(value))
        raise ValidationError("Field should be a JSON Schema object or a list of them")


class DependencyField(fields.Field):
    """Subschema or property name list field for Marshmallow."""

    def _serialize(self, value: Optional[Dependency], attr, obj, **kwargs):
        if value is None:
            return None
        if value.kind is Dependency.Kind.REQUIRED_PROPERTIES:
            return list(value.value)
        return _dump_subschema(value.value)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, list):
            if not all(isinstance(item, str) for item in value):
                raise ValidationError("Property dependencies should be strings")
            return Dependency.from_required(value)
        if isinstance(value, dict):
            return Dependency.from_schema(_load_subschema(value))
        raise ValidationError("Field should be a JSON Schema object or a list of names")


class PrimitiveTypeListField(fields.Field):
    """Primitive type or primitive type list field for Marshmallow."""

    def _serialize(self, value: Optional[PrimitiveTypeList], attr, obj, **kwargs):
        if value is None:
            return None
        return value.encode()

    def _deserialize(self, value, attr, data, **kwargs):
        return PrimitiveTypeList.decode(value)


class NumberField(fields.Field):
    """JSON number field for Marshmallow, keeping integers as integers."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError("Field should be a number")
        return value


def _subschema(**kwargs) -> fields.Nested:
    return fields.Nested(lambda: JsonSchemaDocumentSchema(), **kwargs)


def _subschema_map(**kwargs) -> fields.Dict:
    return fields.Dict(keys=fields.Str(), values=_subschema(), **kwargs)


def _subschema_list(**kwargs) -> fields.List:
    return fields.List(_subschema(), **kwargs)


def _count(**kwargs) -> fields.Int:
    return fields.Int(strict=True, validate=Range(min=0), **kwargs)


class JsonSchemaDocument(BaseModel):
    """A JSON Schema draft-07 document."""

    class Meta:
        """JsonSchemaDocument metadata."""

        schema_class = "JsonSchemaDocumentSchema"

    def __init__(
        self,
        *,
        comment: Optional[str] = None,
        id: Optional[str] = None,
        ref: Optional[str] = None,
        draft: Optional[str] = None,
        additional_items: Optional["JsonSchemaDocument"] = None,
        additional_properties: Union[AdditionalProperties, bool, None] = None,
        all_of: Optional[List["JsonSchemaDocument"]] = None,
        any_of: Optional[List["JsonSchemaDocument"]] = None,
        const: Any = None,
        contains: Optional["JsonSchemaDocument"] = None,
        default: Any = None,
        definitions: Optional[Dict[str, "JsonSchemaDocument"]] = None,
        dependencies: Optional[Dict[str, Union[Dependency, list]]] = None,
        description: Optional[str] = None,
        else_schema: Optional["JsonSchemaDocument"] = None,
        enum: Optional[list] = None,
        examples: Optional[list] = None,
        exclusive_maximum: Optional[float] = None,
        exclusive_minimum: Optional[float] = None,
        format: Optional[str] = None,
        if_schema: Optional["JsonSchemaDocument"] = None,
        items: Union[Items, "JsonSchemaDocument", list] = None,
        max_items: Optional[int] = None,
        max_length: Optional[int] = None,
        max_properties: Optional[int] = None,
        maximum: Optional[float] = None,
        min_items: Optional[int] = None,
        min_length: Optional[int] = None,
        min_properties: Optional[int] = None,
        minimum: Optional[float] = None,
        multiple_of: Optional[float] = None,
        not_schema: Optional["JsonSchemaDocument"] = None,
        one_of: Optional[List["JsonSchemaDocument"]] = None,
        pattern: Optional[str] = None,
        pattern_properties: Optional[Dict[str, "JsonSchemaDocument"]] = None,
        properties: Optional[Dict[str, "JsonSchemaDocument"]] = None,
        property_names: Optional["JsonSchemaDocument"] = None,
        required: Optional[List[str]] = None,
        then_schema: Optional["JsonSchemaDocument"] = None,
        title: Optional[str] = None,
        type: Union[PrimitiveTypeList, str, Sequence[str]] = None,
        unique_items: Optional[bool] = None,
    ):
        """Initialize the JsonSchemaDocument instance.

        The polymorphic keywords also accept their plain payloads: a bool or
        subschema for `additional_properties`, a subschema or list for
        `items` and `dependencies` values, a name or list of names for `type`.
        """
        self.comment = comment
        self.id = id
        self.ref = ref
        self.draft = draft
        self.additional_items = additional_items
        self.additional_properties = AdditionalProperties.coerce(additional_properties)
        self.all_of = all_of
        self.any_of = any_of
        self.const = const
        self.contains = contains
        self.default = default
        self.definitions = definitions
        self.dependencies = (
            {key: Dependency.coerce(value) for key, value in dependencies.items()}
            if dependencies is not None
            else None
        )
        self.description = description
        self.else_schema = else_schema
        self.enum = enum
        self.examples = examples
        self.exclusive_maximum = exclusive_maximum
        self.exclusive_minimum = exclusive_minimum
        self.format = format
        self.if_schema = if_schema
        self.items = Items.coerce(items)
        self.max_items = max_items
        self.max_length = max_length
        self.max_properties = max_properties
        self.maximum = maximum
        self.min_items = min_items
        self.min_length = min_length
        self.min_properties = min_properties
        self.minimum = minimum
        self.multiple_of = multiple_of
        self.not_schema = not_schema
        self.one_of = one_of
        self.pattern = pattern
        self.pattern_properties = pattern_properties
        self.properties = properties
        self.property_names = property_names
        self.required = required
        self.then_schema = then_schema
        self.title = title
        self.type = (
            type
            if type is None or isinstance(type, PrimitiveTypeList)
            else PrimitiveTypeList([type] if isinstance(type, str) else type)
        )
        self.unique_items = unique_items

    def get_properties(self) -> Dict[str, "JsonSchemaDocument"]:
        """Return the declared properties, empty when there are none."""
        return dict(self.properties or {})

    def required_fields(self) -> List[str]:
        """Return the names of the required properties."""
        return list(self.required or [])

    def allows_additional_properties(self) -> bool:
        """Check whether `additionalProperties` is literally `true`.

        A subschema or an absent keyword counts as not allowed.
        """
        return (
            self.additional_properties is not None
            and self.additional_properties.status is True
        )

    def declared_type(self) -> Tuple[str, ...]:
        """Return the declared primitive type names, in order."""
        return tuple(self.type.names()) if self.type else ()

    def declared_format(self) -> str:
        """Return the declared format, or the empty string."""
        return self.format or ""

    def __eq__(self, other) -> bool:
        """Check equalness."""
        return type(other) is type(self) and other.__dict__ == self.__dict__


class JsonSchemaDocumentSchema(BaseModelSchema):
    """JSON Schema draft-07 document schema.

    Based on https://json-schema.org/specification-links.html#draft-7

    """

    class Meta:
        """Ignore keywords outside the draft-07 vocabulary."""

        unknown = EXCLUDE
        model_class = JsonSchemaDocument

    comment = fields.Str(data_key="$comment")
    id = fields.Str(data_key="$id")
    ref = fields.Str(data_key="$ref")
    draft = fields.Str(data_key="$schema")
    additional_items = _subschema(data_key="additionalItems")
    additional_properties = AdditionalPropertiesField(data_key="additionalProperties")
    all_of = _subschema_list(data_key="allOf")
    any_of = _subschema_list(data_key="anyOf")
    const = fields.Raw(allow_none=True)
    contains = _subschema()
    default = fields.Raw(allow_none=True)
    definitions = _subschema_map()
    dependencies = fields.Dict(keys=fields.Str(), values=DependencyField())
    description = fields.Str()
    else_schema = _subschema(data_key="else")
    enum = fields.List(fields.Raw(allow_none=True))
    examples = fields.List(fields.Raw(allow_none=True))
    exclusive_maximum = NumberField(data_key="exclusiveMaximum")
    exclusive_minimum = NumberField(data_key="exclusiveMinimum")
    format = fields.Str()
    if_schema = _subschema(data_key="if")
    items = ItemsField()
    max_items = _count(data_key="maxItems")
    max_length = _count(data_key="maxLength")
    max_properties = _count(data_key="maxProperties")
    maximum = NumberField()
    min_items = _count(data_key="minItems")
    min_length = _count(data_key="minLength")
    min_properties = _count(data_key="minProperties")
    minimum = NumberField()
    multiple_of = NumberField(data_key="multipleOf")
    not_schema = _subschema(data_key="not")
    one_of = _subschema_list(data_key="oneOf")
    pattern = fields.Str()
    pattern_properties = _subschema_map(data_key="patternProperties")
    properties = _subschema_map()
    property_names = _subschema(data_key="propertyNames")
    required = fields.List(fields.Str())
    then_schema = _subschema(data_key="then")
    title = fields.Str()
    type = PrimitiveTypeListField()
    unique_items = fields.Bool(data_key="uniqueItems")
