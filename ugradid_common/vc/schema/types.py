"""JSON Schema primitive types."""

from enum import Enum
from typing import Iterable, List, Union

from marshmallow import ValidationError


class PrimitiveType(str, Enum):
    """The primitive types of JSON Schema draft-07."""

    NULL = "null"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    STRING = "string"
    INTEGER = "integer"

    @classmethod
    def get(cls, name: str) -> "PrimitiveType":
        """Look up a primitive type by its JSON name."""
        try:
            return cls(name)
        except ValueError:
            raise ValidationError(f"invalid primitive type: {name}") from None


class PrimitiveTypeList(List[PrimitiveType]):
    """The value of a `type` keyword: one primitive type or several.

    A list holding a single type is written as a scalar, longer lists as an
    array.
    """

    class Kind(Enum):
        """Which form the `type` keyword takes on the wire."""

        SINGLE = "single"
        LIST = "list"

    def __init__(self, types: Iterable[Union[str, PrimitiveType]] = ()):
        """Initialize from type names or `PrimitiveType` members."""
        super().__init__(PrimitiveType.get(t) for t in types)

    @classmethod
    def of(cls, *types: Union[str, PrimitiveType]) -> "PrimitiveTypeList":
        """Build a type list from its members."""
        return cls(types)

    @property
    def kind(self) -> "PrimitiveTypeList.Kind":
        """Wire form of this type list."""
        return self.Kind.LIST if len(self) > 1 else self.Kind.SINGLE

    def names(self) -> List[str]:
        """Return the JSON names of the types, in order."""
        return [t.value for t in self]

    def encode(self) -> Union[str, List[str]]:
        """Encode as a scalar for a single type, as an array otherwise."""
        if not self:
            raise ValidationError("type must declare at least one primitive type")
        if self.kind is self.Kind.SINGLE:
            return self[0].value
        return self.names()

    @classmethod
    def decode(cls, value) -> "PrimitiveTypeList":
        """Decode a scalar type name or an array of type names."""
        if isinstance(value, str):
            return cls([value])
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            if not value:
                raise ValidationError("type must declare at least one primitive type")
            return cls(value)
        raise ValidationError("failed to parse primitive types list")
