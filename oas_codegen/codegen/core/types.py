"""
Language-agnostic part of the type system.

Maps OpenAPI primitive type tags to target type names. Strings, booleans
and the array marker are plain lookups; numeric resolution is left to
each target because it depends on whether the target has fixed-width
numeric primitives.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

from .errors import UnsupportedSchemaTypeError
from .schema import SchemaType

Number = Union[int, float]


@dataclass
class TypeConfig:
    """Target type names shared by every language."""

    string_type: str = "string"
    bool_type: str = "bool"
    # Generic sequence marker; the element type is resolved by the builder
    array_type: str = "Array"


class TypeMapper(ABC):
    """Maps a schema primitive plus format/minimum hints to a target type name."""

    def __init__(self, config: Optional[TypeConfig] = None):
        self.config = config or self.default_config()

    @classmethod
    def default_config(cls) -> TypeConfig:
        return TypeConfig()

    def map_type(
        self,
        schema_type: Optional[SchemaType],
        format: Optional[str] = None,
        minimum: Optional[Number] = None,
    ) -> str:
        """
        Map a primitive schema type to a target type name.

        Args:
            schema_type: OpenAPI type tag
            format: Optional `format` hint
            minimum: Optional `minimum` hint

        Returns:
            Target type name

        Raises:
            UnsupportedSchemaTypeError: If the type has no mapping
        """
        if schema_type == SchemaType.STRING:
            return self.config.string_type
        elif schema_type == SchemaType.BOOLEAN:
            return self.config.bool_type
        elif schema_type == SchemaType.ARRAY:
            return self.config.array_type
        elif schema_type == SchemaType.NUMBER:
            return self.map_number(format)
        elif schema_type == SchemaType.INTEGER:
            return self.map_integer(format, minimum)

        raise UnsupportedSchemaTypeError(
            schema_type.value if schema_type is not None else None
        )

    @abstractmethod
    def map_number(self, format: Optional[str]) -> str:
        """Resolve the `number` type."""
        pass

    @abstractmethod
    def map_integer(self, format: Optional[str], minimum: Optional[Number]) -> str:
        """Resolve the `integer` type."""
        pass


def is_zero_minimum(minimum: Optional[Number]) -> bool:
    """True when a minimum hint is present and numerically equal to zero."""
    if minimum is None or isinstance(minimum, bool):
        return False
    return minimum == 0
