"""
TypeScript-specific type system for code generation.
"""

from dataclasses import dataclass
from typing import Optional

from ...core.types import Number, TypeConfig, TypeMapper


@dataclass
class TypeScriptTypeConfig(TypeConfig):
    """Configuration for TypeScript type mapping behavior."""

    string_type: str = "string"
    bool_type: str = "boolean"
    array_type: str = "Array"
    number_type: str = "number"


class TypeScriptTypeMapper(TypeMapper):
    """Maps OpenAPI primitives to TypeScript types.

    TypeScript has a single numeric type, so `format` and `minimum` are
    ignored.
    """

    @classmethod
    def default_config(cls) -> TypeScriptTypeConfig:
        return TypeScriptTypeConfig()

    def map_number(self, format: Optional[str]) -> str:
        return self.config.number_type

    def map_integer(self, format: Optional[str], minimum: Optional[Number]) -> str:
        return self.config.number_type
