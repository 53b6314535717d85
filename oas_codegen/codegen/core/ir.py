"""
Intermediate representation handed from the builders to the renderers.

Every node is immutable and built fresh for one schema. The attributes
declared here are the complete set of template variables a renderer may
rely on.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from enum import Enum


class FieldTypeKind(Enum):
    """Whether a field holds a primitive value or another generated type."""

    VALUE = "value"
    REF = "ref"


@dataclass(frozen=True)
class FieldType:
    """Tagged field type: either a target value type or a generated type name."""

    kind: FieldTypeKind
    name: str

    @classmethod
    def value(cls, type_name: str) -> "FieldType":
        return cls(FieldTypeKind.VALUE, type_name)

    @classmethod
    def ref(cls, type_name: str) -> "FieldType":
        return cls(FieldTypeKind.REF, type_name)

    @property
    def is_ref(self) -> bool:
        return self.kind == FieldTypeKind.REF

    @property
    def is_value(self) -> bool:
        return self.kind == FieldTypeKind.VALUE


@dataclass(frozen=True)
class StructField:
    """A single field of a generated record."""

    name: str
    type: FieldType
    required: bool
    is_array: bool = False
    description: Optional[str] = None


@dataclass(frozen=True)
class Struct:
    """A generated record declaration."""

    name: str
    fields: Tuple[StructField, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    def to_context(self) -> Dict[str, Any]:
        """Template variables for this struct."""
        return {
            "name": self.name,
            "description": self.description,
            "fields": self.fields,
        }


@dataclass(frozen=True)
class EnumVariant:
    """A single variant of a generated enumeration.

    `value` holds the original wire literal when it differs from `name`.
    """

    name: str
    value: Optional[str] = None


@dataclass(frozen=True)
class Enumeration:
    """A generated enumeration declaration."""

    name: str
    variants: Tuple[EnumVariant, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    def to_context(self) -> Dict[str, Any]:
        """Template variables for this enum."""
        return {
            "name": self.name,
            "description": self.description,
            "variants": self.variants,
        }
