"""
Schema classification and IR construction.

Turns one named schema into either an IR Struct or an IR Enumeration,
using the naming and type policy of the selected target generator.
"""

import json
from typing import TYPE_CHECKING, Any, List, Tuple
from enum import Enum

from ...logging_config import get_logger
from .errors import MalformedSchemaError, UnsupportedSchemaTypeError
from .ir import Enumeration, EnumVariant, FieldType, Struct, StructField
from .schema import Reference, Schema, SchemaOrReference, SchemaType

if TYPE_CHECKING:
    from .generator import CodeGenerator

logger = get_logger(__name__)


class SchemaKind(Enum):
    """Kind of declaration a named schema produces."""

    STRUCT = "struct"
    ENUM = "enum"


def object_or_error(name: str, schema: SchemaOrReference) -> Schema:
    """Return the schema object, failing for bare references."""
    if isinstance(schema, Reference):
        raise MalformedSchemaError(
            f"Expected schema object, got reference to '{schema.ref}'",
            schema_name=name,
        )
    return schema


def classify(schema: Schema) -> SchemaKind:
    """Enumeration iff the schema lists enum literals, record otherwise."""
    if schema.enum_values:
        return SchemaKind.ENUM
    return SchemaKind.STRUCT


def build_struct(name: str, schema: Schema, target: "CodeGenerator") -> Struct:
    """
    Build the IR record for a composite schema.

    Args:
        name: Schema name as declared in the document
        schema: The composite schema
        target: Generator providing naming and type mapping

    Returns:
        IR Struct with fields in property declaration order

    Raises:
        UnsupportedSchemaTypeError: If a property type has no target mapping
        MalformedSchemaError: If an array property has no `items`
    """
    fields: List[StructField] = []

    for prop_name, prop_schema in schema.properties.items():
        try:
            field_type, is_array = _resolve_property(prop_schema, target)
        except UnsupportedSchemaTypeError as e:
            raise UnsupportedSchemaTypeError(
                e.schema_type, property_name=prop_name, schema_name=name
            ) from e
        except MalformedSchemaError as e:
            raise MalformedSchemaError(
                f"property '{prop_name}': {e}", schema_name=name
            ) from e

        description = (
            prop_schema.description if isinstance(prop_schema, Schema) else None
        )
        fields.append(
            StructField(
                name=target.normalize_field(prop_name),
                type=field_type,
                required=schema.is_required(prop_name),
                is_array=is_array,
                description=description,
            )
        )

    logger.debug("Built struct %s with %d fields", name, len(fields))
    return Struct(
        name=target.normalize_type(name),
        fields=tuple(fields),
        description=schema.description,
    )


def _resolve_property(
    prop_schema: SchemaOrReference, target: "CodeGenerator"
) -> Tuple[FieldType, bool]:
    """Resolve a property to its field type and array flag."""
    if isinstance(prop_schema, Reference):
        return _resolve_element(prop_schema, target), False

    if prop_schema.schema_type == SchemaType.ARRAY:
        if prop_schema.items is None:
            raise MalformedSchemaError("array schema without 'items'")
        items = prop_schema.items
        if isinstance(items, Schema) and items.schema_type == SchemaType.ARRAY:
            # No IR shape for nested sequences
            raise UnsupportedSchemaTypeError(SchemaType.ARRAY.value)
        return _resolve_element(items, target), True

    return _resolve_element(prop_schema, target), False


def _resolve_element(
    schema: SchemaOrReference, target: "CodeGenerator"
) -> FieldType:
    """References become Ref types, inline schemas go through the type mapper."""
    if isinstance(schema, Reference):
        return FieldType.ref(target.normalize_type(schema.name))
    return FieldType.value(
        target.map_primitive(schema.schema_type, schema.format, schema.minimum)
    )


def literal_text(literal: Any) -> str:
    """Wire text of an enum literal."""
    if isinstance(literal, str):
        return literal
    return json.dumps(literal)


def build_enum(name: str, schema: Schema, target: "CodeGenerator") -> Enumeration:
    """
    Build the IR enumeration for a schema with enum literals.

    Variants keep literal order. A variant carries the literal as explicit
    value whenever its normalized name differs from the literal text.
    """
    variants = []
    for literal in schema.enum_values:
        text = literal_text(literal)
        variant_name = target.normalize_type(text)
        variants.append(
            EnumVariant(
                name=variant_name,
                value=text if variant_name != text else None,
            )
        )

    logger.debug("Built enum %s with %d variants", name, len(variants))
    return Enumeration(
        name=target.normalize_type(name),
        variants=tuple(variants),
        description=schema.description,
    )
