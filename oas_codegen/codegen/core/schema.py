"""
Core schema representation for code generation.

Converts the `components.schemas` section of a parsed OpenAPI 3 document
into a normalized internal format that the pipeline can work with
consistently. No validation happens here beyond shaping the data.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Union, Any
from enum import Enum

from ...logging_config import get_logger
from .errors import MalformedSchemaError

logger = get_logger(__name__)


class SchemaType(Enum):
    """Primitive type tags defined by OpenAPI 3."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


@dataclass(frozen=True)
class Reference:
    """A `$ref` pointing at another named schema."""

    ref: str

    @property
    def name(self) -> str:
        """Name of the referenced schema (last path segment)."""
        return self.ref.rsplit("/", 1)[-1]


@dataclass
class Schema:
    """Represents one OpenAPI schema object."""

    schema_type: Optional[SchemaType] = None
    description: Optional[str] = None
    format: Optional[str] = None
    minimum: Optional[Union[int, float]] = None
    enum_values: List[Any] = field(default_factory=list)
    properties: Dict[str, "SchemaOrReference"] = field(default_factory=dict)
    required: Set[str] = field(default_factory=set)
    items: Optional["SchemaOrReference"] = None
    nullable: bool = False

    def is_required(self, property_name: str) -> bool:
        """Check whether a property is listed in the required set."""
        return property_name in self.required


SchemaOrReference = Union[Schema, Reference]


def _parse_type(raw_type: Any, schema: Schema) -> None:
    """Resolve a 3.0 `type` string or a 3.1 `type` list onto the schema."""
    if raw_type is None:
        return

    if isinstance(raw_type, list):
        types = [t for t in raw_type if t != SchemaType.NULL.value]
        if len(types) != len(raw_type):
            schema.nullable = True
        if not types:
            schema.schema_type = SchemaType.NULL
            return
        if len(types) > 1:
            logger.warning(
                "Multiple types %s declared, using the first one: %s", types, types[0]
            )
        raw_type = types[0]

    try:
        schema.schema_type = SchemaType(raw_type)
    except ValueError as e:
        raise MalformedSchemaError(f"Unknown schema type: {raw_type!r}") from e


def parse_schema(data: Any) -> SchemaOrReference:
    """
    Convert a raw schema object into a Schema or Reference.

    Args:
        data: Schema object as decoded from the JSON document

    Returns:
        Reference for `$ref` objects, Schema otherwise
    """
    if not isinstance(data, dict):
        raise MalformedSchemaError(
            f"Expected schema object, got {type(data).__name__}"
        )

    if "$ref" in data:
        return Reference(ref=data["$ref"])

    schema = Schema(
        description=data.get("description"),
        format=data.get("format"),
        minimum=data.get("minimum"),
        enum_values=list(data.get("enum") or []),
        required=set(data.get("required") or []),
        nullable=bool(data.get("nullable", False)),
    )
    _parse_type(data.get("type"), schema)

    for prop_name, prop_data in (data.get("properties") or {}).items():
        schema.properties[prop_name] = parse_schema(prop_data)

    if "items" in data:
        schema.items = parse_schema(data["items"])

    return schema


def load_component_schemas(document: Any) -> Dict[str, SchemaOrReference]:
    """
    Extract all named component schemas from an OpenAPI document.

    Args:
        document: The decoded OpenAPI document

    Returns:
        Dict mapping schema name to Schema/Reference, in document order
    """
    if not isinstance(document, dict):
        raise MalformedSchemaError("OpenAPI document must be a JSON object")

    components = document.get("components") or {}
    raw_schemas = components.get("schemas") or {}

    schemas: Dict[str, SchemaOrReference] = {}
    for name, raw in raw_schemas.items():
        try:
            schemas[name] = parse_schema(raw)
        except MalformedSchemaError as e:
            raise MalformedSchemaError(str(e), schema_name=name) from e

    logger.info("Loaded %d component schemas", len(schemas))
    return schemas
