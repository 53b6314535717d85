"""
Core code generation components.

Provides the schema model, IR, builders and base classes used by all
language generators.
"""

from .errors import GeneratorError, UnsupportedSchemaTypeError, MalformedSchemaError
from .schema import (
    Schema,
    SchemaType,
    Reference,
    parse_schema,
    load_component_schemas,
)
from .ir import FieldType, FieldTypeKind, Struct, StructField, Enumeration, EnumVariant
from .builder import SchemaKind, classify, build_struct, build_enum
from .naming import NameSanitizer, NamingCase, split_words
from .types import TypeConfig, TypeMapper
from .generator import CodeGenerator, GenerationResult, SchemaError, generate_code
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, RenderError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "UnsupportedSchemaTypeError",
    "MalformedSchemaError",
    # Schema system - input data structures
    "Schema",
    "SchemaType",
    "Reference",
    "parse_schema",
    "load_component_schemas",
    # Intermediate representation
    "FieldType",
    "FieldTypeKind",
    "Struct",
    "StructField",
    "Enumeration",
    "EnumVariant",
    # Classification and IR construction
    "SchemaKind",
    "classify",
    "build_struct",
    "build_enum",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "split_words",
    # Type system
    "TypeConfig",
    "TypeMapper",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "SchemaError",
    "generate_code",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "RenderError",
    "create_template_engine",
]
