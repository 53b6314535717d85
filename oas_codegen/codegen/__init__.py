"""
OpenAPI Code Generation Module

Generates typed data models in various languages from the component
schemas of an OpenAPI 3 document.
"""

from typing import Any, Dict, Optional, Union
from pathlib import Path

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    resolve_language,
)
from .core.errors import GeneratorError, UnsupportedSchemaTypeError, MalformedSchemaError
from .core.generator import CodeGenerator, GenerationResult, SchemaError, generate_code
from .core.schema import Schema, SchemaType, Reference, load_component_schemas
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config


# Convenience functions
def generate_from_document(
    document: Any,
    language: str = "rust",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> GenerationResult:
    """
    Generate code for every component schema of an OpenAPI document.

    Args:
        document: Parsed OpenAPI 3 document
        language: Target language name or alias
        config: Generator configuration object, dict or path

    Returns:
        GenerationResult with generated code

    Raises:
        MalformedSchemaError: If the components section cannot be read
        RegistryError: If the language is not supported
    """
    schemas = load_component_schemas(document)
    generator = get_generator(language, config)
    return generate_code(generator, schemas)


def quick_generate(document: Any, language: str = "rust", **options) -> str:
    """
    Quick code generation from an OpenAPI document.

    Args:
        document: OpenAPI document (dict or JSON string)
        language: Target language
        **options: Generator options

    Returns:
        Generated code string

    Raises:
        GeneratorError: If any schema fails to generate
    """
    if isinstance(document, str):
        import json

        document = json.loads(document)

    result = generate_from_document(document, language, options)

    if result.success:
        return result.code

    messages = [result.error_message] if result.error_message else []
    messages.extend(f"{error.schema_name}: {error.message}" for error in result.errors)
    raise GeneratorError(f"Code generation failed: {'; '.join(messages)}")


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "SchemaError",
    "GeneratorError",
    "UnsupportedSchemaTypeError",
    "MalformedSchemaError",
    "Schema",
    "SchemaType",
    "Reference",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "load_component_schemas",
    "generate_code",
    "generate_from_document",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
    "resolve_language",
]
