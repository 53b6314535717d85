"""
TypeScript code generator for OpenAPI component schemas.
"""

from .generator import (
    TypeScriptGenerator,
    create_typescript_generator,
    create_readonly_typescript_generator,
)
from .naming import create_typescript_sanitizer
from .types import TypeScriptTypeConfig, TypeScriptTypeMapper

__all__ = [
    "TypeScriptGenerator",
    "create_typescript_generator",
    "create_readonly_typescript_generator",
    "create_typescript_sanitizer",
    "TypeScriptTypeConfig",
    "TypeScriptTypeMapper",
]
