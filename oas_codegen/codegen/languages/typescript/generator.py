"""
TypeScript code generator implementation.

Generates TypeScript interfaces and string enums from OpenAPI schemas.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from ...core.config import load_config
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer
from .naming import create_typescript_sanitizer
from .types import TypeScriptTypeMapper


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces and enums."""

    struct_template = "struct.ts.j2"
    enum_template = "enum.ts.j2"
    header_template = "header.ts.j2"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def get_template_directory(self) -> Path:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_typescript_sanitizer()

    def create_type_mapper(self) -> TypeScriptTypeMapper:
        return TypeScriptTypeMapper()

    def template_options(self) -> Dict[str, Any]:
        options = super().template_options()
        options["export"] = self.config.custom.get("export", True)
        options["readonly"] = self.config.custom.get("readonly", False)
        return options


def create_typescript_generator(
    config: Optional[Dict[str, Any]] = None,
) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration plus overrides."""
    return TypeScriptGenerator(load_config("typescript", custom_config=config))


def create_readonly_typescript_generator() -> TypeScriptGenerator:
    """
    Create generator for immutable API models.

    Features:
    - Exported declarations
    - Every interface property is readonly
    """
    return create_typescript_generator({"custom": {"readonly": True}})
