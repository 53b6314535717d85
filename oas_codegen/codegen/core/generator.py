"""
Base generator interface for all code generation targets.

A generator is the per-language policy object of the pipeline: it owns
the naming rules, the type mapping and the templates. The pipeline itself
(classify, build, render) is shared by every target.
"""

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Any, Optional, Union

from ...logging_config import get_logger
from .builder import SchemaKind, build_enum, build_struct, classify, object_or_error
from .config import GeneratorConfig
from .errors import GeneratorError
from .ir import Enumeration, Struct
from .naming import NameSanitizer
from .schema import SchemaOrReference, SchemaType
from .templates import TemplateEngine, create_template_engine
from .types import Number, TypeMapper

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    struct_template = "struct.j2"
    enum_template = "enum.j2"
    header_template = "header.j2"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self.sanitizer = self.create_sanitizer()
        self.type_mapper = self.create_type_mapper()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())
        for name, func in self.template_filters().items():
            self._template_engine.add_filter(name, func)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'rust')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.rs')."""
        pass

    @abstractmethod
    def create_sanitizer(self) -> NameSanitizer:
        """Return the name sanitizer carrying this target's naming rules."""
        pass

    @abstractmethod
    def create_type_mapper(self) -> TypeMapper:
        """Return the type mapper for this target."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    def template_filters(self) -> Dict[str, Callable[..., str]]:
        """Extra or replacement template filters for this target."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    # Naming and type policy

    def normalize_type(self, raw: str) -> str:
        """Identifier for a type declaration or enum variant."""
        return self.sanitizer.to_type_name(raw)

    def normalize_field(self, raw: str) -> str:
        """Identifier for a struct field."""
        return self.sanitizer.to_field_name(raw)

    def map_primitive(
        self,
        schema_type: Optional[SchemaType],
        format: Optional[str] = None,
        minimum: Optional[Number] = None,
    ) -> str:
        """Target type name for a primitive schema type."""
        return self.type_mapper.map_type(schema_type, format, minimum)

    # Rendering

    def template_options(self) -> Dict[str, Any]:
        """Style options exposed to templates next to the IR."""
        return {
            "add_comments": self.config.add_comments,
            "indent": " " * self.config.indent_size,
            "indent_size": self.config.indent_size,
        }

    def render_struct(self, struct: Struct) -> str:
        """Render one IR struct."""
        context = struct.to_context()
        context["options"] = self.template_options()
        return self.render_template(self.struct_template, context)

    def render_enum(self, enum: Enumeration) -> str:
        """Render one IR enumeration."""
        context = enum.to_context()
        context["options"] = self.template_options()
        return self.render_template(self.enum_template, context)

    def render_header(self, type_names: List[str]) -> Optional[str]:
        """Render the module header, or None when disabled."""
        if not self.config.add_header or not self.template_exists(
            self.header_template
        ):
            return None
        context = {"type_names": type_names, "options": self.template_options()}
        return self.render_template(self.header_template, context)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)

    # Pipeline

    def build_schema(
        self, name: str, schema: SchemaOrReference
    ) -> Union[Struct, Enumeration]:
        """Classify one named schema and build its IR."""
        obj = object_or_error(name, schema)
        if classify(obj) == SchemaKind.ENUM:
            return build_enum(name, obj, self)
        return build_struct(name, obj, self)

    def render_declaration(self, declaration: Union[Struct, Enumeration]) -> str:
        """Render an IR struct or enumeration."""
        if isinstance(declaration, Enumeration):
            return self.render_enum(declaration)
        return self.render_struct(declaration)

    def generate_schema(self, name: str, schema: SchemaOrReference) -> str:
        """Classify, build and render one named schema."""
        return self.render_declaration(self.build_schema(name, schema))

    def find_collisions(self, declaration: Union[Struct, Enumeration]) -> List[str]:
        """Report sibling names that normalized to the same identifier."""
        if isinstance(declaration, Enumeration):
            names = [variant.name for variant in declaration.variants]
            kind = "variant"
        else:
            names = [field.name for field in declaration.fields]
            kind = "field"

        counts = Counter(names)
        return [
            f"Duplicate {kind} name '{name}' in {declaration.name}"
            for name, count in counts.items()
            if count > 1
        ]

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"


@dataclass
class SchemaError:
    """A schema whose declaration could not be generated."""

    schema_name: str
    message: str
    exception: Optional[Exception] = None


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
        errors: List[SchemaError] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code for every schema that succeeded
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
            errors: Per-schema failures
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.errors = errors or []
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @property
    def success(self) -> bool:
        """True when the run failed neither globally nor for any schema."""
        return self.error_message is None and not self.errors

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, schemas: Dict[str, SchemaOrReference]
) -> GenerationResult:
    """
    Generate code for all schemas, isolating per-schema failures.

    Args:
        generator: Code generator instance
        schemas: Named schemas, in the order they should be emitted

    Returns:
        GenerationResult with code, warnings, per-schema errors and metadata
    """
    declarations = []
    warnings: List[str] = []
    errors: List[SchemaError] = []
    counts = Counter()

    for name, schema in schemas.items():
        try:
            declaration = generator.build_schema(name, schema)
            rendered = generator.render_declaration(declaration)
        except GeneratorError as e:
            logger.warning("Skipping schema %s: %s", name, e)
            errors.append(SchemaError(schema_name=name, message=str(e), exception=e))
            continue

        logger.debug("Generated %s for schema %s", type(declaration).__name__, name)
        counts["enums" if isinstance(declaration, Enumeration) else "structs"] += 1
        warnings.extend(generator.find_collisions(declaration))
        declarations.append((declaration.name, rendered))

    type_names = [type_name for type_name, _ in declarations]
    for type_name, count in Counter(type_names).items():
        if count > 1:
            warnings.append(f"Duplicate type name '{type_name}'")

    try:
        header = generator.render_header(type_names)
    except GeneratorError as e:
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)

    parts = [header] if header else []
    parts.extend(rendered for _, rendered in declarations)
    code = generator.format_code("\n".join(parts)) if parts else ""

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "schema_count": len(schemas),
        "struct_count": counts["structs"],
        "enum_count": counts["enums"],
        "failed_count": len(errors),
    }

    logger.info(
        "Generated %d of %d schemas for %s",
        len(declarations),
        len(schemas),
        generator.language_name,
    )
    return GenerationResult(code, warnings, metadata, errors)
