"""
Exception hierarchy for the code generation pipeline.

Every failure that aborts a single schema derives from GeneratorError so
the pipeline can isolate it and move on to the next schema.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class UnsupportedSchemaTypeError(GeneratorError):
    """A primitive schema type tag has no mapping in the target language."""

    def __init__(
        self,
        schema_type: Optional[str],
        property_name: Optional[str] = None,
        schema_name: Optional[str] = None,
    ):
        self.schema_type = schema_type
        self.property_name = property_name
        self.schema_name = schema_name
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f"Unsupported type: {self.schema_type}"
        if self.property_name is not None:
            location = self.property_name
            if self.schema_name is not None:
                location = f"{self.schema_name}.{self.property_name}"
            message = f"{message} (property '{location}')"
        return message


class MalformedSchemaError(GeneratorError):
    """A schema is not shaped the way the pipeline expects."""

    def __init__(self, message: str, schema_name: Optional[str] = None):
        self.schema_name = schema_name
        if schema_name is not None:
            message = f"{schema_name}: {message}"
        super().__init__(message)
