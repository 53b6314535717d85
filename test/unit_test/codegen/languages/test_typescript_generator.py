"""
Unit tests for the TypeScript target.
"""

import pytest

from oas_codegen.codegen.core.errors import UnsupportedSchemaTypeError
from oas_codegen.codegen.core.generator import generate_code
from oas_codegen.codegen.core.schema import SchemaType, load_component_schemas, parse_schema
from oas_codegen.codegen.languages.typescript import (
    TypeScriptTypeMapper,
    create_readonly_typescript_generator,
    create_typescript_generator,
)


class TestTypeScriptTypeMapper:
    """Test TypeScriptTypeMapper.map_type."""

    @pytest.fixture
    def mapper(self):
        return TypeScriptTypeMapper()

    def test_primitives(self, mapper):
        assert mapper.map_type(SchemaType.STRING) == "string"
        assert mapper.map_type(SchemaType.BOOLEAN) == "boolean"
        assert mapper.map_type(SchemaType.ARRAY) == "Array"

    @pytest.mark.parametrize("schema_type", [SchemaType.NUMBER, SchemaType.INTEGER])
    @pytest.mark.parametrize("format", [None, "float", "double", "int32", "int64"])
    @pytest.mark.parametrize("minimum", [None, 0, 10])
    def test_numbers_are_generic(self, mapper, schema_type, format, minimum):
        assert mapper.map_type(schema_type, format, minimum) == "number"

    def test_object_is_unsupported(self, mapper):
        with pytest.raises(UnsupportedSchemaTypeError):
            mapper.map_type(SchemaType.OBJECT)


class TestTypeScriptRendering:
    """Test TypeScript interface, enum and header templates."""

    def test_interface(self, typescript_generator, petstore_document):
        raw = petstore_document["components"]["schemas"]["Pet"]
        code = typescript_generator.generate_schema("Pet", parse_schema(raw))

        assert code == (
            "/**\n"
            " * A pet for sale\n"
            " */\n"
            "export interface Pet {\n"
            "  id: number;\n"
            "  /**\n"
            "   * Display name\n"
            "   */\n"
            "  name: string;\n"
            "  tag?: string;\n"
            "  owner?: Owner;\n"
            "  photoUrls?: string[];\n"
            "  friends?: Pet[];\n"
            "  status?: PetStatus;\n"
            "}\n"
        )

    def test_comment_terminator_in_descriptions(self, typescript_generator):
        """Test that a description cannot close the doc comment early."""
        schema = parse_schema(
            {
                "type": "object",
                "description": "ends */ here",
                "properties": {"glob": {"type": "string", "description": "src/**/*.ts"}},
            }
        )
        code = typescript_generator.generate_schema("Paths", schema)
        assert code == (
            "/**\n"
            " * ends *\\/ here\n"
            " */\n"
            "export interface Paths {\n"
            "  /**\n"
            "   * src/**\\/*.ts\n"
            "   */\n"
            "  glob?: string;\n"
            "}\n"
        )

    def test_comment_terminator_in_enum_description(self, typescript_generator):
        schema = parse_schema({"type": "string", "description": "a */ b", "enum": ["x"]})
        code = typescript_generator.generate_schema("Kind", schema)
        assert code.startswith("/**\n * a *\\/ b\n */\nexport enum Kind {\n")
        assert code.count("*/") == 1

    def test_empty_interface(self, typescript_generator):
        code = typescript_generator.generate_schema("Empty", parse_schema({"type": "object"}))
        assert code == "export interface Empty {}\n"

    def test_enum_always_carries_values(self, typescript_generator):
        """Test that every member gets a string initializer."""
        schema = parse_schema({"type": "string", "enum": ["Red", "dark-red"]})
        code = typescript_generator.generate_schema("Color", schema)
        assert code == (
            "export enum Color {\n"
            '  Red = "Red",\n'
            '  DarkRed = "dark-red",\n'
            "}\n"
        )

    def test_readonly_generator(self):
        generator = create_readonly_typescript_generator()
        schema = parse_schema(
            {"type": "object", "required": ["id"], "properties": {"id": {"type": "integer"}}}
        )
        assert "  readonly id: number;\n" in generator.generate_schema("Item", schema)

    def test_unexported_declarations(self):
        generator = create_typescript_generator(
            {"add_comments": False, "custom": {"export": False}}
        )
        result = generate_code(
            generator,
            load_component_schemas(
                {
                    "components": {
                        "schemas": {
                            "Item": {"type": "object"},
                            "Kind": {"type": "string", "enum": ["a"]},
                        }
                    }
                }
            ),
        )
        assert "\ninterface Item {}\n" in result.code
        assert "\nenum Kind {\n" in result.code
        assert "export" not in result.code

    def test_module_header(self, typescript_generator, petstore_document):
        result = generate_code(
            typescript_generator, load_component_schemas(petstore_document)
        )
        assert result.success
        assert result.metadata["language"] == "typescript"
        assert result.code.startswith(
            "// Code generated by oas-codegen. DO NOT EDIT.\n"
            "//\n"
            "// Types: Pet, Owner, PetStatus\n"
            "\n"
            "/* eslint-disable */\n"
        )
        assert '  SoldOut = "sold-out",\n' in result.code
