"""Unit tests for the generator registry."""

import json

import pytest

from oas_codegen.codegen import generate_from_document, quick_generate
from oas_codegen.codegen.core.config import ConfigError, GeneratorConfig
from oas_codegen.codegen.core.errors import GeneratorError
from oas_codegen.codegen.languages.rust import RustGenerator
from oas_codegen.codegen.languages.typescript import TypeScriptGenerator
from oas_codegen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    resolve_language,
)


class TestGeneratorRegistry:
    """Test GeneratorRegistry on a private instance."""

    @pytest.fixture
    def registry(self):
        registry = GeneratorRegistry()
        registry.register("rust", RustGenerator, aliases=["rs"])
        return registry

    def test_resolve_alias(self, registry):
        assert registry.resolve("RS") == "rust"
        assert isinstance(registry.create_generator("rs"), RustGenerator)

    def test_unknown_language(self, registry):
        with pytest.raises(RegistryError, match="Available: rust"):
            registry.resolve("cobol")
        assert not registry.is_supported("cobol")

    def test_register_requires_code_generator(self, registry):
        with pytest.raises(RegistryError):
            registry.register("dict", dict)

    def test_alias_conflict_registers_nothing(self, registry):
        with pytest.raises(RegistryError, match="already in use"):
            registry.register("typescript", TypeScriptGenerator, aliases=["rs"])
        assert registry.list_languages() == ["rust"]

    def test_duplicate_registration_is_ignored(self, registry):
        registry.register("rust", TypeScriptGenerator)
        assert isinstance(registry.create_generator("rust"), RustGenerator)

    def test_language_info_lists_aliases(self, registry):
        assert registry.get_language_info("rust")["aliases"] == ["rs"]

    def test_invalid_config_type(self, registry):
        with pytest.raises(RegistryError, match="Invalid config type"):
            registry.create_generator("rust", 42)


class TestGlobalRegistry:
    """Test the module-level registry API."""

    def test_builtin_languages(self):
        assert list_supported_languages() == ["rust", "typescript"]
        assert is_language_supported("ts")
        assert not is_language_supported("go")
        assert resolve_language("TS") == "typescript"

    def test_get_generator_applies_language_defaults(self):
        generator = get_generator("ts")
        assert isinstance(generator, TypeScriptGenerator)
        assert generator.config.indent_size == 2

    def test_get_generator_with_dict(self):
        generator = get_generator("rust", {"add_comments": False})
        assert generator.config.add_comments is False
        assert generator.config.custom["box_references"] is True

    def test_get_generator_with_config_object(self):
        config = GeneratorConfig(indent_size=8)
        assert get_generator("rust", config).config is config

    def test_get_generator_with_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"readonly": True}))
        generator = get_generator("typescript", path)
        assert generator.config.custom == {"export": True, "readonly": True}

    def test_get_generator_with_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            get_generator("rust", str(tmp_path / "missing.json"))

    def test_language_info(self):
        info = get_language_info("rs")
        assert info["name"] == "rust"
        assert info["class"] == "RustGenerator"
        assert info["file_extension"] == ".rs"
        assert info["aliases"] == ["rs"]
        assert info["default_config"]["box_references"] is True

    def test_list_all_language_info(self):
        assert set(list_all_language_info()) == {"rust", "typescript"}


class TestConvenienceFunctions:
    """Test generate_from_document and quick_generate."""

    def test_generate_from_document(self, petstore_document):
        result = generate_from_document(petstore_document, "typescript")
        assert result.success
        assert "export interface Pet {" in result.code

    def test_quick_generate_from_json_text(self, petstore_document):
        code = quick_generate(json.dumps(petstore_document), "rust", add_header=False)
        assert code.startswith("/// A pet for sale\n")

    def test_quick_generate_failure(self):
        document = {
            "components": {
                "schemas": {"Bad": {"type": "object", "properties": {"x": {"type": "null"}}}}
            }
        }
        with pytest.raises(GeneratorError, match="Bad: Unsupported type: null"):
            quick_generate(document, "rust")
