"""
Generator registry for the supported target languages.

Maps language names and aliases to generator classes and builds
configured generator instances.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from ..logging_config import get_logger
from .core.errors import GeneratorError
from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config

logger = get_logger(__name__)


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry of generator classes keyed by language name."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator for a language.

        A language that is already registered keeps its first generator.

        Raises:
            RegistryError: If the class is not a CodeGenerator or an alias is taken
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()
        if language_key in self._generators:
            logger.debug("Generator for %s already registered", language_key)
            return

        for alias in aliases or []:
            alias_key = alias.lower()
            owner = self._aliases.get(alias_key, language_key)
            if alias_key in self._generators or owner != language_key:
                raise RegistryError(f"Alias '{alias}' is already in use")

        self._generators[language_key] = generator_class
        for alias in aliases or []:
            if alias.lower() != language_key:
                self._aliases[alias.lower()] = language_key

    def resolve(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()
        language_key = self._aliases.get(language_key, language_key)
        if language_key in self._generators:
            return language_key

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def create_generator(
        self,
        language: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for language.

        Dict and file configurations are merged over the language defaults.

        Args:
            language: Language name or alias
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If the language is unknown or the config type invalid
            ConfigError: If a configuration file cannot be loaded
        """
        language_key = self.resolve(language)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(language_key, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(language_key, custom_config=config)
        elif config is None:
            final_config = load_config(language_key)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return self._generators[language_key](final_config)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators)

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is registered."""
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Returns:
            Dict with name, class, file extension, aliases, module and
            default configuration
        """
        language_key = self.resolve(language)
        generator_class = self._generators[language_key]

        default_config = load_config(language_key)
        generator = generator_class(default_config)

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": sorted(
                alias for alias, target in self._aliases.items() if target == language_key
            ),
            "module": generator_class.__module__,
            "default_config": default_config.to_dict(),
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators with their aliases."""
    from .languages.rust import RustGenerator
    from .languages.typescript import TypeScriptGenerator

    registry.register("rust", RustGenerator, aliases=["rs"])
    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])


# Public API functions using the global registry


def get_generator(
    language: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Get a configured generator instance from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def resolve_language(language: str) -> str:
    """Resolve a language name or alias to its primary name."""
    return get_registry().resolve(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {
        language: get_language_info(language) for language in list_supported_languages()
    }
