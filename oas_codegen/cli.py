"""
Command-line interface for oas-codegen.

Reads an OpenAPI 3 document, generates data models for its component
schemas and writes them to a file or standard output.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    generate_code,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    load_component_schemas,
    load_config,
    resolve_language,
)
from .codegen.core.config import get_config_manager
from .logging_config import get_logger, setup_logging
from .utils import DocumentLoaderError, load_json, load_json_from_stdin

logger = get_logger(__name__)

# Generated code goes to stdout, everything else to stderr
console = Console()
err_console = Console(stderr=True)

# Pygments lexer names for the syntax preview
SYNTAX_LEXERS = {"rust": "rust", "typescript": "typescript"}


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="oas-codegen",
        description="Generate typed data models from OpenAPI 3 component schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  oas-codegen openapi.json --language rust --output models.rs
  oas-codegen --url https://example.com/openapi.json -l ts
  oas-codegen -l rust --stdin < openapi.json
  oas-codegen --list-languages
  oas-codegen --language-info typescript
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="OpenAPI document (JSON)")
    input_group.add_argument("--url", help="URL to fetch the OpenAPI document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the document from standard input"
    )

    # Core generation options
    parser.add_argument("--language", "-l", help="Target language for code generation")
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't render descriptions as doc comments",
    )
    gen_group.add_argument(
        "--no-header",
        action="store_true",
        help="Don't emit the generated-code header",
    )
    gen_group.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Write the schemas that succeed even if others fail",
    )
    gen_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )
    gen_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: $OAS_CODEGEN_LOG_LEVEL or WARNING)",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )
    info_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = create_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not args.language:
            err_console.print("[red]✗[/red] --language is required for code generation")
            return 1

        if not (args.file or args.url or args.stdin):
            err_console.print(
                "[red]✗[/red] Input source required (file, --url, or --stdin)"
            )
            return 1

        if not _validate_language(args.language):
            return 1

        language = resolve_language(args.language)
        document = _get_input_data(args)
        config = _build_config(args, language)
        return _generate_and_output(document, language, config, args)

    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except GeneratorError as e:
        err_console.print(f"[red]✗[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        err_console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] oas-codegen [dim]openapi.json[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] oas-codegen --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        err_console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        err_console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(
            info_text,
            title=f"🔧 {info['name'].title()} Generator",
            border_style="green",
        )
    )

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    for key, value in info["default_config"].items():
        config_table.add_row(key, str(value))

    console.print()
    console.print(config_table)

    examples_text = f"""Generate to stdout:
[cyan]oas-codegen --language {info['name']} openapi.json[/cyan]

Generate to file:
[cyan]oas-codegen -l {info['name']} -o models{info['file_extension']} openapi.json[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))
    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    if not is_language_supported(language):
        if not silent:
            supported = list_supported_languages()
            err_console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            err_console.print(
                f"[dim]Supported languages: {', '.join(supported)}[/dim]"
            )
        return False
    return True


def _get_input_data(args: argparse.Namespace) -> Any:
    """Load the OpenAPI document from the selected source."""
    try:
        if args.stdin:
            source, document = load_json_from_stdin()
        else:
            source, document = load_json(file_path=args.file, url=args.url)
    except DocumentLoaderError as e:
        raise CLIError(f"Failed to load input: {e}") from e

    logger.info("Loaded OpenAPI document from %s", source)
    return document


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build configuration from defaults, config file and CLI flags."""
    overrides: Dict[str, Any] = {}

    if args.no_comments:
        overrides["add_comments"] = False

    if args.no_header:
        overrides["add_header"] = False

    if args.output:
        overrides["output_file"] = args.output

    config = load_config(language, custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config, language):
        err_console.print(f"[yellow]⚠️  Config:[/yellow] {warning}")

    return config


def _generate_and_output(
    document: Any, language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    schemas = load_component_schemas(document)
    generator = get_generator(language, config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        gen_task = progress.add_task(
            f"[green]Generating {language} code for {len(schemas)} schemas...",
            total=None,
        )
        result = generate_code(generator, schemas)
        progress.remove_task(gen_task)

    if result.error_message:
        err_console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            err_console.print(f"[dim]Details: {result.exception}[/dim]")
        return 1

    if result.errors and not args.skip_invalid:
        err_console.print(
            f"[red]✗ {len(result.errors)} schema(s) failed, nothing written:[/red]"
        )
        for error in result.errors:
            err_console.print(f"  [red]•[/red] {error.schema_name}: {error.message}")
        err_console.print("[dim]Use --skip-invalid to write the other schemas[/dim]")
        return 1

    if not _write_output(result, language, config):
        return 1

    if args.verbose and result.metadata:
        _print_metadata(result)

    warnings = list(result.warnings)
    warnings.extend(
        f"Skipped schema {error.schema_name}: {error.message}" for error in result.errors
    )
    if warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            err_console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


def _write_output(result: GenerationResult, language: str, config: GeneratorConfig) -> bool:
    """Write generated code to the configured file or stdout."""
    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return False
        err_console.print(
            f"[green]✓[/green] Generated {language} code saved to [cyan]{output_path}[/cyan]"
        )
        return True

    if not console.is_terminal:
        # Plain code when piped
        sys.stdout.write(result.code)
        return True

    top_border = "═" * 20
    console.print(
        f"[green]{top_border} 📄 Generated {language.title()} Code {top_border}[/green]\n"
    )
    console.print(Syntax(result.code, SYNTAX_LEXERS.get(language, language), theme="monokai"))
    console.print(f"\n[green]{top_border * 3}[/green]")
    return True


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    err_console.print()
    err_console.print(metadata_table)


if __name__ == "__main__":
    sys.exit(main())
