"""CLI interface for Commento"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import click

from commento.application.extension import (
    COMMAND_GENERATE_CONCISE,
    COMMAND_GENERATE_DETAILED,
    CommentoExtension,
)
from commento.infrastructure.config.config_manager import ConfigManager, ConfigurationError
from commento.infrastructure.console import ConsoleNotifier
from commento.infrastructure.file_editor import FileEditor

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _load_config(
    config_path: Optional[Path],
    provider: Optional[str],
    include_examples: Optional[bool],
    verbose: bool,
) -> ConfigManager:
    """Load configuration and apply CLI overrides"""
    try:
        config_manager = ConfigManager(config_path=config_path)
        if provider:
            config_manager.config.llm.provider = provider.lower()
        if include_examples is not None:
            config_manager.config.comments.include_examples = include_examples
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)
    return config_manager


def _run_command(ctx, command_id: str, file_path: Path, start_line: int, end_line: Optional[int],
                 language: Optional[str], provider: Optional[str], include_examples: Optional[bool]) -> None:
    verbose = ctx.obj.get("verbose", False)
    config_manager = _load_config(ctx.obj.get("config_path"), provider, include_examples, verbose)

    try:
        editor = FileEditor(file_path, start_line, end_line, language=language)
    except (FileNotFoundError, ValueError) as e:
        _die(str(e), verbose=verbose, exc=e)

    notifier = ConsoleNotifier()
    extension = CommentoExtension(config_manager, notifier)
    if not extension.activate():
        # The notifier already showed the configuration error
        ctx.exit(1)

    try:
        comment = asyncio.run(extension.execute(command_id, editor))
    except KeyboardInterrupt:
        raise click.Abort()
    finally:
        extension.deactivate()

    if notifier.errors:
        ctx.exit(1)
    if comment is None:
        click.echo("Selection is empty, nothing to do.", err=True)
        return

    click.echo(comment)
    click.echo(f"\nComment inserted above line {start_line} of {file_path}", err=True)


def _selection_options(func):
    func = click.option("--examples/--no-examples", "include_examples", default=None,
                        help="Ask for a usage example. Overrides config.")(func)
    func = click.option("--provider", type=click.Choice(["mock", "gemini", "openai"], case_sensitive=False),
                        help="LLM provider to use (mock, gemini, openai). Overrides config.")(func)
    func = click.option("--language", type=str,
                        help="Language identifier (default: detected from file extension)")(func)
    func = click.option("--end-line", "-e", type=int,
                        help="Last selected line, inclusive (default: start line)")(func)
    func = click.option("--start-line", "-s", type=int, required=True,
                        help="First selected line (1-based)")(func)
    func = click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to .commento.yml config file",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """Commento - AI code comments for a selected code fragment"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@_selection_options
@click.pass_context
def concise(ctx, file_path: Path, start_line: int, end_line: Optional[int], language: Optional[str],
            provider: Optional[str], include_examples: Optional[bool]):
    """Insert a 1-2 line comment above the selected lines.

    FILE_PATH: Path to the source file
    """
    _run_command(ctx, COMMAND_GENERATE_CONCISE, file_path, start_line, end_line,
                 language, provider, include_examples)


@cli.command()
@_selection_options
@click.pass_context
def detailed(ctx, file_path: Path, start_line: int, end_line: Optional[int], language: Optional[str],
             provider: Optional[str], include_examples: Optional[bool]):
    """Insert a 3-5 line comment above the selected lines.

    FILE_PATH: Path to the source file
    """
    _run_command(ctx, COMMAND_GENERATE_DETAILED, file_path, start_line, end_line,
                 language, provider, include_examples)


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
