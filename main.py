import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from core.rules import ALL_COMMAND, RULE_SETS, RuleSet, get_rule_sets
from core.cleaner import clean_all

__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(help="Remove build artifacts and dependency directories from project trees.", no_args_is_help=True)
console = Console()
logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """
    Set up the root logger for the run.

    Args:
        verbose (bool): Log DEBUG messages instead of starting at INFO.

    Returns:
        None
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def _version_callback(value: bool):
    if value:
        console.print(f"begone {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    dry_run: bool = typer.Option(False, "--dry-run", "-d", help="Run in dry-run mode (don't delete anything)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    version: Optional[bool] = typer.Option(None, "--version", "-V", help="Show the version and exit", callback=_version_callback, is_eager=True),
):
    """
    Remove build artifacts and dependency directories from project trees.

    Args:
        dry_run (bool): Only report what would be removed.
        verbose (bool): Enable debug logging.
        version (bool, optional): Print the version and exit.

    Returns:
        None
    """
    configure_logging(verbose)
    ctx.obj = {"dry_run": dry_run}


def _resolve_current_dir() -> Path:
    """
    Determine the directory the run starts from.

    Returns:
        Path: The absolute current working directory.
    """
    try:
        current_dir = Path.cwd()
    except OSError as e:
        console.print(f"[bold red]Error[/bold red]: Cannot determine current directory: {escape(str(e))}")
        raise typer.Exit(code=1)
    logger.debug(f"Current directory: {current_dir}")
    return current_dir


def _run(ctx: typer.Context, command: str) -> None:
    current_dir = _resolve_current_dir()
    dry_run = ctx.obj["dry_run"] if ctx.obj else False
    clean_all(current_dir, get_rule_sets(command), dry_run=dry_run)


def _register_command(rule_set: RuleSet) -> None:
    def command(ctx: typer.Context):
        _run(ctx, rule_set.command)

    help_text = f"Clean {rule_set.label} project directories ({rule_set.describe_targets()})"
    app.command(name=rule_set.command, help=help_text)(command)


for _rule_set in RULE_SETS.values():
    _register_command(_rule_set)


@app.command(name=ALL_COMMAND)
def clean_everything(ctx: typer.Context):
    """Clean all supported project directories."""
    _run(ctx, ALL_COMMAND)


if __name__ == "__main__":
    app()
