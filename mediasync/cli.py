"""Click-based CLI for MediaSync."""

from __future__ import annotations

import signal
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
import yaml
from rich.markup import escape

from mediasync import __version__
from mediasync.config import Catalog, get_config_path, load_config, save_default_config, validate_config_file
from mediasync.output.console import Console
from mediasync.sync.discovery import discover_operations
from mediasync.sync.exceptions import SelectionCancelled
from mediasync.sync.executor import SyncExecutor

CANCELLED_MESSAGE = "\nSync cancelled. Exiting..."

console = Console()


def handle_graceful_exit() -> NoReturn:
    """User cancellation is not an error: report it and exit 0."""
    console.print(CANCELLED_MESSAGE)
    sys.exit(0)


def handle_error(error: BaseException) -> NoReturn:
    """Report a fatal error and exit 1."""
    console.print_error(str(error) or type(error).__name__)
    sys.exit(1)


def handle_interrupt(signum, frame) -> NoReturn:
    """SIGINT handler."""
    handle_graceful_exit()


def handle_uncaught(exc_type, exc_value, exc_traceback) -> None:
    """sys.excepthook: report anything escaping the CLI without a traceback."""
    if issubclass(exc_type, (KeyboardInterrupt, SelectionCancelled)):
        console.print(CANCELLED_MESSAGE)
        return
    console.print_error(str(exc_value) or exc_type.__name__)


def install_signal_handlers() -> None:
    """Register the process-level interrupt and uncaught-error handlers."""
    signal.signal(signal.SIGINT, handle_interrupt)
    sys.excepthook = handle_uncaught


def _load_catalog(config_path: Optional[Path]) -> Catalog:
    try:
        return load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        handle_error(e)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mediasync")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Catalog YAML file (default: built-in catalog or ~/.config/mediasync/config.yaml)",
)
@click.option("--volumes-root", type=click.Path(file_okay=False, path_type=Path), help="Where removable volumes are mounted")
@click.option("--verbose", "-v", is_flag=True, help="Show per-source results")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    volumes_root: Optional[Path],
    verbose: bool,
    no_color: bool,
) -> None:
    """MediaSync - pick a backup or camera import and run it with rsync.

    Without a subcommand the interactive sync is started.

    \b
    Volume configs:  one entry per mounted volume matching the pattern
    Path configs:    offered while the first source path exists
    """
    console.configure(verbose=verbose, colored=not no_color)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["volumes_root"] = volumes_root

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option("--dry-run", "-n", is_flag=True, help="Print the sync commands without running them")
@click.pass_context
def run(ctx: click.Context, dry_run: bool) -> None:
    """Select an available operation and sync it.

    Sources are synced one after another. A failing source is reported
    and the remaining sources still run.

    \b
    Examples:
        mediasync run
        mediasync run --dry-run
        mediasync --volumes-root /media/me run
    """
    catalog = _load_catalog(ctx.obj["config_path"])

    try:
        console.print("Media Sync", style="bold")

        operations = discover_operations(catalog, ctx.obj["volumes_root"])
        if not operations:
            console.print_error("No available sync operations found")
            sys.exit(1)

        index = console.select("Select drive to sync", [op.display_name for op in operations])
        operation = operations[index]

        console.print(f"\nStarting {operation.display_name}", markup=False, highlight=False)
        executor = SyncExecutor(console, sync_command=catalog.sync_command, dry_run=dry_run)
        results = executor.execute(operation)

        if console.verbose:
            console.print()
            console.print_results(results)

        console.print_success("\nSync completed")
    except (KeyboardInterrupt, SelectionCancelled):
        handle_graceful_exit()
    except Exception as e:
        handle_error(e)


@cli.command("list")
@click.pass_context
def list_operations(ctx: click.Context) -> None:
    """Show the operations available right now without syncing."""
    catalog = _load_catalog(ctx.obj["config_path"])

    try:
        operations = discover_operations(catalog, ctx.obj["volumes_root"])
    except Exception as e:
        handle_error(e)

    console.print_operations(operations)
    if not operations:
        sys.exit(1)


@cli.group()
def config() -> None:
    """Inspect and manage the sync catalog."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the active catalog."""
    config_path = ctx.obj["config_path"]
    catalog = _load_catalog(config_path)

    path = config_path or get_config_path()
    source = str(path) if path.exists() else "built-in"
    console.print_catalog(catalog, source)


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write the built-in catalog to the config file for editing."""
    path, written = save_default_config(ctx.obj["config_path"], force=force)
    if written:
        console.print_success(f"Created config: {path}")
    else:
        console.print_warning(f"Config already exists: {path} (use --force to overwrite)")


@config.command("path")
@click.pass_context
def config_path_cmd(ctx: click.Context) -> None:
    """Print the config file location."""
    click.echo(str(ctx.obj["config_path"] or get_config_path()))


@config.command("validate")
@click.argument("file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def config_validate(ctx: click.Context, file: Optional[Path]) -> None:
    """Validate a catalog file."""
    path = file or ctx.obj["config_path"] or get_config_path()
    is_valid, errors = validate_config_file(path)

    if is_valid:
        console.print_success(f"Valid config: {path}")
        return

    console.print_error(f"Invalid config: {path}")
    for error in errors:
        console.print(f"  [red]•[/red] {escape(error)}")
    sys.exit(1)


def main() -> None:
    """Console script entry point."""
    install_signal_handlers()
    cli()


if __name__ == "__main__":
    main()
