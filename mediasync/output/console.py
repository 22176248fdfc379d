# MediaSync Console Output
# Rich-based console output and the operation menu

from collections.abc import Sequence

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mediasync.config.schema import Catalog
from mediasync.sync.discovery import SyncOperation
from mediasync.sync.exceptions import SelectionCancelled
from mediasync.sync.executor import SourceResult


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for sync operations.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.configure(verbose=verbose, colored=colored)

    def configure(self, *, verbose: bool = False, colored: bool = True) -> None:
        """Apply output settings from the command line."""
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]")

    def write_stream(self, text: str) -> None:
        """Write raw subprocess output, bypassing markup and wrapping."""
        if not text:
            return
        self._console.file.write(text)
        self._console.file.flush()

    def select(self, message: str, choices: Sequence[str]) -> int:
        """
        Numbered single-choice menu.

        Args:
            message: Menu title.
            choices: Labels, shown in the given order.

        Returns:
            Zero-based index of the chosen label.

        Raises:
            SelectionCancelled: On Ctrl+C or end of input.
        """
        if not choices:
            raise ValueError("Nothing to select from")

        self._console.print(f"\n[bold]{escape(message)}[/bold]")
        for number, label in enumerate(choices, start=1):
            self._console.print(f"  [cyan]{number}[/cyan] - {escape(label)}")

        while True:
            try:
                answer = self._console.input(f"\nYour choice [1-{len(choices)}]: ").strip()
            except (KeyboardInterrupt, EOFError) as e:
                raise SelectionCancelled() from e

            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return int(answer) - 1

            self._console.print(f"[yellow]Please enter a number between 1 and {len(choices)}[/yellow]")

    def print_operations(self, operations: Sequence[SyncOperation]) -> None:
        """Print discovered operations as a table."""
        if not operations:
            self._console.print("[dim]No available sync operations[/dim]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", style="cyan")
        table.add_column("Operation")
        table.add_column("Config", style="dim")
        table.add_column("Sources", justify="right")

        for number, operation in enumerate(operations, start=1):
            table.add_row(
                str(number),
                escape(operation.display_name),
                escape(operation.config.name),
                str(len(operation.config.sources)),
            )

        self._console.print(table)

    def print_results(self, results: Sequence[SourceResult]) -> None:
        """Print per-source outcome of a sync run."""
        table = Table(title="Sources", show_header=True, header_style="bold")
        table.add_column("Status")
        table.add_column("Source")
        table.add_column("Destination")
        table.add_column("Exit", justify="right", style="dim")

        for result in results:
            if result.dry_run:
                status = "[dim]dry run[/dim]"
            elif result.success:
                status = "[green]✓[/green]"
            else:
                status = "[red]✗[/red]"
            exit_code = "" if result.returncode is None else str(result.returncode)
            table.add_row(status, escape(result.source.path), escape(result.destination), exit_code)

        self._console.print(table)

    def print_catalog(self, catalog: Catalog, config_path: str) -> None:
        """Print the active sync catalog."""
        self._console.print(
            Panel(
                f"Config: {escape(config_path)}\n"
                f"Sync command: {escape(catalog.sync_command)}\n"
                f"Configs: {len(catalog.configs)}",
                title="MediaSync Configuration",
                border_style="blue",
            )
        )

        for config in catalog.configs:
            mode = f"volumes matching {config.volume_pattern}" if config.is_volume_driven else "path"
            self._console.print(f"\n[bold]{escape(config.name)}[/bold] [dim]({escape(mode)})[/dim]")
            if config.description:
                self._console.print(f"  [dim]{escape(config.description)}[/dim]")
            self._console.print(f"  Flags: {escape(' '.join(config.sync_flags)) or '[dim]none[/dim]'}")
            for source in config.sources:
                self._console.print(f"    {escape(source.path)} → {escape(source.destination)}")


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
