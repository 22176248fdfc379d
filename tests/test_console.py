# Tests for mediasync.output.console
# Rich-based console output and the operation menu

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console as RichConsole

from mediasync.config.schema import Catalog, SyncSource
from mediasync.output.console import Console, create_console
from mediasync.sync.discovery import SyncOperation
from mediasync.sync.exceptions import SelectionCancelled
from mediasync.sync.executor import SourceResult


def _make_console(verbose: bool = False) -> Console:
    """Create a console with captured output."""
    console = Console(verbose=verbose, colored=False)
    console._console = RichConsole(file=StringIO(), no_color=True, width=200)
    return console


def _get_output(console: Console) -> str:
    """Get captured output from console."""
    console._console.file.seek(0)
    return console._console.file.read()


class TestConsoleBasic:
    """Tests for basic console methods."""

    def test_print_error(self):
        c = _make_console()
        c.print_error("something failed")
        output = _get_output(c)
        assert "Error:" in output
        assert "something failed" in output

    def test_print_warning(self):
        c = _make_console()
        c.print_warning("be careful")
        output = _get_output(c)
        assert "Warning:" in output
        assert "be careful" in output

    def test_print_success(self):
        c = _make_console()
        c.print_success("all good")
        assert "all good" in _get_output(c)

    def test_markup_in_messages_is_literal(self):
        c = _make_console()
        c.print_info("/Volumes/[bold]odd[/bold]")
        assert "/Volumes/[bold]odd[/bold]" in _get_output(c)

    def test_write_stream_is_raw(self):
        c = _make_console()
        c.write_stream("sending incremental file list\r  32768  12%  [red]\n")
        c.write_stream("")
        assert _get_output(c) == "sending incremental file list\r  32768  12%  [red]\n"

    def test_configure(self):
        c = create_console(verbose=False)
        c.configure(verbose=True, colored=False)
        assert c.verbose is True
        assert c._console.no_color is True


class TestSelect:
    """Tests for the numbered operation menu."""

    def test_returns_zero_based_index(self):
        c = _make_console()
        with patch.object(c._console, "input", return_value="2"):
            assert c.select("Select drive to sync", ["HOT_A", "HOT_B", "Sony FX3"]) == 1

    def test_choices_listed_in_order(self):
        c = _make_console()
        with patch.object(c._console, "input", return_value="1"):
            c.select("Select drive to sync", ["HOT_A (1.00 TB free)", "Sony FX3"])
        output = _get_output(c)
        assert "Select drive to sync" in output
        assert output.index("1 - HOT_A (1.00 TB free)") < output.index("2 - Sony FX3")

    def test_invalid_input_reprompts(self):
        c = _make_console()
        with patch.object(c._console, "input", side_effect=["", "0", "abc", "4", "3"]) as mock_input:
            assert c.select("Pick", ["a", "b", "c"]) == 2
        assert mock_input.call_count == 5
        assert "between 1 and 3" in _get_output(c)

    @pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
    def test_abort_raises_cancelled(self, error):
        c = _make_console()
        with patch.object(c._console, "input", side_effect=error):
            with pytest.raises(SelectionCancelled):
                c.select("Pick", ["a"])

    def test_no_choices(self):
        c = _make_console()
        with pytest.raises(ValueError):
            c.select("Pick", [])


class TestTables:
    """Tests for operation, result, and catalog display."""

    def test_print_operations(self, sample_catalog: Catalog):
        c = _make_console()
        operations = [
            SyncOperation(display_name="HOT_A (2.00 TB free)", config=sample_catalog.configs[0], source_root="/v/HOT_A"),
            SyncOperation(display_name="Sony FX3", config=sample_catalog.configs[1], source_root="/card/"),
        ]
        c.print_operations(operations)
        output = _get_output(c)
        assert "HOT_A (2.00 TB free)" in output
        assert "Hot Backup" in output
        assert "Sony FX3" in output

    def test_print_no_operations(self):
        c = _make_console()
        c.print_operations([])
        assert "No available sync operations" in _get_output(c)

    def test_print_results(self):
        c = _make_console()
        source = SyncSource(path="/src/", destination="Video")
        c.print_results(
            [
                SourceResult(source=source, destination="/v/Video", returncode=0),
                SourceResult(source=source, destination="/v/Other", returncode=23, error="rsync failed"),
                SourceResult(source=source, destination="/v/Dry", dry_run=True),
            ]
        )
        output = _get_output(c)
        assert "✓" in output
        assert "✗" in output
        assert "23" in output
        assert "dry run" in output

    def test_print_catalog(self, sample_catalog: Catalog):
        c = _make_console()
        c.print_catalog(sample_catalog, "built-in")
        output = _get_output(c)
        assert "built-in" in output
        assert "volumes matching ^HOT_" in output
        assert "Sony FX3 (path)" in output
        assert "-av --delete --progress" in output
        assert "→ Video" in output
