# MediaSync Sync Executor
# Run the external sync tool once per source, streaming its output

import codecs
import shlex
import subprocess
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import IO, TYPE_CHECKING, Optional

from mediasync.config.schema import SyncConfig, SyncSource
from mediasync.sync.discovery import SyncOperation
from mediasync.sync.exceptions import SyncError

if TYPE_CHECKING:
    from mediasync.output.console import Console

CHUNK_SIZE = 4096


@dataclass
class SourceResult:
    """Outcome of syncing one source."""

    source: SyncSource
    destination: str
    command: list[str] = field(default_factory=list)
    returncode: Optional[int] = None
    error: Optional[str] = None
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return self.error is None


def with_trailing_separator(path: str) -> str:
    """Return path ending in exactly one separator."""
    return path.rstrip("/") + "/"


def resolve_destination(operation: SyncOperation, source: SyncSource) -> str:
    """Destinations of volume-driven operations live on the matched volume."""
    if operation.is_volume_driven:
        return f"{operation.source_root}/{source.destination}"
    return source.destination


def build_command(sync_command: str, config: SyncConfig, source: SyncSource, destination: str) -> list[str]:
    """
    Build the sync tool invocation for one source.

    The trailing separator on the destination makes rsync treat it as a
    directory, so it is always normalized to exactly one.
    """
    return [sync_command, *config.sync_flags, source.path, with_trailing_separator(destination)]


def iter_chunks(stream: IO[bytes], chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield output chunks as soon as they are available, until EOF."""
    while True:
        chunk = stream.read1(chunk_size)
        if not chunk:
            return
        yield chunk


class SyncExecutor:
    """
    Sequential sync runner.

    Sources of an operation are synced one after another with a single
    subprocess alive at a time. A failing source is reported and skipped;
    it never stops the remaining sources.
    """

    def __init__(self, console: "Console", *, sync_command: str = "rsync", dry_run: bool = False):
        """
        Initialize executor.

        Args:
            console: Console receiving announcements and streamed output.
            sync_command: External sync executable.
            dry_run: Print commands instead of running them.
        """
        self.console = console
        self.sync_command = sync_command
        self.dry_run = dry_run

    def execute(self, operation: SyncOperation) -> list[SourceResult]:
        """
        Sync every source of an operation in configured order.

        Args:
            operation: Operation chosen by the user.

        Returns:
            One result per source, in order.
        """
        return [self.sync_source(operation, source) for source in operation.config.sources]

    def sync_source(self, operation: SyncOperation, source: SyncSource) -> SourceResult:
        """Sync a single source, converting failures into a failed result."""
        self.console.print(f"\nSyncing {source.path} to {source.destination}", markup=False, highlight=False)

        destination = resolve_destination(operation, source)
        command = build_command(self.sync_command, operation.config, source, destination)
        result = SourceResult(source=source, destination=destination, command=command, dry_run=self.dry_run)

        if self.dry_run:
            self.console.print_info(f"Would run: {shlex.join(command)}")
            return result

        try:
            result.returncode = self._run(command)
        except SyncError as e:
            result.returncode = e.returncode
            result.error = e.message
            self.console.print_error(f"Syncing {source.path} failed: {e.message}")
            if e.stderr:
                self.console.print(f"  {e.stderr}", style="dim", markup=False, highlight=False)

        return result

    def _run(self, command: list[str]) -> int:
        """
        Run one sync process, relaying stdout as it arrives.

        Stderr goes to a temporary file so a chatty tool can never block on
        a full pipe; it is only read back for the failure report.

        Raises:
            SyncError: If the process cannot start or exits non-zero.
        """
        with tempfile.TemporaryFile() as stderr_file:
            try:
                proc = subprocess.Popen(command, stdout=subprocess.PIPE, stderr=stderr_file)
            except OSError as e:
                raise SyncError(f"Cannot start {command[0]}: {e}") from e

            with proc:
                decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
                for chunk in iter_chunks(proc.stdout):
                    self.console.write_stream(decoder.decode(chunk))
                self.console.write_stream(decoder.decode(b"", final=True))
                returncode = proc.wait()

            if returncode != 0:
                stderr_file.seek(0)
                stderr = stderr_file.read().decode("utf-8", errors="replace").strip()
                raise SyncError(
                    f"{command[0]} failed with exit code {returncode}",
                    returncode=returncode,
                    stderr=stderr,
                )

        return returncode
