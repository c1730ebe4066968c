import io
import subprocess
import sys
import threading
from pathlib import Path
from typing import IO, Mapping, Optional, Protocol, Sequence

from shellout.command import Command
from shellout.config import RunnerConfig
from shellout.errors import ShellOutError, SpawnError
from shellout.output import CommandOutput, decode_output


class Sink(Protocol):
    """Anything live output can be copied into, such as a binary file."""

    def write(self, data: bytes, /) -> object: ...


def resolve_working_directory(path: str | Path) -> Optional[str]:
    """
    Turn the `at` argument of a run into a working directory for the child.

    ``"."`` keeps the current directory (``None``), ``"~"`` and ``"~/..."``
    are expanded against the home directory, anything else is used as given.
    """
    path = str(path)
    if path == ".":
        return None
    if path == "~":
        return str(Path.home())
    if path.startswith("~/"):
        return str(Path.home() / path[2:])
    return path


def _standard_streams() -> list[object]:
    streams: list[object] = []
    for stream in (
        sys.stdin,
        sys.stdout,
        sys.stderr,
        sys.__stdin__,
        sys.__stdout__,
        sys.__stderr__,
    ):
        if stream is None:
            continue
        streams.append(stream)
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            streams.append(buffer)
    return streams


def is_standard_stream(sink: object) -> bool:
    """True if `sink` is (or wraps) the stdin, stdout or stderr of this process."""
    if any(sink is stream for stream in _standard_streams()):
        return True
    fileno = getattr(sink, "fileno", None)
    if fileno is None:
        return False
    try:
        return fileno() in (0, 1, 2)
    except (OSError, ValueError):
        return False


def _binary_sink(sink: Sink) -> Sink:
    # Text streams like sys.stdout get the raw bytes through their buffer.
    if isinstance(sink, io.TextIOBase):
        sink.flush()
        buffer = getattr(sink, "buffer", None)
        if buffer is not None:
            return buffer
    return sink


class _StreamReader(threading.Thread):
    """
    Drain one pipe of a child process into memory, copying each chunk to a sink.

    The thread keeps reading after a failing sink so the child can never block
    on a full pipe; the sink error is re-raised by the runner once joined.
    """

    def __init__(
        self,
        stream: IO[bytes],
        sink: Optional[Sink],
        chunk_size: int,
        name: str,
    ) -> None:
        super().__init__(name=name, daemon=True)
        self._stream = stream
        self._sink = _binary_sink(sink) if sink is not None else None
        self._chunk_size = chunk_size
        self._chunks: list[bytes] = []
        self._lock = threading.Lock()
        self.error: Optional[BaseException] = None

    def run(self) -> None:
        read = getattr(self._stream, "read1", self._stream.read)
        while chunk := read(self._chunk_size):
            with self._lock:
                self._chunks.append(chunk)
            if self._sink is not None and self.error is None:
                try:
                    self._sink.write(chunk)
                except Exception as err:
                    self.error = err

    def getvalue(self) -> bytes:
        with self._lock:
            return b"".join(self._chunks)


class ProcessRunner:
    """
    Run commands in child processes and capture what they print.

    Programs whose arguments need no shell syntax are spawned directly with
    an argument vector. Everything else, including flat scripts, runs through
    ``<shell> -c``. Both pipes are drained by their own thread while the child
    runs, so a command writing a lot to stdout and stderr at once can't stall.

    No timeout is applied. Callers that need one must enforce their own
    deadline and deal with the child process if it expires.
    """

    def __init__(self, config: Optional[RunnerConfig] = None) -> None:
        self.config = config or RunnerConfig()
        self._logger = self.config.logger

    def run(
        self,
        command: Command,
        at: str | Path = ".",
        environment: Optional[Mapping[str, str]] = None,
        output_sink: Optional[Sink] = None,
        error_sink: Optional[Sink] = None,
        use_shell: Optional[bool] = None,
    ) -> CommandOutput:
        """
        Run `command` and return its stdout and stderr.

        Raises `ShellOutError` if it exits with a non-zero status and
        `SpawnError` if it can't be started. `use_shell` forces (or forbids)
        running through the shell; by default the shell is used only when
        the command needs it.
        """
        if use_shell is None:
            use_shell = command.needs_shell or not self.config.prefer_direct_exec
        rendered = command.render()
        args = [self.config.shell, "-c", rendered] if use_shell else command.argv()
        return self._execute(
            args,
            rendered,
            at=at,
            environment=environment,
            output_sink=output_sink,
            error_sink=error_sink,
        )

    def run_script(
        self,
        script: str,
        at: str | Path = ".",
        environment: Optional[Mapping[str, str]] = None,
        output_sink: Optional[Sink] = None,
        error_sink: Optional[Sink] = None,
    ) -> CommandOutput:
        """Run a flat command line, shell syntax and all, through the shell."""
        return self._execute(
            [self.config.shell, "-c", script],
            script,
            at=at,
            environment=environment,
            output_sink=output_sink,
            error_sink=error_sink,
        )

    def _execute(
        self,
        args: Sequence[str],
        rendered: str,
        *,
        at: str | Path,
        environment: Optional[Mapping[str, str]],
        output_sink: Optional[Sink],
        error_sink: Optional[Sink],
    ) -> CommandOutput:
        cwd = resolve_working_directory(at)
        self._logger.debug("Running %s (in %s)", rendered, cwd or ".")

        try:
            process = subprocess.Popen(
                list(args),
                cwd=cwd,
                env=dict(environment) if environment is not None else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as err:
            self._logger.debug("Failed to launch %s: %s", rendered, err)
            raise SpawnError(rendered, cwd, err) from err

        assert process.stdout is not None and process.stderr is not None
        with process:
            stdout_reader = _StreamReader(
                process.stdout, output_sink, self.config.chunk_size, "shellout-stdout"
            )
            stderr_reader = _StreamReader(
                process.stderr, error_sink, self.config.chunk_size, "shellout-stderr"
            )
            stdout_reader.start()
            stderr_reader.start()
            try:
                exit_code = process.wait()
            except BaseException:
                process.kill()
                process.wait()
                raise
            finally:
                # The child may exit before its last bytes have been read.
                stdout_reader.join()
                stderr_reader.join()
                # One file may serve as both sinks; release it only once.
                sinks = {id(sink): sink for sink in (output_sink, error_sink)}
                for sink in sinks.values():
                    self._release(sink)

        for reader in (stdout_reader, stderr_reader):
            if reader.error is not None:
                raise reader.error

        stdout_bytes = stdout_reader.getvalue()
        stderr_bytes = stderr_reader.getvalue()
        self._logger.debug("%s exited with status %s", rendered, exit_code)

        if exit_code != 0:
            raise ShellOutError(
                exit_code=exit_code,
                stdout_bytes=stdout_bytes,
                stderr_bytes=stderr_bytes,
                command=rendered,
            )
        return CommandOutput(decode_output(stdout_bytes), decode_output(stderr_bytes))

    def _release(self, sink: Optional[Sink]) -> None:
        if sink is None:
            return
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()
        if not self.config.close_sinks or is_standard_stream(sink):
            return
        close = getattr(sink, "close", None)
        if close is not None:
            close()
