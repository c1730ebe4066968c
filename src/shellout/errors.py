import os
from dataclasses import dataclass

from shellout.output import decode_output


class ShellOutException(Exception):
    """Base class for every error raised by shellout."""


class ValidationError(ShellOutException, ValueError):
    """Raised when a string that requires quoting is used where a safe one is needed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return (
            "Command must not contain characters that require quoting, "
            f"was: {self.value}"
        )


class SpawnError(ShellOutException):
    """
    The process could not be started at all.

    This is never reported as a `ShellOutError`: no exit status exists, so
    none is made up. The underlying `OSError` is chained as `__cause__`.
    """

    def __init__(
        self,
        command: str,
        working_directory: str | None,
        reason: OSError,
    ) -> None:
        self.command = command
        self.working_directory = working_directory
        self.reason = reason
        super().__init__(command, working_directory, reason)

    def __str__(self) -> str:
        location = self.working_directory or os.getcwd()
        reason = self.reason.strerror or self.reason
        return f"Failed to launch {self.command!r} in {location}: {reason}"


@dataclass(eq=False)
class ShellOutError(ShellOutException):
    """Raised when a command ran but exited with a non-zero status."""

    # Negative when the process was killed by a signal (-N for signal N).
    exit_code: int
    stdout_bytes: bytes = b""
    stderr_bytes: bytes = b""
    command: str | None = None

    def __post_init__(self) -> None:
        super().__init__(self.exit_code, self.stdout_bytes, self.stderr_bytes)

    @property
    def message(self) -> str:
        """The error output of the command, as returned through stderr."""
        return decode_output(self.stderr_bytes)

    @property
    def output(self) -> str:
        """The output of the command, as returned through stdout."""
        return decode_output(self.stdout_bytes)

    def __str__(self) -> str:
        return (
            "ShellOut encountered an error\n"
            f"Status code: {self.exit_code}\n"
            f'Message: "{self.message}"\n'
            f'Output: "{self.output}"'
        )
