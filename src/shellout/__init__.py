from shellout.api import shell_out, shell_out_async, shell_out_script, shell_out_series
from shellout.argument import Argument, ArgumentKind, quoted, verbatim
from shellout.command import Command
from shellout.config import RunnerConfig
from shellout.errors import (
    ShellOutError,
    ShellOutException,
    SpawnError,
    ValidationError,
)
from shellout.output import CommandOutput
from shellout.quoting import has_unsafe_content, quote
from shellout.runner import ProcessRunner, Sink
from shellout.safe_string import SafeString

__all__ = [
    "Argument",
    "ArgumentKind",
    "Command",
    "CommandOutput",
    "ProcessRunner",
    "RunnerConfig",
    "SafeString",
    "ShellOutError",
    "ShellOutException",
    "Sink",
    "SpawnError",
    "ValidationError",
    "has_unsafe_content",
    "quote",
    "quoted",
    "shell_out",
    "shell_out_async",
    "shell_out_script",
    "shell_out_series",
    "verbatim",
]
