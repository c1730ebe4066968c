import asyncio
from pathlib import Path
from typing import Mapping, Optional, Sequence

from shellout.argument import Argument
from shellout.command import ArgumentLike, Command
from shellout.runner import ProcessRunner, Sink
from shellout.safe_string import SafeString


def _as_argument(argument: ArgumentLike, quote_arguments: bool) -> Argument:
    if isinstance(argument, Argument):
        return argument
    if quote_arguments:
        return Argument.quoted(argument)
    return Argument.verbatim(argument)


def shell_out(
    to: str | SafeString | Command,
    arguments: Sequence[ArgumentLike] = (),
    *,
    at: str | Path = ".",
    environment: Optional[Mapping[str, str]] = None,
    output_sink: Optional[Sink] = None,
    error_sink: Optional[Sink] = None,
    quote_arguments: bool = True,
    runner: Optional[ProcessRunner] = None,
) -> str:
    """
    Run a program and return what it printed to stdout.

    `to` is either a program name, which must not need quoting, or a prebuilt
    `Command`. Plain-string `arguments` are quoted unless `quote_arguments`
    is False, in which case they are inserted verbatim.

    For example: ``shell_out("mkdir", ["NewFolder"], at="~/CurrentFolder")``
    """
    extra = [_as_argument(argument, quote_arguments) for argument in arguments]
    if isinstance(to, Command):
        command = to.appending(extra)
    else:
        command = Command(SafeString.coerce(to), extra)
    runner = runner or ProcessRunner()
    return runner.run(
        command,
        at=at,
        environment=environment,
        output_sink=output_sink,
        error_sink=error_sink,
    ).stdout


def shell_out_script(
    script: str,
    *,
    at: str | Path = ".",
    environment: Optional[Mapping[str, str]] = None,
    output_sink: Optional[Sink] = None,
    error_sink: Optional[Sink] = None,
    runner: Optional[ProcessRunner] = None,
) -> str:
    """Run a flat command line through the shell and return its stdout."""
    runner = runner or ProcessRunner()
    return runner.run_script(
        script,
        at=at,
        environment=environment,
        output_sink=output_sink,
        error_sink=error_sink,
    ).stdout


def shell_out_series(
    commands: Sequence[str],
    *,
    at: str | Path = ".",
    environment: Optional[Mapping[str, str]] = None,
    output_sink: Optional[Sink] = None,
    error_sink: Optional[Sink] = None,
    runner: Optional[ProcessRunner] = None,
) -> str:
    """Run each command line in turn, stopping at the first failure."""
    return shell_out_script(
        " && ".join(commands),
        at=at,
        environment=environment,
        output_sink=output_sink,
        error_sink=error_sink,
        runner=runner,
    )


async def shell_out_async(
    to: str | SafeString | Command,
    arguments: Sequence[ArgumentLike] = (),
    *,
    at: str | Path = ".",
    environment: Optional[Mapping[str, str]] = None,
    output_sink: Optional[Sink] = None,
    error_sink: Optional[Sink] = None,
    quote_arguments: bool = True,
    runner: Optional[ProcessRunner] = None,
) -> str:
    """`shell_out` on a worker thread, for use from a running event loop."""
    return await asyncio.to_thread(
        shell_out,
        to,
        arguments,
        at=at,
        environment=environment,
        output_sink=output_sink,
        error_sink=error_sink,
        quote_arguments=quote_arguments,
        runner=runner,
    )
