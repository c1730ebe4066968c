import logging
import sys
from typing import Annotated, Optional

import typer

from shellout.api import shell_out, shell_out_script
from shellout.config import RunnerConfig, log_level_from_env
from shellout.errors import ShellOutError, SpawnError, ValidationError
from shellout.logger import get_logger, setup_logging
from shellout.quoting import join
from shellout.runner import ProcessRunner

logger = get_logger("cli")

app = typer.Typer(help="Run commands and quote arguments for the shell.")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every command that is run")
    ] = False,
):
    setup_logging(logging.DEBUG if verbose else log_level_from_env())


def _fail(err: Exception) -> typer.Exit:
    logger.error("%s", err)
    if isinstance(err, ShellOutError):
        return typer.Exit(err.exit_code if err.exit_code > 0 else 1)
    return typer.Exit(2)


def _echo_result(stdout: str, stream: bool) -> None:
    if not stream and stdout:
        typer.echo(stdout)


@app.command(help="Print the given words quoted for safe use on a command line")
def quote(
    words: Annotated[list[str], typer.Argument(help="Words to quote")],
):
    typer.echo(join(words))


@app.command(
    help="Run a program, quoting each argument unless --verbatim is given",
    context_settings={"ignore_unknown_options": True},
)
def run(
    program: Annotated[str, typer.Argument(help="Program to run")],
    arguments: Annotated[
        Optional[list[str]], typer.Argument(help="Arguments for the program")
    ] = None,
    at: Annotated[str, typer.Option(help="Directory to run the program in")] = ".",
    verbatim: Annotated[
        bool, typer.Option(help="Insert the arguments without quoting them")
    ] = False,
    stream: Annotated[
        bool, typer.Option(help="Show output live instead of once finished")
    ] = False,
):
    runner = ProcessRunner(RunnerConfig.from_env())
    try:
        stdout = shell_out(
            program,
            arguments or [],
            at=at,
            quote_arguments=not verbatim,
            output_sink=sys.stdout if stream else None,
            error_sink=sys.stderr if stream else None,
            runner=runner,
        )
    except (ShellOutError, SpawnError, ValidationError) as err:
        raise _fail(err) from err
    _echo_result(stdout, stream)


@app.command(help="Run a command line through the shell, e.g. 'make && make test'")
def script(
    command_line: Annotated[str, typer.Argument(help="Command line to run")],
    at: Annotated[str, typer.Option(help="Directory to run the script in")] = ".",
    stream: Annotated[
        bool, typer.Option(help="Show output live instead of once finished")
    ] = False,
):
    runner = ProcessRunner(RunnerConfig.from_env())
    try:
        stdout = shell_out_script(
            command_line,
            at=at,
            output_sink=sys.stdout if stream else None,
            error_sink=sys.stderr if stream else None,
            runner=runner,
        )
    except (ShellOutError, SpawnError) as err:
        raise _fail(err) from err
    _echo_result(stdout, stream)


if __name__ == "__main__":
    app()
