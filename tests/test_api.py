import asyncio
from pathlib import Path

import pytest

from shellout import (
    Argument,
    Command,
    ProcessRunner,
    RunnerConfig,
    ShellOutError,
    ValidationError,
    shell_out,
    shell_out_async,
    shell_out_script,
    shell_out_series,
)

pytestmark = pytest.mark.skipif(
    not Path("/bin/bash").exists(), reason="requires /bin/bash"
)


def test_without_arguments():
    assert shell_out("pwd") != ""


def test_with_arguments():
    assert shell_out("echo", ["Hello world"]) == "Hello world"


def test_with_unquoted_arguments():
    assert shell_out("echo", ["Hello", "&&", "echo", "world"], quote_arguments=False) == (
        "Hello\nworld"
    )


def test_program_must_be_safe():
    with pytest.raises(ValidationError):
        shell_out('echo "Hello world"')


def test_command_with_extra_arguments():
    command = Command.of("echo", "Hello")
    assert shell_out(command, ["big", Argument.verbatim("world")]) == "Hello big world"
    assert command.arguments == [Argument.quoted("Hello")]


def test_inline_script():
    assert shell_out_script('echo "Hello world"') == "Hello world"


def test_single_command_at_path(tmp_path):
    shell_out_script(f'echo "Hello" > {tmp_path}/single-command.txt')
    assert shell_out("cat", ["single-command.txt"], at=tmp_path) == "Hello"


def test_series_of_commands():
    assert shell_out_series(['echo "Hello"', 'echo "world"']) == "Hello\nworld"


def test_series_of_commands_at_path(tmp_path):
    shell_out_series(
        [
            f"cd {tmp_path}",
            "mkdir -p series",
            'echo "Hello again" > series/multiple-commands.txt',
        ]
    )
    assert (
        shell_out_series(["cd series", "cat multiple-commands.txt"], at=tmp_path)
        == "Hello again"
    )


def test_series_stops_at_first_failure():
    with pytest.raises(ShellOutError) as exc_info:
        shell_out_series(["echo first", "false", "echo never"])
    assert exc_info.value.output == "first"


def test_custom_runner_is_used():
    runner = ProcessRunner(RunnerConfig(shell="/bin/sh"))
    assert shell_out_script("echo $0", runner=runner) == "/bin/sh"


def test_async_variant():
    assert asyncio.run(shell_out_async("echo", ["Hello async"])) == "Hello async"


def test_async_variant_raises_shell_out_error():
    async def run() -> str:
        return await shell_out_async("cd", ["notADirectory"])

    with pytest.raises(ShellOutError) as exc_info:
        asyncio.run(run())
    assert "notADirectory" in exc_info.value.message


def test_concurrent_async_calls():
    async def run_all() -> list[str]:
        return await asyncio.gather(
            *(shell_out_async("echo", [str(i)]) for i in range(5))
        )

    assert asyncio.run(run_all()) == ["0", "1", "2", "3", "4"]
