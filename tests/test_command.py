import pytest

from shellout.argument import Argument
from shellout.command import Command
from shellout.errors import ValidationError
from shellout.safe_string import SafeString


def test_render_joins_program_and_arguments():
    command = Command.of("git", "commit", "-m", "first commit")
    assert command.render() == "git commit -m 'first commit'"
    assert str(command) == command.render()


def test_render_without_arguments_is_the_program():
    assert Command.of("uptime").render() == "uptime"


def test_of_validates_program():
    with pytest.raises(ValidationError):
        Command.of("git commit")


def test_appending_matches_building_with_all_arguments():
    args = [Argument.quoted("a b"), Argument.verbatim("&&")]
    more = [Argument.quoted("c"), Argument.verbatim(">"), Argument.quoted("out file")]
    program = SafeString.trusted("echo")

    appended = Command(program, args).appending(more)

    assert appended.render() == Command(program, args + more).render()
    assert appended.arguments == args + more


def test_appending_does_not_mutate_the_receiver():
    command = Command.of("ls")
    longer = command.appending(["-la"])
    assert command.arguments == []
    assert longer.arguments == [Argument.quoted("-la")]


def test_append_replaces_the_argument_list():
    command = Command.of("ls")
    submitted = command.arguments
    command.append(["-l", "my dir"])
    command.append_argument(Argument.verbatim("|"))
    assert submitted == []
    assert command.render() == "ls -l 'my dir' |"


def test_needs_shell_for_builtins_and_shell_syntax():
    assert Command.of("cd", "somewhere").needs_shell
    assert Command.of("echo", Argument.verbatim(">"), "file").needs_shell
    assert not Command.of("echo", "a > b").needs_shell


def test_argv_uses_unquoted_values():
    command = Command.of("echo", "it's", Argument.verbatim("--flag"))
    assert command.argv() == ["echo", "it's", "--flag"]


def test_bash_wraps_script_and_drops_leading_dash_c():
    expected = "bash -c 'echo '\\''a b'\\'' > out.txt'"
    arguments = [
        Argument.verbatim("echo"),
        Argument.quoted("a b"),
        Argument.verbatim(">"),
        Argument.quoted("out.txt"),
    ]
    assert Command.bash(arguments).render() == expected
    assert Command.bash([Argument.verbatim("-c")] + arguments).render() == expected
    assert not Command.bash(arguments).needs_shell


def test_needs_shell_for_trusted_program_with_shell_syntax():
    command = Command(SafeString.trusted("echo a && echo"), [Argument.quoted("b")])
    assert command.needs_shell
    assert not Command(SafeString.trusted("git"), [Argument.quoted("b")]).needs_shell
