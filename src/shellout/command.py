from dataclasses import dataclass, field
from typing import Iterable

from shellout.argument import Argument
from shellout.quoting import has_unsafe_content
from shellout.safe_string import SafeString

# Builtins have no executable on PATH, so they can only run inside a shell.
SHELL_BUILTINS = frozenset(
    {
        ".",
        ":",
        "alias",
        "cd",
        "eval",
        "exec",
        "exit",
        "export",
        "pushd",
        "popd",
        "read",
        "set",
        "source",
        "type",
        "ulimit",
        "umask",
        "unset",
    }
)

ArgumentLike = str | Argument


@dataclass
class Command:
    """
    A program and its ordered arguments.

    ``str(command)`` is the program followed by every rendered argument,
    joined by single spaces.
    """

    program: SafeString
    arguments: list[Argument] = field(default_factory=list)

    @classmethod
    def of(cls, program: str | SafeString, *arguments: ArgumentLike) -> "Command":
        """Build a command, validating `program` and quoting plain-string arguments."""
        return cls(
            SafeString.coerce(program),
            [Argument.coerce(argument) for argument in arguments],
        )

    @classmethod
    def bash(cls, arguments: Iterable[ArgumentLike]) -> "Command":
        """
        Run the rendered `arguments` as a script with ``bash -c``.

        A leading ``-c`` is accepted and dropped so callers may pass either form.
        """
        arguments = [Argument.coerce(argument) for argument in arguments]
        if arguments and arguments[0].value == "-c":
            arguments = arguments[1:]
        script = " ".join(argument.render() for argument in arguments)
        return cls(
            SafeString.trusted("bash"),
            [Argument.verbatim("-c"), Argument.quoted(script)],
        )

    def appending(self, arguments: Iterable[ArgumentLike]) -> "Command":
        return Command(
            self.program,
            self.arguments + [Argument.coerce(argument) for argument in arguments],
        )

    def appending_argument(self, argument: ArgumentLike) -> "Command":
        return self.appending([argument])

    def append(self, arguments: Iterable[ArgumentLike]) -> None:
        # Rebind rather than extend so a list already handed out is never changed.
        self.arguments = self.arguments + [
            Argument.coerce(argument) for argument in arguments
        ]

    def append_argument(self, argument: ArgumentLike) -> None:
        self.append([argument])

    @property
    def needs_shell(self) -> bool:
        program = self.program.value
        if program in SHELL_BUILTINS or has_unsafe_content(program):
            return True
        return any(argument.needs_shell for argument in self.arguments)

    def argv(self) -> list[str]:
        return [self.program.value] + [
            argument.as_argv() for argument in self.arguments
        ]

    def render(self) -> str:
        return " ".join(
            [self.program.value] + [argument.render() for argument in self.arguments]
        )

    def __str__(self) -> str:
        return self.render()
