from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from shellout.quoting import has_unsafe_content, quote


class ArgumentKind(Enum):
    VERBATIM = "verbatim"
    QUOTED = "quoted"


@dataclass(frozen=True)
class Argument:
    """
    One token of a command line.

    A quoted argument is always escaped before it is placed on the command
    line. A verbatim argument is inserted as-is, so it may carry deliberate
    shell syntax like ``&&`` or ``>``; the caller vouches for it.
    """

    kind: ArgumentKind
    value: str

    @classmethod
    def quoted(cls, value: str) -> "Argument":
        return cls(ArgumentKind.QUOTED, value)

    @classmethod
    def verbatim(cls, value: str) -> "Argument":
        return cls(ArgumentKind.VERBATIM, value)

    @classmethod
    def url(cls, url: str) -> "Argument":
        """
        Insert `url` verbatim.

        Only use this for URLs you control: a ``&`` or ``;`` in the query string
        is shell syntax and makes the command run through the shell. Use
        `Argument.quoted` for anything that came from user input.
        """
        return cls.verbatim(url)

    @classmethod
    def coerce(cls, value: "str | Argument") -> "Argument":
        if isinstance(value, Argument):
            return value
        return cls.quoted(value)

    @property
    def needs_shell(self) -> bool:
        """True if this argument only means something to a shell interpreter."""
        return self.kind is ArgumentKind.VERBATIM and has_unsafe_content(self.value)

    def render(self) -> str:
        match self.kind:
            case ArgumentKind.QUOTED:
                return quote(self.value)
            case ArgumentKind.VERBATIM:
                return self.value
            case _:
                assert_never(self.kind)

    def as_argv(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.render()


def quoted(*values: str) -> list[Argument]:
    return [Argument.quoted(value) for value in values]


def verbatim(*values: str) -> list[Argument]:
    return [Argument.verbatim(value) for value in values]
