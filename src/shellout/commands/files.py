from typing import Sequence

from shellout.argument import Argument
from shellout.command import Command
from shellout.safe_string import SafeString


def create_folder(name: str) -> Command:
    return Command.of(SafeString.trusted("mkdir"), name)


def create_file(name: str, contents: str) -> Command:
    """Create (or overwrite) the file `name` holding `contents` and a newline."""
    return Command.bash(
        [
            Argument.verbatim("echo"),
            Argument.quoted(contents),
            Argument.verbatim(">"),
            Argument.quoted(name),
        ]
    )


def move_file(origin_path: str, target_path: str) -> Command:
    return Command.of(SafeString.trusted("mv"), origin_path, target_path)


def copy_file(origin_path: str, target_path: str) -> Command:
    return Command.of(SafeString.trusted("cp"), origin_path, target_path)


def remove_file(path: str, arguments: Sequence[str] = ("-f",)) -> Command:
    return Command.of(SafeString.trusted("rm"), *arguments, path)


def open_file(path: str) -> Command:
    """Open a file with its designated application (macOS ``open``)."""
    return Command.of(SafeString.trusted("open"), path)


def read_file(path: str) -> Command:
    return Command.of(SafeString.trusted("cat"), path)


def create_symlink(target_path: str, link_path: str) -> Command:
    return Command.of(SafeString.trusted("ln"), "-s", target_path, link_path)


def expand_symlink(path: str) -> Command:
    """Resolve the symlink at `path` to the path it points at."""
    return Command.of(SafeString.trusted("readlink"), path)
