from typing import Optional

from shellout.argument import Argument
from shellout.command import Command
from shellout.safe_string import SafeString


def _git(allowing_prompt: bool) -> Command:
    if allowing_prompt:
        return Command(SafeString.trusted("git"))
    return Command(
        SafeString.trusted("env"),
        [Argument.verbatim("GIT_TERMINAL_PROMPT=0"), Argument.verbatim("git")],
    )


def _with_quiet(command: Command, quiet: bool) -> Command:
    if quiet:
        return command.appending([Argument.verbatim("--quiet")])
    return command


def git_init() -> Command:
    """Initialize a git repository."""
    return Command(SafeString.trusted("git"), [Argument.verbatim("init")])


def git_clone(
    url: str,
    to: Optional[str] = None,
    allowing_prompt: bool = True,
    quiet: bool = True,
) -> Command:
    """Clone a git repository at a given URL."""
    command = _git(allowing_prompt).appending(
        [Argument.verbatim("clone"), Argument.quoted(url)]
    )
    if to is not None:
        command.append_argument(to)
    return _with_quiet(command, quiet)


def git_commit(
    message: str,
    allowing_prompt: bool = True,
    quiet: bool = True,
) -> Command:
    """Create a commit with `message`, staging every file in the tree first."""
    command = _git(allowing_prompt).appending(
        [Argument.verbatim("add . && git commit -a -m"), Argument.quoted(message)]
    )
    return _with_quiet(command, quiet)


def git_push(
    remote: Optional[str] = None,
    branch: Optional[str] = None,
    allowing_prompt: bool = True,
    quiet: bool = True,
) -> Command:
    command = _git(allowing_prompt).appending([Argument.verbatim("push")])
    command.append(value for value in (remote, branch) if value is not None)
    return _with_quiet(command, quiet)


def git_pull(
    remote: Optional[str] = None,
    branch: Optional[str] = None,
    allowing_prompt: bool = True,
    quiet: bool = True,
) -> Command:
    command = _git(allowing_prompt).appending([Argument.verbatim("pull")])
    command.append(value for value in (remote, branch) if value is not None)
    return _with_quiet(command, quiet)


def git_submodule_update(
    initialize_if_needed: bool = True,
    recursive: bool = True,
    allowing_prompt: bool = True,
    quiet: bool = True,
) -> Command:
    command = _git(allowing_prompt).appending(
        [Argument.verbatim("submodule"), Argument.verbatim("update")]
    )
    if initialize_if_needed:
        command.append_argument(Argument.verbatim("--init"))
    if recursive:
        command.append_argument(Argument.verbatim("--recursive"))
    return _with_quiet(command, quiet)


def git_checkout(branch: str, quiet: bool = True) -> Command:
    command = Command(
        SafeString.trusted("git"),
        [Argument.verbatim("checkout"), Argument.quoted(branch)],
    )
    return _with_quiet(command, quiet)
