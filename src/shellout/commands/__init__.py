"""Ready-made commands for common tools, built on `Command`."""

from shellout.commands.files import (
    copy_file,
    create_file,
    create_folder,
    create_symlink,
    expand_symlink,
    move_file,
    open_file,
    read_file,
    remove_file,
)
from shellout.commands.git import (
    git_checkout,
    git_clone,
    git_commit,
    git_init,
    git_pull,
    git_push,
    git_submodule_update,
)

__all__ = [
    "copy_file",
    "create_file",
    "create_folder",
    "create_symlink",
    "expand_symlink",
    "git_checkout",
    "git_clone",
    "git_commit",
    "git_init",
    "git_pull",
    "git_push",
    "git_submodule_update",
    "move_file",
    "open_file",
    "read_file",
    "remove_file",
]
