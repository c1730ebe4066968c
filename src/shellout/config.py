import logging
import os
from dataclasses import dataclass, field

from shellout.logger import get_logger

DEFAULT_SHELL = "/bin/bash"
DEFAULT_CHUNK_SIZE = 64 * 1024


def get_env_var(env_var_name: str, default: str) -> str:
    env_var = os.getenv(env_var_name)
    if env_var is None or not env_var.strip():
        return default
    return env_var


def log_level_from_env(default: int = logging.WARNING) -> int:
    """Read ``SHELLOUT_LOG_LEVEL`` (a level name such as ``DEBUG``)."""
    name = get_env_var("SHELLOUT_LOG_LEVEL", "").upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in SHELLOUT_LOG_LEVEL: {name}")
    return level


@dataclass(frozen=True)
class RunnerConfig:
    """Settings for a `ProcessRunner`, passed explicitly at construction."""

    # Interpreter used for commands that need shell syntax, run as `<shell> -c`.
    shell: str = DEFAULT_SHELL
    chunk_size: int = DEFAULT_CHUNK_SIZE
    # Close caller-supplied sinks once drained. Standard streams are never closed.
    close_sinks: bool = True
    # Spawn programs directly when no argument needs shell syntax.
    prefer_direct_exec: bool = True
    logger: logging.Logger = field(default_factory=lambda: get_logger("runner"))

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, was: {self.chunk_size}")

    @classmethod
    def from_env(cls) -> "RunnerConfig":
        """Build a config from ``SHELLOUT_SHELL`` and ``SHELLOUT_CHUNK_SIZE``."""
        chunk_size = get_env_var("SHELLOUT_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))
        try:
            parsed_chunk_size = int(chunk_size)
        except ValueError as err:
            raise ValueError(
                f"SHELLOUT_CHUNK_SIZE must be an integer, was: {chunk_size}"
            ) from err
        return cls(
            shell=get_env_var("SHELLOUT_SHELL", DEFAULT_SHELL),
            chunk_size=parsed_chunk_size,
        )
