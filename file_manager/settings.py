"""
Configuration settings for the file manager.
"""

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .args import get_arg, parse_args
from .exceptions import ConfigurationError

USERNAME_ARG = "username"
DEFAULT_USER_NAME = "Anonymous"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class Settings:
    """Immutable start-up configuration, built once and handed to the shell."""

    user_name: str = DEFAULT_USER_NAME
    start_directory: str = os.path.expanduser("~")
    log_level: str = DEFAULT_LOG_LEVEL
    chunk_size: int = DEFAULT_CHUNK_SIZE


def _get_env(environ: Mapping[str, str], key: str, default: str) -> str:
    """Get an environment variable with a default value."""
    value = environ.get(key)
    return value if value else default


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown log level: {value}")
    return level


def _parse_chunk_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise ConfigurationError(f"Chunk size must be an integer, got {value!r}")
    if size <= 0:
        raise ConfigurationError(f"Chunk size must be positive, got {size}")
    return size


def load_settings(
    argv: Sequence[str], environ: Mapping[str, str] | None = None
) -> Settings:
    """
    Build the settings from start-up arguments and the environment.

    Args:
        argv: Start-up arguments, program name excluded
        environ: Environment mapping; defaults to ``os.environ`` after loading ``.env``

    Returns:
        Frozen Settings instance

    Raises:
        ConfigurationError: If a configured value is invalid
    """
    if environ is None:
        _ = load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    args = parse_args(argv)
    user_name = get_arg(args, USERNAME_ARG) or _get_env(
        environ, "FILE_MANAGER_USERNAME", DEFAULT_USER_NAME
    )

    start_directory = _get_env(
        environ, "FILE_MANAGER_START_DIR", os.path.expanduser("~")
    )
    start_directory = os.path.abspath(os.path.expanduser(start_directory))

    return Settings(
        user_name=user_name,
        start_directory=start_directory,
        log_level=_parse_log_level(
            _get_env(environ, "FILE_MANAGER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        ),
        chunk_size=_parse_chunk_size(
            _get_env(environ, "FILE_MANAGER_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))
        ),
    )
