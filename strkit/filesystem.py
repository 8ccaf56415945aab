"""Filesystem helpers for the strkit command line."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .constants import DEFAULT_MAX_INPUT_SIZE

logger = logging.getLogger(__name__)

MAX_INPUT_SIZE_ENV_VAR = "STRKIT_MAX_INPUT_SIZE"


def get_max_input_size(default: int = DEFAULT_MAX_INPUT_SIZE) -> int:
    """Resolve the maximum allowed input file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed input size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["STRKIT_MAX_INPUT_SIZE"] = "204800"
        limit = get_max_input_size(default=102400)
    """
    env_value = os.environ.get(MAX_INPUT_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_INPUT_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_INPUT_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def contains_symlink(path: Path) -> bool:
    """Check whether a path or any parent directory is a symlink.

    Examples:
        contains_symlink(Path("/tmp/link/child"))
    """
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


def normalize_filepath(raw_path: str) -> Path:
    """Resolve and validate an input filepath.

    Args:
        raw_path: User-supplied path (absolute, relative, or starting with ``~``).

    Returns:
        Path: Absolute path to the input file.

    Raises:
        ValueError: If the path does not exist, is not a regular file, or
            traverses a symlink.

    Examples:
        normalize_filepath("notes/title.txt")
    """
    path = Path(raw_path).expanduser()

    if contains_symlink(path):
        error_message = f"Symlinks are not supported for security reasons: {path}"
        raise ValueError(error_message)

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        error_message = f"{path} does not exist."
        raise ValueError(error_message) from error
    except OSError as error:
        error_message = f"Error resolving {path}: {error}"
        raise ValueError(error_message) from error

    if not resolved.is_file():
        error_message = f"{resolved} is not a regular file."
        raise ValueError(error_message)

    return resolved


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a file while disallowing symlinks.

    Raises:
        IOError: If the path is inaccessible, a symlink, or not a regular file.
    """
    try:
        stat_result = os.stat(filepath, follow_symlinks=False)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error

    if stat.S_ISLNK(stat_result.st_mode):
        error_message = f"Symlinks are not supported: {filepath}."
        raise IOError(error_message)

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise IOError(error_message)

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Guard against files that exceed the configured maximum size.

    Raises:
        IOError: If `stat_result.st_size` exceeds `max_size`.
    """
    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)


def read_input(filepath: Path, max_size: int) -> str:
    """Read a UTF-8 input file after checking its type and size.

    A single trailing newline is removed so that ``echo``-style files
    transform the same way as the equivalent command-line argument.

    Args:
        filepath: Normalized path to the input file.
        max_size: Maximum allowed size in bytes.

    Returns:
        str: File contents.

    Raises:
        IOError: If the file is inaccessible, too large, or not valid UTF-8.

    Examples:
        text = read_input(Path("title.txt"), max_size=1024)
    """
    stat_result = collect_file_stat(filepath)
    enforce_file_size(stat_result, max_size, filepath)

    try:
        with open(filepath, "r", encoding="UTF-8") as handle:
            content = handle.read()
    except (PermissionError, IsADirectoryError, NotADirectoryError, FileNotFoundError) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error
    except UnicodeDecodeError as error:
        error_message = f"{filepath} is not valid UTF-8: {error}"
        raise IOError(error_message) from error

    logger.debug("Read %d bytes from %s", stat_result.st_size, filepath)
    return content.removesuffix("\n")
