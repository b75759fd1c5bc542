"""Filesystem and environment helpers used by the package layer."""

from __future__ import annotations

import os
import re
import shutil

from windriver.errors import ExternalCallError

_PERCENT_VAR = re.compile(r"%([^%]+)%")


def expand_environment_variables(path: str) -> str:
    """Expand ``%NAME%`` and ``$NAME`` references in a path.

    Unknown variables are left untouched, as Windows does.

    :param path: The path to expand.
    :return: The expanded path.
    """

    def _replace(match: re.Match) -> str:
        return os.environ.get(match.group(1), match.group(0))

    return os.path.expandvars(_PERCENT_VAR.sub(_replace, path))


def copy_directory(source: str, destination: str) -> None:
    """Recursively copy a directory tree onto another.

    The destination is created when absent. Existing files are overwritten,
    files only present in the destination are kept.

    :param source: The directory to copy from.
    :param destination: The directory to copy into.
    """
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        raise ExternalCallError(
            "CopyDirectory", f"{source} -> {destination}: {e}"
        ) from e


def remove_directory(path: str) -> None:
    """Recursively delete a directory tree. A missing tree is not an error.

    :param path: The directory to delete.
    """
    if not os.path.exists(path):
        return
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise ExternalCallError("RemoveDirectory", f"{path}: {e}") from e
