"""Environment context for finding exe paths."""

import os

from .locator import Locator
from .settings import LocateSettings


class ExecutableNotFound(OSError):
    """Unable to find requested executable on paths."""

    pass


def program_dir(program_path: str) -> str:
    """Absolute directory holding the running program."""
    return os.path.abspath(os.path.dirname(program_path))


def build_search_dirs(
    settings: LocateSettings, program_path: str, search_program_files: bool = False
) -> tuple[list[str], list[str]]:
    """Get the flat and recursive directories to search, in search order.

    The program's own directory comes first, then PATH. Program files roots are only
    included when asked for.
    """
    flat_dirs = [program_dir(program_path)] + settings.path_dirs
    recursive_dirs = settings.program_files_dirs if search_program_files else []
    return flat_dirs, recursive_dirs


def find_executable(name: str, settings: LocateSettings = None, extra_paths=None) -> str:
    """Return full path to requested executable."""
    settings = settings or LocateSettings()
    paths = settings.path_dirs
    if extra_paths:
        paths.extend(extra_paths)
    result = Locator(settings.extensions).locate([name], paths)
    if not result.all_found:
        raise ExecutableNotFound("Executable '{}' not found in path: {}".format(name, result.searched))
    return result.matches[name][0]
