"""Search orchestration over flat and recursive search directories."""

import logging
import os
import stat

from . import MatchCallback, RecognizedExtensions, WalkSignalEnum
from .fs import FileSystem, default_fs
from .match import is_recognized, matches, probe_names
from .models import LocateResult
from .results import ResultMap
from .walk import walk

logger = logging.getLogger("exelocate.locator")


class Locator:
    """Finds files satisfying a list of commands.

    Flat directories are checked one level deep, in order. Recursive directories are
    walked afterwards, only if a command is still missing or every match was asked for.
    """

    def __init__(
        self,
        extensions: RecognizedExtensions,
        show_all: bool = False,
        fs: FileSystem = None,
        on_match: MatchCallback = None,
    ):
        """Configure a search, on_match is told about each new match as it is found."""
        self.extensions = extensions
        self.show_all = show_all
        self.fs = fs or default_fs
        self._on_match = on_match

    def locate(self, commands: list[str], flat_dirs: list[str], recursive_dirs: list[str] = None) -> LocateResult:
        """Search for every command and return everything that was found."""
        flat_dirs = [d for d in flat_dirs if d]
        recursive_dirs = [d for d in recursive_dirs or [] if d]
        result = ResultMap()
        reported: list[str] = []

        def record(command: str, path: str):
            if result.add(command, path):
                reported.append(path)
                if self._on_match:
                    self._on_match(path)

        for directory in flat_dirs:
            self._search_flat(directory, commands, result, record)

        if self.show_all or not result.is_fully_satisfied(commands):
            logger.info(f"Walking {len(recursive_dirs)} directories for {result.unsatisfied(commands)}")
            for directory in recursive_dirs:
                if self._search_recursive(directory, commands, result, record) == WalkSignalEnum.ABORT:
                    break

        return result.to_model(commands, flat_dirs + recursive_dirs, reported)

    def _wanted(self, command: str, result: ResultMap) -> bool:
        """Return true if command still needs to be searched for."""
        return self.show_all or not result.has_match(command)

    def _search_flat(self, directory: str, commands: list[str], result: ResultMap, record):
        """Check for each command directly inside directory."""
        for command in commands:
            for name in probe_names(command, self.extensions):
                if not self._wanted(command, result):
                    break
                path = os.path.join(directory, name)
                if self.fs.is_file(path):
                    record(command, path)

    def _search_recursive(self, directory: str, commands: list[str], result: ResultMap, record) -> int:
        """Walk directory checking every file against every command still wanted."""

        def visit(path: str, info: os.stat_result | None, error: OSError | None) -> int:
            if error is not None:
                logger.debug(f"Skipping '{path}': {error}")
                return WalkSignalEnum.SKIP_SUBTREE
            if stat.S_ISDIR(info.st_mode):
                return WalkSignalEnum.CONTINUE

            name = os.path.basename(path)
            if is_recognized(name, self.extensions):
                for command in commands:
                    if self._wanted(command, result) and matches(command, name, self.extensions):
                        record(command, path)

            if not self.show_all and result.is_fully_satisfied(commands):
                return WalkSignalEnum.ABORT
            return WalkSignalEnum.CONTINUE

        return walk(directory, visit, self.fs)
