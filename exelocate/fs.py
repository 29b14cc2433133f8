"""Filesystem primitives used by the walk and the locator.

Everything that touches the disk goes through a FileSystem instance so the
search can be pointed at a fake tree in tests.
"""

import logging
import os
import stat
from typing import NamedTuple

logger = logging.getLogger("exelocate.fs")


class FileEntry(NamedTuple):
    """An immediate child of a listed directory."""

    name: str
    path: str
    info: os.stat_result

    def is_dir(self) -> bool:
        """True when the entry itself is a directory, symlinks are not followed."""
        return stat.S_ISDIR(self.info.st_mode)


class FileSystem:
    """Thin wrapper over the os module."""

    def lstat(self, path: str) -> os.stat_result:
        """Stat a path without following a final symlink."""
        return os.lstat(path)

    def is_file(self, path: str) -> bool:
        """Return true if path exists (following symlinks) and is not a directory."""
        try:
            info = os.stat(path)
        except OSError:
            return False
        return not stat.S_ISDIR(info.st_mode)

    def list_dir(self, path: str) -> list[FileEntry]:
        """List the immediate children of a directory.

        Raises OSError if the directory itself can't be opened. Children that vanish
        between listing and stat are left out.
        """
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    info = entry.stat(follow_symlinks=False)
                except OSError as e:
                    logger.debug(f"Ignoring '{entry.path}' because it couldn't be stat'd: {e}")
                    continue
                entries.append(FileEntry(entry.name, entry.path, info))
        return entries


default_fs = FileSystem()
