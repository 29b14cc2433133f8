"""Depth-first directory walk driven by an explicit stack."""

import logging
import os
import stat

from . import Visitor, WalkSignalEnum
from .fs import FileSystem, default_fs

logger = logging.getLogger("exelocate.walk")


def walk(root: str, visit: Visitor, fs: FileSystem = None) -> int:
    """Walk the tree under root, calling visit for every directory and file.

    Directories are pushed onto a stack and visited when popped, so the visiting order
    is not the listing order. Files are visited as soon as their parent is listed.
    visit returns a WalkSignalEnum value:
     - CONTINUE carries on,
     - SKIP_SUBTREE stops a directory from being listed (ignored for files),
     - ABORT stops the whole walk and is returned to the caller.

    If root can't be stat'd or isn't a directory, visit is called once for it and its
    signal is returned untouched.
    """
    fs = fs or default_fs
    try:
        info = fs.lstat(root)
    except OSError as e:
        return visit(root, None, e)
    if not stat.S_ISDIR(info.st_mode):
        return visit(root, info, None)

    stack: list[tuple[str, os.stat_result]] = [(root, info)]
    while stack:
        path, info = stack.pop()

        signal = visit(path, info, None)
        if signal == WalkSignalEnum.ABORT:
            return signal
        if signal == WalkSignalEnum.SKIP_SUBTREE:
            continue

        try:
            entries = fs.list_dir(path)
        except OSError as e:
            # An unreadable directory just has no children.
            logger.debug(f"Unable to list directory '{path}': {e}")
            entries = []

        for entry in entries:
            if entry.is_dir():
                stack.append((entry.path, entry.info))
            elif visit(entry.path, entry.info, None) == WalkSignalEnum.ABORT:
                return WalkSignalEnum.ABORT

    return WalkSignalEnum.CONTINUE
