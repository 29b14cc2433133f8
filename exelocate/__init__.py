"""Locate executables on the search path and below well-known install roots."""

import os
from typing import Callable

# extensions treated as executable when a command is queried without one
DEFAULT_EXTENSIONS = (".com", ".exe", ".bat", ".cmd")

# type aliases:

# ordered set of lowercase extensions, dict used for insertion ordering
RecognizedExtensions = dict[str, None]

# visit(path, lstat result or None, error or None) -> WalkSignalEnum value
Visitor = Callable[[str, os.stat_result | None, OSError | None], int]

# on_match(path) called once per newly discovered match
MatchCallback = Callable[[str], None]


class WalkSignalEnum:
    """Enum for what a visitor wants the walk to do next."""

    CONTINUE: int = 0
    SKIP_SUBTREE: int = 1
    ABORT: int = 2
