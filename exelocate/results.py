"""Accumulates the matched paths for every queried command."""

from .models import LocateResult


class ResultMap:
    """Ordered, de-duplicated set of matched paths per command."""

    def __init__(self):
        """Start with no matches."""
        # dict values are used as ordered sets.
        self._matches: dict[str, dict[str, None]] = dict()

    def __len__(self) -> int:
        """Number of commands with at least one match."""
        return len(self._matches)

    def add(self, command: str, path: str) -> bool:
        """Record path as a match for command.

        return: true if the path is new for the command, false if it was already recorded.
        """
        paths = self._matches.setdefault(command, dict())
        if path in paths:
            return False
        paths[path] = None
        return True

    def has_match(self, command: str) -> bool:
        """Return true if the command has been matched at least once."""
        return command in self._matches

    def matches(self, command: str) -> list[str]:
        """Get the paths matched for a command in the order they were added."""
        return list(self._matches.get(command, ()))

    def is_fully_satisfied(self, commands: list[str]) -> bool:
        """Return true if every distinct command has a match."""
        return all(self.has_match(c) for c in commands)

    def unsatisfied(self, commands: list[str]) -> list[str]:
        """Get the commands without a match, de-duplicated and in query order."""
        return [c for c in dict.fromkeys(commands) if not self.has_match(c)]

    def to_model(self, commands: list[str], searched: list[str], reported: list[str]) -> LocateResult:
        """Convert into the result model returned by the locator."""
        return LocateResult(
            matches={command: list(paths) for command, paths in self._matches.items()},
            not_found=self.unsatisfied(commands),
            searched=searched,
            reported=reported,
        )
