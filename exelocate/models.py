"""Models describing the outcome of a search."""

import os

from pydantic import BaseModel, field_serializer


def display_path(path: str) -> str:
    """Make a path printable, undecodable bytes are shown as backslash escapes."""
    return os.fsencode(path).decode("utf-8", "backslashreplace")


class LocateResult(BaseModel):
    """Everything found for one invocation."""

    # command -> matched paths in discovery order
    matches: dict[str, list[str]] = dict()
    not_found: list[str] = list()
    # every directory that was searched, flat directories first
    searched: list[str] = list()
    # paths in the order they were reported as found
    reported: list[str] = list()

    @property
    def all_found(self) -> bool:
        """True when every queried command had at least one match."""
        return not self.not_found

    @field_serializer("matches")
    def _serialize_matches(self, matches: dict[str, list[str]]) -> dict[str, list[str]]:
        return {display_path(c): [display_path(p) for p in paths] for c, paths in matches.items()}

    @field_serializer("not_found", "searched", "reported")
    def _serialize_paths(self, paths: list[str]) -> list[str]:
        return [display_path(p) for p in paths]


def format_not_found(program: str, command: str, searched: list[str]) -> str:
    """Format the notice printed for a command with no matches."""
    locations = ", ".join(display_path(d) for d in searched)
    return f"\n{display_path(program)}: no {display_path(command)!r} in [{locations}]\n"
