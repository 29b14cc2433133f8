"""Deciding whether a file name satisfies a queried command."""

import os

from . import DEFAULT_EXTENSIONS, RecognizedExtensions


def parse_extensions(raw: str, sep: str = os.pathsep) -> RecognizedExtensions:
    """Merge the sep separated extensions in raw into the default set, lowercased.

    Empty entries are kept as the empty extension, so an unset variable lets a command
    match a file with no extension at all (the normal case outside Windows).
    """
    extensions: RecognizedExtensions = dict.fromkeys(DEFAULT_EXTENSIONS)
    for ext in raw.split(sep):
        extensions[ext.lower()] = None
    return extensions


def extension_of(name: str) -> str:
    """Get the extension of a file name including the dot, or an empty string."""
    return os.path.splitext(name)[1]


def has_extension(command: str) -> bool:
    """Return true if the command was given with an explicit extension."""
    return extension_of(command) != ""


def is_recognized(name: str, extensions: RecognizedExtensions) -> bool:
    """Return true if the extension of name is one of the recognized extensions."""
    return extension_of(name).lower() in extensions


def matches(command: str, candidate_name: str, extensions: RecognizedExtensions) -> bool:
    """Check whether a file called candidate_name satisfies command.

    Commands with an extension must match exactly. Commands without one match any
    candidate named command + a recognized extension. Comparison ignores case.
    """
    if not is_recognized(candidate_name, extensions):
        return False
    wanted = command
    if not has_extension(command):
        wanted += extension_of(candidate_name)
    return candidate_name.lower() == wanted.lower()


def probe_names(command: str, extensions: RecognizedExtensions) -> list[str]:
    """Get the file names to check for directly inside a flat search directory."""
    if has_extension(command):
        return [command]
    return [command + ext for ext in extensions]
