"""Settings read from the environment."""

import logging
import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import RecognizedExtensions
from .match import parse_extensions


def split_path_list(raw: str) -> list[str]:
    """Split a path list variable on the platform separator."""
    return raw.split(os.pathsep)


class LocateSettings(BaseSettings):
    """Centralised exelocate settings.

    Path lists are kept as the raw variable text and split on os.pathsep when used.
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore", populate_by_name=True)

    # directories searched one level deep
    path: str = Field("", validation_alias="PATH")
    # extra recognized extensions, merged with the defaults
    path_ext: str = Field("", validation_alias="PATHEXT")
    # roots walked recursively when program files searching is enabled
    program_files: str = Field("", validation_alias="ProgramFiles")
    program_files_x86: str = Field("", validation_alias="ProgramFiles(x86)")

    log_level: str = Field("WARNING", validation_alias="EXELOCATE_LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value) -> str:
        """Uppercase the level name, unknown levels fall back to WARNING."""
        level = str(value).upper()
        if level not in logging.getLevelNamesMapping():
            return "WARNING"
        return level

    @property
    def path_dirs(self) -> list[str]:
        """Directories from PATH in order."""
        return split_path_list(self.path)

    @property
    def program_files_dirs(self) -> list[str]:
        """Directories from ProgramFiles followed by ProgramFiles(x86)."""
        return split_path_list(self.program_files) + split_path_list(self.program_files_x86)

    @property
    def extensions(self) -> RecognizedExtensions:
        """Recognized extensions, the defaults plus everything in PATHEXT."""
        return parse_extensions(self.path_ext)
