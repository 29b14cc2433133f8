"""Exelocate command line.

Prints the full path of every file matching the given commands.
"""

import logging
import os
import sys

import click

from .env import build_search_dirs
from .locator import Locator
from .models import display_path, format_not_found
from .settings import LocateSettings
from .version import __version__

logger = logging.getLogger("exelocate.cli")

log_root = logging.getLogger()
log_root_handler = logging.StreamHandler(sys.stderr)
log_root_handler.setFormatter(
    logging.Formatter("%(asctime)s %(levelname)-7s- %(name)-20s - %(message)s", "%d/%m/%Y %H:%M:%S")
)
log_root.addHandler(log_root_handler)

VERSION_MESSAGE = "%(prog)s %(version)s, Copyright (C) 2014 Sol Touré."


def echo_path(path: str):
    """Print a discovered path as soon as it is found."""
    click.echo(display_path(path))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-a", "--all", "show_all", is_flag=True, help="Show all matches.")
@click.option("-p", "--program-files", is_flag=True, help="Search Program Files directories.")
@click.version_option(__version__, "-v", "--version", message=VERSION_MESSAGE)
@click.argument("commands", nargs=-1)
@click.pass_context
def main(ctx: click.Context, show_all: bool, program_files: bool, commands: tuple[str, ...]):
    """Locate each COMMAND on PATH, and optionally under the Program Files directories."""
    if not commands:
        click.echo(ctx.get_help())
        ctx.exit(0)

    settings = LocateSettings()
    log_root.setLevel(settings.log_level)
    program = os.path.basename(sys.argv[0])

    flat_dirs, recursive_dirs = build_search_dirs(settings, sys.argv[0], program_files)
    logger.info(f"Searching {len(flat_dirs)} flat and {len(recursive_dirs)} recursive directories")
    locator = Locator(settings.extensions, show_all=show_all, on_match=echo_path)
    result = locator.locate(list(commands), flat_dirs, recursive_dirs)

    # One notice per queried occurrence, repeated commands are reported again.
    for command in commands:
        if command not in result.not_found:
            continue
        click.echo(format_not_found(program, command, result.searched))
    click.echo(result.model_dump_json())

    if not result.all_found:
        ctx.exit(1)


if __name__ == "__main__":
    main()
