"""A small command-line program skeleton with help, version and verbosity options."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

PROGRAM = "exN"
DESCRIPTION = "Brief description"
VERSION = "20160908.182854"
DEBUG = False

_OPTION_LETTERS = "vhV"


@dataclass
class Options:
    """Options read from the command line."""

    verbose: int = 0
    show_help: bool = False
    show_version: bool = False


def parse_options(argv: Sequence[str]) -> Options:
    """Parse ``-h``, ``-V`` and cumulative ``-v`` flags.

    Parsing stops at the first ``-h`` or ``-V``, as those end the program.
    Non-option arguments are skipped; ``--`` ends option parsing.
    Raises ValueError for an unknown option.
    """
    options = Options()
    for arg in argv:
        if arg == "--":
            break
        if not arg.startswith("-") or arg == "-":
            continue
        for letter in arg[1:]:
            if letter not in _OPTION_LETTERS:
                raise ValueError(f"unknown option: -{letter}")
            if letter == "v":
                options.verbose += 1
            elif letter == "h":
                options.show_help = True
                return options
            else:
                options.show_version = True
                return options
    return options


def help_text(program: str) -> str:
    """Return the usage message."""
    return (
        f"{program} - {DESCRIPTION}\n"
        f"\nUsage: {program} [-h|-v]\n"
        "\nOptions:\n"
        "\t-h,  --help\n\t\tShow this help.\n"
        "\t-V,  --version\n\t\tShow version and copyright information.\n"
        "\t-v,  --verbose\n\t\tSet verbose level (cumulative).\n"
        "\nExit status:\n\t0 if ok.\n\t1 some error occurred.\n"
        "\nTodo:\n\tLong options not implemented yet.\n\n"
    )


def version_text(program: str, verbose: int) -> str:
    """Return the version message; very verbose runs also report the level."""
    text = f"{program} - Version {VERSION}\n\n"
    if verbose > 3:
        text += f"version: Verbose: {verbose}\n"
    return text


def initialize() -> logging.Logger:
    """Set up the program's debug logger once and return it."""
    logger = logging.getLogger(__name__)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("[DEBUG file:%(filename)s line:%(lineno)d]: %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if DEBUG else logging.WARNING)
        logger.propagate = False
    logger.debug("initialize()")
    return logger


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_options(args)
    except ValueError:
        print(f"Type\n\t$man {PROGRAM}\nor\n\t${PROGRAM} -h\nfor help.\n")
        return 1
    if options.show_help:
        sys.stdout.write(help_text(PROGRAM))
        return 1
    if options.show_version:
        sys.stdout.write(version_text(PROGRAM, options.verbose))
        return 1
    if options.verbose:
        print(f"Verbose level set at: {options.verbose}")
    initialize()
    return 0


if __name__ == "__main__":
    sys.exit(main())