#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Randkit provides random numbers and selections for game-server plugins.

This module provides the main entry location for sampling the random facility from
the command line.
"""

from __future__ import annotations

import logging
import sys

from pathlib import Path
from typing import TYPE_CHECKING

import simple_parsing

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

import randkit.configuration as config

from randkit.__version__ import __version__
from randkit.sampler import run_sampling
from randkit.sampler import set_configuration


if TYPE_CHECKING:
    import argparse


def _create_argument_parser() -> argparse.ArgumentParser:
    parser = simple_parsing.ArgumentParser(
        add_option_string_dash_variants=simple_parsing.DashVariant.UNDERSCORE_AND_DASH,
        description="Randkit samples random numbers and selections for game logic",
        fromfile_prefix_chars="@",
    )
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        dest="verbosity",
        default=0,
        help="verbose output (repeat for increased verbosity)",
    )
    parser.add_argument(
        "--no-rich",
        "--no_rich",
        dest="no_rich",
        action="store_true",
        default=False,
        help="Don't use rich for nicer console output.",
    )
    parser.add_argument(
        "--log-file",
        "--log_file",
        help="Path to an optional log file.",
        type=Path,
    )
    parser.add_arguments(config.Configuration, dest="config")

    return parser


def _setup_logging(
    verbosity: int,
    no_rich: bool,  # noqa: FBT001
    log_file: Path | None,
) -> Console | None:
    level = logging.WARNING
    if log_file is not None:
        level = logging.INFO
    if verbosity == 1:
        level = logging.INFO
    if verbosity >= 2:
        level = logging.DEBUG

    console = None
    handler: logging.Handler
    if no_rich:
        handler = logging.StreamHandler()
    else:
        install()
        console = Console(tab_size=4)
        handler = RichHandler(rich_tracebacks=True, log_time_format="[%X]", console=console)
        handler.setFormatter(logging.Formatter("%(message)s"))

    if log_file is not None:
        handler = logging.FileHandler(log_file)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s](%(name)s:%(funcName)s:%(lineno)d): %(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )
    return console


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI of Randkit.

    This method behaves like a standard UNIX command-line application, i.e.,
    the return value `0` signals a successful execution.  Any other return value
    signals some errors, e.g., arguments the sampled operation rejects.

    Args:
        argv: List of command-line arguments

    Returns:
        An integer representing the success of the program run.  0 means
        success, all non-zero exit codes indicate errors.
    """
    if argv is None:
        argv = sys.argv
    if len(argv) <= 1:
        argv.append("--help")

    argument_parser = _create_argument_parser()
    parsed = argument_parser.parse_args(argv[1:])

    console = _setup_logging(
        verbosity=parsed.verbosity,
        no_rich=parsed.no_rich,
        log_file=parsed.log_file,
    )

    set_configuration(parsed.config)
    return run_sampling(console).value


if __name__ == "__main__":
    sys.exit(main(sys.argv))
