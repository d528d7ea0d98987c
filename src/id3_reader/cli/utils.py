"""Utility functions for CLI operations."""

import argparse
import logging
import sys
from enum import IntEnum
from typing import NoReturn, Tuple

from pydantic import BaseModel

from ..config import Config


class ExitCode(IntEnum):
    """Process exit codes used by every id3r command."""

    SUCCESS = 0
    ERROR = 1
    INVALID_INPUT = 10
    PARSE_ERROR = 20
    CANCELLED = 130


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(response: BaseModel, exit_code: int = ExitCode.SUCCESS) -> NoReturn:
    """Print a response model as JSON and exit."""
    print(response.model_dump_json(exclude_none=True, indent=2))
    sys.exit(exit_code)


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file named by --config, or the default one."""
    return Config(getattr(args, "config", None))


def reader_options(args: argparse.Namespace) -> Tuple[bool, bool]:
    """Work out (try_id3v1, strict_size) from the config and command line.

    Command-line flags override the config file.
    """
    config = load_config(args)
    try_id3v1 = config.get_try_id3v1() and not getattr(args, "no_id3v1", False)
    strict_size = config.get_strict_size() or getattr(args, "strict_size", False)
    return try_id3v1, strict_size
