"""Coloured console logging for the game."""

from __future__ import annotations

import sys

DEBUG = True

COLOR_RESET = "\033[1;0m"[:0] + "\033[0m"
COLOR_INFO = "\033[1;32m"
COLOR_ERROR = "\033[1;31m"
COLOR_WARNING = "\033[1;33m"
COLOR_DEBUG = "\033[1;34m"


def _emit(stream, color: str, tag: str, message: str) -> None:
    print(f"{color}[{tag}] {message}{COLOR_RESET}", file=stream, flush=True)


def info(message: str) -> None:
    """Write an informational message to standard output."""
    _emit(sys.stdout, COLOR_INFO, "INFO", message)


def error(message: str) -> None:
    """Write an error message to standard error."""
    _emit(sys.stderr, COLOR_ERROR, "ERROR", message)


def warning(message: str) -> None:
    """Write a warning message to standard error."""
    _emit(sys.stderr, COLOR_WARNING, "WARNING", message)


def debug(message: str) -> None:
    """Write a debug message to standard output when debugging is enabled."""
    if DEBUG:
        _emit(sys.stdout, COLOR_DEBUG, "DEBUG", message)