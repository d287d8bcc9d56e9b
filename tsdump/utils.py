import contextlib
import os
import sys
from collections.abc import Iterator
from typing import IO

from colorama import Fore, Style


__all__ = [
    "bright_red",
    "bright_green",
    "silent_context",
    "no_color_context",
    "Logger",
]


def bright_red(s: str) -> str:
    """
    Augment a string, so that when printed to console, the string is displayed in bright red color.
    """

    if "NO_COLOR" in os.environ:
        return s

    return Style.BRIGHT + Fore.RED + s + Style.RESET_ALL  # type: ignore


def bright_green(s: str) -> str:
    """
    Augment a string, so that when printed to console, the string is displayed in bright green color.
    """

    if "NO_COLOR" in os.environ:
        return s

    return Style.BRIGHT + Fore.GREEN + s + Style.RESET_ALL  # type: ignore


@contextlib.contextmanager
def silent_context() -> Iterator[None]:
    """
    Return a context manager. Within the context, writting to `stdout` is discarded.
    """

    original_stdout = sys.stdout
    with open(os.devnull, "a", encoding="utf-8") as null_device_fd:
        sys.stdout = null_device_fd
        try:
            yield

        finally:
            sys.stdout = original_stdout


@contextlib.contextmanager
def no_color_context() -> Iterator[None]:
    """
    Return a context manager. Within the context, the environment variable $NO_COLOR is set.
    Utilities supporting the NO_COLOR movement (https://no-color.org/) should automatically adjust their color output behavior.
    """

    orig_value = os.environ.get("NO_COLOR", None)
    os.environ["NO_COLOR"] = "true"

    try:
        yield
    finally:
        if orig_value is None:
            del os.environ["NO_COLOR"]
        else:
            os.environ["NO_COLOR"] = orig_value


class Logger:
    """
    A lightweight logger.

    It's just a thin wrapper over the builtin print function, except that it prints
    strings with order numbers prepended.
    """

    def __init__(self, enabled: bool = True) -> None:
        self._count = 1
        self._enabled = enabled

    __slots__ = ("_count", "_enabled")

    def log(self, s: str, file: IO | None = None) -> None:
        """ Print the string with the next order number prepended """

        if not self._enabled:
            return

        print(bright_green(str(self._count) + ". ") + s, file=file or sys.stdout)
        self._count += 1
