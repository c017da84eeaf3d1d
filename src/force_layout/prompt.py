"""
Console prompts for the interactive front end.

Every prompt re-asks until it gets a usable answer. Running out of input is
not an exception here: prompts return ``Success(value)`` or
``Failure(InputExhausted(...))`` and the caller decides what to do.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, TextIO, TypeVar, Union

T = TypeVar("T")

WELCOME = (
    "Welcome to force-layout!\n"
    "This program uses a force-directed graph layout algorithm\n"
    "to render pictures of graphs.\n"
)


class InputExhausted(Exception):
    """End of input reached while waiting for a line."""

    pass


@dataclass(frozen=True)
class Success(Generic[T]):
    """A prompt produced a value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A prompt could not produce a value."""

    error: InputExhausted

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure]


def welcome(stdout: Optional[TextIO] = None) -> None:
    """Print the banner describing the program."""
    out = stdout if stdout is not None else sys.stdout
    out.write(WELCOME + "\n")


def prompt_for_file(
    prompt: str = "Please enter file name: ",
    reprompt: str = "Unable to open that file.  Try again.",
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> Result[Path]:
    """
    Ask for the name of a readable file.

    Empty answers and files that cannot be opened are re-asked.

    Returns:
        Success(Path) or Failure(InputExhausted)
    """
    stdin, stdout, stderr = _streams(stdin, stdout, stderr)
    while True:
        line = _ask(prompt, stdin, stdout)
        if line is None:
            return _exhausted(prompt)
        name = line.strip()
        if name:
            path = Path(name)
            try:
                with open(path, "rb"):
                    pass
                return Success(path)
            except OSError:
                pass
        stderr.write(reprompt + "\n")


def prompt_for_duration(
    prompt: str = "Please enter the time you want to run (seconds): ",
    reprompt: str = "Invalid format.  Try again.",
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> Result[float]:
    """
    Ask for a number of seconds.

    The whole line must be one finite number.

    Returns:
        Success(float) or Failure(InputExhausted)
    """
    stdin, stdout, stderr = _streams(stdin, stdout, stderr)
    while True:
        line = _ask(prompt, stdin, stdout)
        if line is None:
            return _exhausted(prompt)
        try:
            value = float(line.strip())
        except ValueError:
            value = math.nan
        if math.isfinite(value):
            return Success(value)
        stderr.write(reprompt + "\n")


def prompt_yes_no(
    prompt: str = "Enter yes (y) to try another file, no (n) to end the program: ",
    reprompt: str = "Invalid entry.  Try again.",
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> Result[bool]:
    """
    Ask a yes/no question; only the first character counts.

    Returns:
        Success(bool) or Failure(InputExhausted)
    """
    stdin, stdout, stderr = _streams(stdin, stdout, stderr)
    while True:
        line = _ask(prompt, stdin, stdout)
        if line is None:
            return _exhausted(prompt)
        answer = line.strip()[:1].lower()
        if answer == "y":
            return Success(True)
        if answer == "n":
            return Success(False)
        stderr.write(reprompt + "\n")


def _streams(
    stdin: Optional[TextIO], stdout: Optional[TextIO], stderr: Optional[TextIO]
) -> tuple[TextIO, TextIO, TextIO]:
    return (
        stdin if stdin is not None else sys.stdin,
        stdout if stdout is not None else sys.stdout,
        stderr if stderr is not None else sys.stderr,
    )


def _ask(prompt: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def _exhausted(prompt: str) -> Failure:
    return Failure(InputExhausted(f"end of input reached while waiting for: {prompt.strip()}"))


__all__ = [
    "InputExhausted",
    "Success",
    "Failure",
    "Result",
    "welcome",
    "prompt_for_file",
    "prompt_for_duration",
    "prompt_yes_no",
]
