"""Application-layer workflows decoupled from CLI parsing details."""

from __future__ import annotations

from typing import Sequence

from streamdemo.domain.run import ConsoleLine, DemoRequest
from streamdemo.utils import try_parse_int

COUNTED_LINES = 10
BLANK = ConsoleLine("stdout")


def _out(text: str) -> ConsoleLine:
    return ConsoleLine("stdout", text)


def greeting_lines() -> tuple[ConsoleLine, ...]:
    """Return the greeting followed by a blank line."""
    return _out("Hello World!"), BLANK


def argument_lines(arguments: Sequence[str]) -> tuple[ConsoleLine, ...]:
    """
    Describe the supplied command-line arguments.

    Each argument is listed on its own indented line as ``<index>: <value>`` with a
    zero-based index and the argument text unchanged. The block ends with a blank line.
    """
    if not arguments:
        return _out("No command line arguments passed in."), BLANK

    listed = tuple(_out(f"    {index}: {value}") for index, value in enumerate(arguments))
    return (_out("Command line arguments supplied:"), *listed, BLANK)


def counted_lines(prefix: str, count: int = COUNTED_LINES) -> tuple[ConsoleLine, ...]:
    """Return ``<prefix> 0`` through ``<prefix> <count - 1>`` followed by a blank line."""
    return (*(_out(f"{prefix} {index}") for index in range(count)), BLANK)


def error_lines() -> tuple[ConsoleLine, ...]:
    """Return the single stderr line and the stdout blank line that follows it."""
    return ConsoleLine("stderr", "ERROR!!"), BLANK


def build_transcript(request: DemoRequest) -> tuple[ConsoleLine, ...]:
    """Return every line written before the exit code is resolved, in order."""
    return (
        *greeting_lines(),
        *argument_lines(request.arguments),
        *counted_lines("Before error"),
        *error_lines(),
        *counted_lines("After"),
    )


def resolve_exit_code(arguments: Sequence[str]) -> int:
    """
    Return the exit code requested by the first argument.

    Unparseable or out-of-range text and an empty argument list fall back to 0
    without reporting an error.
    """
    if not arguments:
        return 0
    parsed = try_parse_int(arguments[0])
    return parsed if parsed is not None else 0


def exit_code_line(exit_code: int) -> ConsoleLine:
    """Return the closing line announcing the exit code."""
    return _out(f"Expected exit code: {exit_code}")
