"""Immutable run models shared between CLI and application layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

Stream = Literal["stdout", "stderr"]


@dataclass(frozen=True, slots=True)
class DemoRequest:
    """Inputs required to execute one demo run."""

    arguments: tuple[str, ...]

    @classmethod
    def from_arguments(cls, arguments: Iterable[str]) -> DemoRequest:
        """Build a request from any iterable of raw command-line tokens."""
        return cls(arguments=tuple(arguments))

    @property
    def has_arguments(self) -> bool:
        """Return whether at least one command-line argument was supplied."""
        return bool(self.arguments)


@dataclass(frozen=True, slots=True)
class ConsoleLine:
    """One line of output bound to the stream it is written to."""

    stream: Stream
    text: str = ""

    @property
    def is_error(self) -> bool:
        """Return whether the line targets standard error."""
        return self.stream == "stderr"
