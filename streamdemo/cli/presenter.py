"""CLI presentation helpers writing lines to their target streams."""

from __future__ import annotations

from typing import Iterable

import click

from streamdemo.domain.run import ConsoleLine


class CliPresenter:
    """Render console lines on standard output or standard error."""

    def emit_line(self, line: ConsoleLine) -> None:
        """Emit one line on its stream and flush it immediately."""
        click.echo(line.text, err=line.is_error)

    def emit_lines(self, lines: Iterable[ConsoleLine]) -> None:
        """Emit multiple lines in order."""
        for line in lines:
            self.emit_line(line)

    def emit_error(self, message: str) -> None:
        """Emit one failure message on standard error."""
        click.echo(message, err=True)
