"""Shared fixtures for streamdemo tests."""

from __future__ import annotations

import pytest


def expected_stdout(arguments: list[str], exit_code: int) -> str:
    """Build the exact stdout text the demo writes for ``arguments``."""
    lines = ["Hello World!", ""]
    if arguments:
        lines.append("Command line arguments supplied:")
        lines.extend(f"    {index}: {value}" for index, value in enumerate(arguments))
    else:
        lines.append("No command line arguments passed in.")
    lines.append("")
    lines.extend(f"Before error {index}" for index in range(10))
    lines.extend(["", ""])
    lines.extend(f"After {index}" for index in range(10))
    lines.append("")
    lines.append(f"Expected exit code: {exit_code}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove streamdemo settings inherited from the surrounding environment."""
    monkeypatch.delenv("STREAMDEMO_LOG_LEVEL", raising=False)


@pytest.fixture
def render_stdout():
    """Expose ``expected_stdout`` to tests."""
    return expected_stdout
