from typing import Sequence

import click

from streamdemo import __version__ as about
from streamdemo.application import workflows
from streamdemo.cli.config import get_logger, setup_logging
from streamdemo.cli.exit_codes import SUCCESS, USER_ERROR
from streamdemo.cli.presenter import CliPresenter
from streamdemo.config import load_settings
from streamdemo.domain.run import DemoRequest
from streamdemo.errors import ConfigurationError

# Get a logger for this module.
log = get_logger(__name__)


class PassthroughCommand(click.Command):
    """Command whose tokens all reach its arguments unparsed, ``--`` included."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # End options before the first token so no token is read as an option.
        return super().parse_args(ctx, ["--", *args])


def run_demo(arguments: Sequence[str], presenter: CliPresenter) -> int:
    """
    Write the demo transcript and return the exit code requested by the arguments.

    Parameters:
        arguments (Sequence[str]): Command-line arguments in invocation order.
        presenter (CliPresenter): Output sink for stdout and stderr lines.

    Returns:
        int: The exit code parsed from the first argument, or 0.
    """
    request = DemoRequest.from_arguments(arguments)
    log.debug("Started demo with %d argument(s)", len(request.arguments))

    presenter.emit_lines(workflows.build_transcript(request))

    exit_code = SUCCESS
    if request.has_arguments:
        exit_code = workflows.resolve_exit_code(request.arguments)
    presenter.emit_line(workflows.exit_code_line(exit_code))
    log.debug("Finished demo with exit code %d", exit_code)
    return exit_code


@click.command(
    cls=PassthroughCommand,
    help=about.__description__,
    add_help_option=False,
)
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, arguments: tuple[str, ...]):
    """
    Main entry point for the stream demo CLI.

    Loads settings, configures logging, runs the demo and exits with the code the
    first argument asks for.

    Parameters:
        ctx (click.Context): Click context.
        arguments (tuple[str, ...]): Command-line arguments passed verbatim.
    """
    presenter = CliPresenter()

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        presenter.emit_error(f"Invalid configuration: {exc}")
        ctx.exit(USER_ERROR)

    setup_logging(level=settings.log_level)
    ctx.exit(run_demo(arguments, presenter))


if __name__ == "__main__":
    main(prog_name=about.__title__)
