"""Command-line interface for transformdemo."""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from transformdemo import __version__
from transformdemo.core.models import DemoOptions
from transformdemo.core.printer import print_sequence
from transformdemo.runner import ApproachComplete, ApproachStarted, run_approaches

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


_OFF_VALUES = {"0", "false", "no", "off"}


def _configure_logging(verbose: str | None) -> None:
    # Any value other than an explicit "off" word turns logging on.
    if verbose is None or verbose.strip().lower() in _OFF_VALUES:
        return
    package_logger = logging.getLogger("transformdemo")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
@click.version_option(version=__version__, prog_name="transformdemo")
@click.option(
    "--verbose",
    "-v",
    is_flag=False,
    flag_value="on",
    default=None,
    help="Log each approach to stderr",
)
def cli(verbose: str | None):
    """Add 10 to [1, 2, 3, 4, 5] four different ways.

    Prints the label of each approach followed by the transformed values.
    Any other arguments are ignored.

    Example:
        transformdemo
        transformdemo --verbose
    """
    _configure_logging(verbose)

    try:
        _run_all(DemoOptions())
    except OSError as e:
        logger.error("Failed writing to standard output", exc_info=True)
        err_console.print(f"[red]✗ Failed writing output: {e}[/]")
        sys.exit(1)


def _run_all(options: DemoOptions) -> None:
    for event in run_approaches(options):
        if isinstance(event, ApproachStarted):
            click.echo(event.label)
        elif isinstance(event, ApproachComplete):
            print_sequence(event.values)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
