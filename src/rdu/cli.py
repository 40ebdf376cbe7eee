"""CLI interface for rdu."""

import logging
from typing import Optional

import typer

from rdu import __version__
from rdu.config import Settings, get_config_file, load_settings, save_settings
from rdu.display import console, show_error
from rdu.errors import DiskUsageError
from rdu.log import configure_logging
from rdu.reporter import log_disk_usage
from rdu.scanner import normalize_path_arg

logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="rdu",
    help="Show disk usage of a file or directory tree",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"rdu version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Optional[str] = typer.Argument(
        None,
        help="The path to check disk usage on. Defaults to the current directory.",
        show_default=False,
    ),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        "-d",
        min=0,
        help="The maximum depth to show sizes of (0 = only the path itself).",
    ),
    human_readable: Optional[bool] = typer.Option(
        None,
        "--human-readable/--no-human-readable",
        "-h",
        help="Print sizes in B/K/M/G units.",
        show_default=False,
    ),
    sort: Optional[bool] = typer.Option(
        None, "--sort/--no-sort", "-s", help="Sort output by ascending size.", show_default=False
    ),
    save_defaults: bool = typer.Option(
        False, "--save-defaults", help="Store these options as defaults in the config file."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging on stderr."),
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Show the size of a file, or of a directory and everything beneath it."""
    configure_logging(verbose)
    settings = load_settings()

    # Flags given on the command line win over the config file
    settings = Settings(
        max_depth=max_depth if max_depth is not None else settings.max_depth,
        human_readable=human_readable if human_readable is not None else settings.human_readable,
        sort=sort if sort is not None else settings.sort,
    )

    if save_defaults:
        if not save_settings(settings):
            show_error(f"Could not write config file {get_config_file()}")
            raise typer.Exit(1)
        logger.info("Saved defaults to %s", get_config_file())

    root = normalize_path_arg(path if path is not None else "./")

    try:
        log_disk_usage(
            root,
            max_depth=settings.max_depth,
            human_readable=settings.human_readable,
            sort=settings.sort,
        )
    except DiskUsageError as e:
        show_error(str(e))
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
