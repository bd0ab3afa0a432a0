from pathlib import Path

import click
from loguru import logger

from autoeyes.cli.find_cli import find, find_all
from autoeyes.cli.overlay_cli import highlight
from autoeyes.cli.wait_cli import wait, wait_any, wait_count, wait_vanish
from autoeyes.container import Container
from autoeyes.logging_config import configure_logging
from autoeyes.orchestration.pattern_waiter import PatternWaiter
from autoeyes.services.app_data import DEFAULT_DATA_DIR


@click.group()
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    default=False,
    help="Log in detail and save every polled snapshot to the debug directory.",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory for logs and debug output.",
)
@click.option(
    "--method",
    type=click.Choice(["ccorr_normed", "ccoeff_normed", "sqdiff_normed"]),
    default="ccorr_normed",
    show_default=True,
    help="OpenCV template matching method used for scoring.",
)
@click.option(
    "--poll-interval",
    type=click.FloatRange(min=0.0),
    default=0.05,
    show_default=True,
    help="Seconds to pause between polls of wait commands.",
)
@click.option(
    "--default-timeout",
    type=click.FloatRange(min=0.0),
    default=PatternWaiter.DEFAULT_TIMEOUT,
    show_default=True,
    help="Seconds wait commands poll when --timeout is not given.",
)
def autoeyes(debug, data_dir, method, poll_interval, default_timeout):
    """AutoEyes: find reference images on screen and wait for them.

    Patterns are image files; every command searches a screen region
    (--region), a window (--window) or the whole screen.
    """

    # Create and configure DI container
    container = Container()
    container.config.data_dir.from_value(data_dir)
    container.config.debug.from_value(debug)
    container.config.match_method.from_value(method)
    container.config.poll_interval.from_value(poll_interval)
    container.config.default_timeout.from_value(default_timeout)
    container.wire()

    app_data = container.app_data()
    app_data.ensure_directories()

    ctx = click.get_current_context()
    ctx.obj = {
        "container": container,
        "app_data": app_data,
        "debug": debug,
    }

    def console_sink(msg):
        click.echo(msg, err=True, nl=False)

    configure_logging(debug, console_sink, app_data.log_file)
    logger.debug(f"Using {method} with a {poll_interval}s poll interval")


autoeyes.add_command(find)
autoeyes.add_command(find_all)
autoeyes.add_command(wait)
autoeyes.add_command(wait_count)
autoeyes.add_command(wait_any)
autoeyes.add_command(wait_vanish)
autoeyes.add_command(highlight)


if __name__ == "__main__":
    autoeyes()
