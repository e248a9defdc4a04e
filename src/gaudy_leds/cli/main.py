"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from gaudy_leds import __version__
from gaudy_leds.cli.context import CliState, fail, parse_order
from gaudy_leds.exceptions import ConfigurationError
from gaudy_leds.models import AppConfig
from gaudy_leds.models.config import default_config_path

from .commands import LED_COMMANDS, config, list_group

logger = logging.getLogger(__name__)

_file_handler: Optional[logging.Handler] = None


def default_log_path() -> Path:
    return Path.home() / ".gaudy-leds" / "logs" / "gaudy-leds.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    global _file_handler

    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "gaudy-leds-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_path = default_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    if _file_handler is not None:
        root_logger.removeHandler(_file_handler)
        _file_handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)
    _file_handler = file_handler

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="gaudy-leds")
@click.option(
    '--order',
    callback=parse_order,
    default=None,
    help='Logical LED order as discovery indices, e.g. 2,0,1 puts device 2 first'
)
@click.option(
    '--driver-path',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Sysfs directory of the usbled driver (overrides config)'
)
@click.option(
    '--config',
    'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file to use (default: ~/.gaudy-leds/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./gaudy-leds-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    order: Optional[list[int]],
    driver_path: Optional[Path],
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    gaudy-leds - drive USB RGB LEDs handled by the Linux usbled driver.

    \b
    Examples:
      # Find out which LED is which
      gaudy-leds identify

      # All LEDs orange, or one color per LED
      gaudy-leds all orange
      gaudy-leds set red '#00ff00' 'hsv(240, 1, 1)'

      # 40% progress bar in green
      gaudy-leds progress 40 lime

      # Animate until Ctrl+C, LEDs in a custom order
      gaudy-leds --order 2,0,1 sweep rainbow

      # Show the current channel values
      gaudy-leds read
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)
    config_path = config_file or default_config_path()

    try:
        config_obj = AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        if ctx.invoked_subcommand != "config":
            logger.error(f"Failed to load config: {e.technical_message}")
            fail(e, log_path)
        # Let 'config reset' repair a broken file
        logger.warning(f"Using default config, {config_path} is invalid: {e.technical_message}")
        click.echo(f"Warning: {e.user_message}; showing defaults.", err=True)
        config_obj = AppConfig()

    ctx.obj = CliState(
        config=config_obj,
        config_path=config_path,
        log_path=log_path,
        order=order,
        driver_path=driver_path,
    )


for _command in LED_COMMANDS:
    cli.add_command(_command)
cli.add_command(list_group)
cli.add_command(config)

if __name__ == "__main__":
    cli()
