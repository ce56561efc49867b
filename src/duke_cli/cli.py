"""Command-line entry point: the interactive Duke prompt."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterator, Optional

import click
from rich.console import Console

from .config import CONFIG_ENV_VAR, ConfigModel, load_config
from .session import Session
from .theme import get_console, print_reply, show_goodbye, show_welcome

logger = logging.getLogger(__name__)


def configure_logging(config: ConfigModel, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def read_commands(console: Console) -> Iterator[str]:
    """Yield input lines until end of input or Ctrl-C."""
    while True:
        try:
            line = console.input()
        except (KeyboardInterrupt, EOFError) as e:
            logger.debug("Input closed: %s", type(e).__name__)
            return
        yield line


def run_session(session: Session, console: Console, config: ConfigModel) -> None:
    """Feed lines to ``session`` until ``bye`` or end of input."""
    show_welcome(console, config)
    for line in read_commands(console):
        if session.is_terminating(line):
            break
        print_reply(console, session.handle(line), config)
    show_goodbye(console, config)


@click.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              envvar=CONFIG_ENV_VAR, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--no-banner", is_flag=True, help="Skip the logo banner")
def main(config_path: Optional[Path], verbose: bool, no_banner: bool):
    """Duke - an interactive task tracker.

    Type commands at the prompt: list, todo, deadline ... /by ...,
    event ... /at ..., mark N, unmark N. Type bye to quit.
    """
    config = load_config(config_path.expanduser() if config_path else None)
    if no_banner:
        config = replace(config, show_banner=False)
    configure_logging(config, verbose)

    run_session(Session(), get_console(config), config)


if __name__ == "__main__":  # pragma: no cover
    main()
