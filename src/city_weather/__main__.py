#!/usr/bin/env python
"""
Main entry point for the City Weather Application.

With no arguments the Rich interactive UI is launched; any arguments are
handed to the Typer command-line interface.
"""

import sys
import logging

from .core.config_service import ConfigService
from .core.exceptions import WeatherAppError

logger = logging.getLogger(__name__)


def run_rich_ui(config: ConfigService):
    """Run the Rich-based interactive UI."""
    from .core.app import WeatherApp
    from .ui.rich_ui import RichUI
    ui = RichUI(WeatherApp.from_config(config))
    ui.run()


def run_typer_cli(args=None):
    """Run the Typer-based command-line interface."""
    from .ui.typer_cli import TyperCLI
    cli = TyperCLI()
    cli.run(args)


def detect_ui_mode(args) -> str:
    """Detect which UI mode to use based on arguments."""
    if len(args) > 1 and args[1] != "interactive":
        return 'typer'
    return 'rich'


def main() -> None:
    """Main entry point for the City Weather Application."""
    try:
        config = ConfigService()
        config.setup_logging()
        logger.debug("City Weather application started")

        ui_mode = detect_ui_mode(sys.argv)
        logger.debug(f"Selected UI mode: {ui_mode}")

        if ui_mode == 'rich':
            run_rich_ui(config)
        else:
            run_typer_cli(sys.argv[1:])

    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        print("\nGoodbye!")
        sys.exit(0)
    except WeatherAppError as e:
        logger.error(f"City Weather error: {e}")
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
