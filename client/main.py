"""
Desktop entry point.

Usage:
    python -m client.main            # launcher with both apps
    python -m client.main dice       # dice roller only
    python -m client.main tip --locale de_DE
"""

import sys
import argparse
import logging
from typing import Optional

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QLocale

from client.config import settings
from client.gui import MainWindow
from engine import Dice
from shared.constants import STRINGS
from shared.enums import AppScreen


logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, defaulting to the loaded settings."""
    parser = argparse.ArgumentParser(description=STRINGS["app_name"])
    parser.add_argument(
        "app", nargs="?", choices=[app.value for app in AppScreen],
        help="App to open (default: both, in tabs)"
    )
    parser.add_argument("--seed", type=int, default=settings.dice_seed,
                        help="Seed for reproducible dice rolls")
    parser.add_argument("--locale", default=settings.locale_name,
                        help="Locale for number formatting, e.g. de_DE")
    parser.add_argument("--log-level", default=settings.log_level,
                        help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level.upper())
    
    app = QApplication(sys.argv[:1])
    app.setApplicationName(STRINGS["app_name"])
    
    locale = QLocale(args.locale) if args.locale else None
    screen = AppScreen(args.app) if args.app else None
    logger.info("Starting %s (seed=%s, locale=%s)",
                STRINGS["app_name"], args.seed, args.locale or "system")
    
    window = MainWindow(screen, dice=Dice(args.seed), locale=locale)
    window.show()
    
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
