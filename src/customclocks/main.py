"""
Application Initialization
==========================
Parses the command line, sets up logging, and starts the Qt Event Loop.

Run with: python -m customclocks [--date "yyyy/MM/dd HH:mm:ss"]
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QCommandLineOption, QCommandLineParser, QCoreApplication

from customclocks.application import create_app
from customclocks.logging_config import setup_logging
from customclocks.view.main_window import MainWindow


def parse_date_option(app: QCoreApplication) -> Optional[str]:
    """Return the `--date` value, or None when it was not given."""
    parser = QCommandLineParser()
    parser.setApplicationDescription("Analog clock that ticks once per second.")
    parser.addHelpOption()
    date_option = QCommandLineOption(
        ["d", "date"],
        "Initial time, formatted as yyyy/MM/dd HH:mm:ss.",
        "date",
    )
    parser.addOption(date_option)
    parser.process(app)
    if not parser.isSet(date_option):
        return None
    return parser.value(date_option)


def main() -> int:
    """Main entry point for the application."""
    # Use logging.DEBUG to see resize/restore details during development
    setup_logging(level=logging.INFO)

    app = create_app()
    window = MainWindow(date=parse_date_option(app))
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
