"""Allow running ArcTimer as a module: python -m arctimer."""

import sys

from PyQt6.QtWidgets import QApplication

from .app import ArcTimerApp
from .logging_config import setup_logging
from .settings import load_settings


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("ArcTimer")
    app.setOrganizationName("ArcTimer")

    window = ArcTimerApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
