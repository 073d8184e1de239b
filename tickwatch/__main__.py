"""Allow running Tickwatch as a module: python -m tickwatch."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .settings import load_settings
from .viewmodel import TimerViewModel
from .ui import TimerWindow


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()

    app = QApplication(sys.argv)
    app.setApplicationName("Tickwatch")
    app.setOrganizationName("Tickwatch")

    view_model = TimerViewModel(settings, parent=app)
    window = TimerWindow(view_model)
    window.show()
    logging.getLogger("tickwatch").info("Tickwatch ready!")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
