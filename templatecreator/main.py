import logging
import os
import sys

from PyQt6 import QtWidgets

from .ui.main_window import APP_TITLE, MainWindow

logger = logging.getLogger(__name__)

if sys.platform == "win32":
    try:
        import ctypes
        ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(
            "TemplateCreator.App")
    except (AttributeError, OSError) as exc:
        logger.debug("Could not set AppUserModelID: %s", exc)


def configure_logging() -> None:
    level_name = os.getenv("TEMPLATE_CREATOR_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    configure_logging()
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
