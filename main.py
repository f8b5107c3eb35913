import logging
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from config.settings import load_settings
from ui.recorder_window import RecorderWindow


def main():
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    settings = load_settings(config_path)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Frames will be saved to %s", settings.output_dir)

    app = QApplication(sys.argv[:1])
    win = RecorderWindow(settings)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
