#!/usr/bin/env python3
"""
Edge WFC - edge-matched Wave Function Collapse tile generator
"""

import sys
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from edgewfc.logging_config import setup_logging
from edgewfc.ui import MainWindow


def main():
    setup_logging()

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Edge WFC")
    app.setApplicationVersion("1.0.0")
    app.setStyle("Fusion")

    window = MainWindow()
    window.show()

    # Optional config path on the command line
    if len(sys.argv) > 1:
        window.load_config_file(sys.argv[1])

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
