import logging
import sys
from pathlib import Path

from PyQt5.QtWidgets import QApplication

from HC_Libs.ViewerLib.histogram_compare_window import HistogramCompareWindow


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Images for slot 1 and slot 2; the built-in flash pair is used when none are given
    default_images = [Path(arg) for arg in sys.argv[1:3]]

    app = QApplication(sys.argv)
    window = HistogramCompareWindow(default_images)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
