from pathlib import Path
from typing import Any, List, Optional, Sequence

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPixmap
from PyQt5.QtWidgets import (
    QButtonGroup,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from HC_Libs.HistogramLib.histogram_models import HistogramMode
from HC_Libs.HistogramLib.pixel_sampler import STANDARD_IMAGE_FILTER, ImageSource
from HC_Libs.HistogramLib.reference_images import build_reference_pair
from HC_Libs.HistogramLib.render_surface import PillowSurface
from HC_Libs.SessionLib.comparison_session import ComparisonSession, SlotState
from HC_Libs.SessionLib.histogram_loader import HistogramLoader
from HC_Libs.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    HISTOGRAM_VIEW_HEIGHT,
    PREVIEW_MIN_SIZE,
    SLOT_COUNT,
)

_STATUS_TEXT = {
    SlotState.EMPTY: "No image selected",
    SlotState.DECODING: "Loading...",
    SlotState.READY: "Ready",
    SlotState.FAILED: "No histogram",
}


def _source_name(source: Any) -> str:
    if isinstance(source, (str, Path)):
        return Path(source).name
    return Path(getattr(source, "name", "image")).name


class HistogramCompareWindow(QMainWindow):
    # Carries a zero-argument callback from a decode thread to the GUI thread
    decode_finished = pyqtSignal(object)

    def __init__(self, default_images: Optional[Sequence[Optional[ImageSource]]] = None) -> None:
        super().__init__()
        self.setWindowTitle("Histogram Compare")
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.session = ComparisonSession()
        self.surface = PillowSurface(DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT)
        self.loader = HistogramLoader(
            self.session,
            max_workers=SLOT_COUNT,
            dispatch=self.decode_finished.emit,
        )

        self._build_ui()
        self._connect_signals()

        self.session.add_listener(self.on_session_changed)
        self.refresh_histogram()

        # Without explicit images the window opens on the built-in flash pair
        if not default_images:
            default_images = build_reference_pair()

        for index, source in enumerate(default_images):
            if source is not None and index < SLOT_COUNT:
                self.load_slot(index, source)

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QVBoxLayout(central)

        mode_row = QHBoxLayout()
        self.radio_value = QRadioButton("Value")
        self.radio_color = QRadioButton("Color")
        self.radio_value.setChecked(self.session.mode is HistogramMode.BRIGHTNESS)
        self.radio_color.setChecked(self.session.mode is HistogramMode.COLOR)
        self.mode_group = QButtonGroup(self)
        self.mode_group.addButton(self.radio_value)
        self.mode_group.addButton(self.radio_color)
        mode_row.addWidget(self.radio_value)
        mode_row.addWidget(self.radio_color)
        mode_row.addStretch(1)

        slots_row = QHBoxLayout()
        self.preview_labels: List[QLabel] = []
        self.status_labels: List[QLabel] = []
        self.load_buttons: List[QPushButton] = []

        for index in range(SLOT_COUNT):
            column = QVBoxLayout()

            preview = QLabel(f"Original image {index + 1}")
            preview.setAlignment(Qt.AlignCenter)
            preview.setMinimumSize(PREVIEW_MIN_SIZE, PREVIEW_MIN_SIZE)
            preview.setStyleSheet("border: 1px solid #888;")

            status = QLabel(_STATUS_TEXT[SlotState.EMPTY])
            button = QPushButton(f"Load Image {index + 1}")

            column.addWidget(preview, stretch=1)
            column.addWidget(status)
            column.addWidget(button)
            slots_row.addLayout(column)

            self.preview_labels.append(preview)
            self.status_labels.append(status)
            self.load_buttons.append(button)

        self.label_histogram = QLabel()
        self.label_histogram.setAlignment(Qt.AlignCenter)
        self.label_histogram.setMinimumHeight(HISTOGRAM_VIEW_HEIGHT)
        self.label_histogram.setStyleSheet("border: 1px solid #888;")

        root.addLayout(mode_row)
        root.addLayout(slots_row, stretch=2)
        root.addWidget(QLabel("Combined Histogram"))
        root.addWidget(self.label_histogram, stretch=1)

    def _connect_signals(self) -> None:
        self.decode_finished.connect(self._run_callback)
        self.radio_value.toggled.connect(self.on_mode_toggled)
        for index, button in enumerate(self.load_buttons):
            button.clicked.connect(lambda _checked=False, i=index: self.pick_image(i))

    def _run_callback(self, callback: Any) -> None:
        callback()

    def pick_image(self, index: int) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            f"Select Image {index + 1}",
            "",
            STANDARD_IMAGE_FILTER,
        )
        if not file_path:
            return

        self.load_slot(index, Path(file_path))

    def load_slot(self, index: int, source: ImageSource) -> None:
        self._set_preview(self.preview_labels[index], source)
        self.loader.load(index, source)

    def on_mode_toggled(self, value_checked: bool) -> None:
        mode = HistogramMode.BRIGHTNESS if value_checked else HistogramMode.COLOR
        if mode is not self.session.mode:
            self.session.set_mode(mode)

    def on_session_changed(self, session: ComparisonSession) -> None:
        for index, slot in enumerate(session.slots):
            text = _STATUS_TEXT[slot.state]
            if slot.source is not None:
                text = f"{_source_name(slot.source)}: {text}"
            if slot.state is SlotState.FAILED and slot.error:
                self.status_labels[index].setToolTip(slot.error)
            else:
                self.status_labels[index].setToolTip("")
            self.status_labels[index].setText(text)

        self.refresh_histogram()

    def refresh_histogram(self) -> None:
        self.session.render(self.surface)

        pixmap = QPixmap()
        if not pixmap.loadFromData(self.surface.to_png_bytes(), "PNG"):
            self.label_histogram.setText("Histogram preview failed")
            return

        self.label_histogram.setPixmap(pixmap)

    def _set_preview(self, label: QLabel, source: ImageSource) -> None:
        if isinstance(source, (str, Path)):
            pixmap = QPixmap(str(source))
        else:
            # Leave the stream where the decoder expects it
            position = source.tell()
            pixmap = QPixmap()
            pixmap.loadFromData(source.read())
            source.seek(position)
        if pixmap.isNull():
            label.setText("Preview failed")
            return

        scaled = pixmap.scaled(
            label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        label.setPixmap(scaled)

    def closeEvent(self, event: Any) -> None:
        self.loader.shutdown(wait=False)
        super().closeEvent(event)
