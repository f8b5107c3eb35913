import logging

from PyQt6.QtWidgets import (
    QHBoxLayout, QMainWindow, QMessageBox, QPushButton, QWidget
)

from capture.screen_capture import ScreenCapture
from config.settings import RecorderSettings
from recorder.session import RecordingSession
from ui.player_window import PlayerWindow

logger = logging.getLogger(__name__)


class RecorderWindow(QMainWindow):
    def __init__(self, settings: RecorderSettings):
        super().__init__()
        self.settings = settings
        self.setWindowTitle(settings.window_title)
        self.resize(300, 200)

        self.capture = ScreenCapture(monitor=settings.monitor)
        self.session = RecordingSession(self.capture, output_dir=settings.output_dir)
        self.player = None

        self._build_ui()

    # ---------------- UI ----------------

    def _build_ui(self):
        central = QWidget()
        layout = QHBoxLayout(central)
        self.setCentralWidget(central)

        self.start_btn = QPushButton("Start Recording")
        self.start_btn.clicked.connect(self.start_recording)
        self.stop_btn = QPushButton("Stop Recording")
        self.stop_btn.clicked.connect(self.stop_recording)
        self.play_btn = QPushButton("Play Recording")
        self.play_btn.clicked.connect(self.play_recording)

        layout.addWidget(self.start_btn)
        layout.addWidget(self.stop_btn)
        layout.addWidget(self.play_btn)

    def _report(self, status):
        if status.ok:
            QMessageBox.information(self, self.settings.window_title, status.message)
        else:
            QMessageBox.warning(self, self.settings.window_title, status.message)

    # ---------------- Commands ----------------

    def start_recording(self):
        self._report(self.session.start())

    def stop_recording(self):
        self._report(self.session.stop())

    def play_recording(self):
        player = PlayerWindow(self.settings.player_title)
        status = self.session.play(player.display)
        if not status.ok:
            player.deleteLater()
            self._report(status)
            return

        self.player = player
        player.destroyed.connect(self._player_closed)
        player.showMaximized()

    def _player_closed(self):
        self.player = None

    # ---------------- Teardown ----------------

    def closeEvent(self, event):
        self.session.close()
        self.capture.close()
        if self.player is not None:
            self.player.close()
        super().closeEvent(event)
