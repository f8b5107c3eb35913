from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from recorder.playback import FrameDisplay


def cv_to_qimage(img):
    h, w, ch = img.shape
    bytes_per_line = ch * w
    return QImage(img.data, w, h, bytes_per_line, QImage.Format.Format_BGR888)


class PlayerWindow(QWidget):
    def __init__(self, title="Video Player"):
        super().__init__()
        self.setWindowTitle(title)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.label = QLabel()
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.label)

        self.display = _LabelDisplay(self.label)


class _LabelDisplay(FrameDisplay):
    # Kept apart from the widget so a closed window just stops receiving frames.
    def __init__(self, label):
        self.label = label

    def show_frame(self, frame):
        try:
            self.label.setPixmap(QPixmap.fromImage(cv_to_qimage(frame.pixels)))
        except RuntimeError:
            # Underlying C++ label already deleted
            pass
