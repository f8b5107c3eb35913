from typing import Callable, Optional

from PyQt6.QtCore import Qt, QTimer

FPS = 19
FRAME_INTERVAL_MS = 1000 // FPS


class PeriodicTask:
    """
    A repeating trigger. start() arms it, stop() disarms it; the callback
    runs on the thread that owns the task, one tick at a time.
    """

    def start(self, interval_ms: int, callback: Callable[[], None]):
        raise NotImplementedError

    def stop(self):
        raise NotImplementedError

    @property
    def active(self) -> bool:
        raise NotImplementedError


class QtPeriodicTask(PeriodicTask):
    def __init__(self, parent=None):
        self._timer = QTimer(parent)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._callback: Optional[Callable[[], None]] = None
        self._timer.timeout.connect(self._fire)

    def _fire(self):
        if self._callback is not None:
            self._callback()

    def start(self, interval_ms, callback):
        self._callback = callback
        self._timer.start(interval_ms)

    def stop(self):
        self._timer.stop()
        # no callback reference while stopped
        self._callback = None

    @property
    def active(self):
        return self._timer.isActive()
