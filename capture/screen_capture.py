import logging

import cv2
import mss
import numpy as np
from mss.exception import ScreenShotError

from recorder.errors import CaptureError

logger = logging.getLogger(__name__)


class ScreenCapture:
    """Full-screen grabs through mss. monitor=0 is all monitors combined."""

    def __init__(self, monitor=1):
        self.monitor_index = monitor
        self.sct = None

    def _monitor(self):
        if self.sct is None:
            try:
                self.sct = mss.mss()
            except ScreenShotError as e:
                raise CaptureError(f"Screen capture unavailable: {e}") from e

        try:
            monitors = self.sct.monitors
        except ScreenShotError as e:
            raise CaptureError(f"Cannot enumerate monitors: {e}") from e

        if not 0 <= self.monitor_index < len(monitors):
            raise CaptureError(
                f"Monitor {self.monitor_index} not found ({len(monitors) - 1} available)"
            )
        return monitors[self.monitor_index]

    def grab(self) -> np.ndarray:
        monitor = self._monitor()
        try:
            img = np.array(self.sct.grab(monitor))
        except ScreenShotError as e:
            raise CaptureError(str(e)) from e
        return cv2.cvtColor(img, cv2.COLOR_BGRA2BGR)

    def close(self):
        if self.sct is not None:
            self.sct.close()
            self.sct = None
