import numpy as np
import pytest

from recorder.errors import CaptureError
from recorder.playback import FrameDisplay
from recorder.scheduler import PeriodicTask
from recorder.session import RecordingSession


class FakeTimer(PeriodicTask):
    """Manually driven periodic task; fire() delivers one tick."""

    def __init__(self):
        self.interval_ms = None
        self.callback = None
        self._active = False
        self.starts = 0

    def start(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self._active = True
        self.starts += 1

    def stop(self):
        self._active = False

    @property
    def active(self):
        return self._active

    def fire(self, times=1):
        for _ in range(times):
            if self._active:
                self.callback()


class FakeCapture:
    """Returns a distinct solid-colour frame per grab; can be told to fail."""

    def __init__(self, shape=(4, 6, 3)):
        self.shape = shape
        self.grabs = 0
        self.fail_next = 0

    def grab(self):
        if self.fail_next:
            self.fail_next -= 1
            raise CaptureError("access denied")
        img = np.full(self.shape, self.grabs % 256, dtype=np.uint8)
        self.grabs += 1
        return img


class RecordingDisplay(FrameDisplay):
    def __init__(self):
        self.shown = []
        self.done = False

    def show_frame(self, frame):
        self.shown.append(frame)

    def finished(self):
        self.done = True


@pytest.fixture
def timers():
    return []


@pytest.fixture
def timer_factory(timers):
    def make():
        t = FakeTimer()
        timers.append(t)
        return t
    return make


@pytest.fixture
def capture():
    return FakeCapture()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def session(capture, timer_factory, tmp_path):
    return RecordingSession(
        capture,
        output_dir=tmp_path / "resources",
        timer_factory=timer_factory,
    )
