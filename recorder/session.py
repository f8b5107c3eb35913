import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from recorder.errors import (
    CaptureError,
    PersistenceError,
    Status,
    StatusKind,
    ok,
    rejected,
)
from recorder.frames import FrameSequence, save_frames_as_images
from recorder.playback import FrameDisplay, Playback
from recorder.scheduler import FRAME_INTERVAL_MS, PeriodicTask, QtPeriodicTask

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    RECORDING = "recording"


class RecordingSession:
    """
    Capture/playback lifecycle.

    IDLE --start()--> RECORDING --stop()--> IDLE (frames persisted)

    The capture task is active exactly while the state is RECORDING.
    play() works in either state and replays the frames captured so far.
    Commands never raise for expected failures; they return a Status.
    """

    def __init__(
        self,
        capture,
        output_dir="resources",
        timer_factory: Callable[[], PeriodicTask] = QtPeriodicTask,
    ):
        self.capture = capture
        self.output_dir = Path(output_dir)
        self.timer_factory = timer_factory

        self._state = SessionState.IDLE
        self._frames = FrameSequence()
        self._capture_task: Optional[PeriodicTask] = None
        self._playback: Optional[Playback] = None
        self.capture_failures = 0

    # ---------------- State ----------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_recording(self) -> bool:
        return self._state is SessionState.RECORDING

    @property
    def is_playing(self) -> bool:
        return self._playback is not None and self._playback.active

    @property
    def frames(self) -> FrameSequence:
        return self._frames

    # ---------------- Recording ----------------

    def start(self) -> Status:
        if self.is_recording:
            return rejected(StatusKind.ALREADY_RECORDING)

        self._state = SessionState.RECORDING
        self._frames.clear()
        self.capture_failures = 0

        if self._capture_task is None:
            self._capture_task = self.timer_factory()
        self._capture_task.start(FRAME_INTERVAL_MS, self.capture_tick)

        logger.info("Recording started (every %d ms)", FRAME_INTERVAL_MS)
        return ok(StatusKind.STARTED)

    def capture_tick(self):
        if not self.is_recording:
            return
        try:
            img = self.capture.grab()
        except CaptureError as e:
            self.capture_failures += 1
            logger.warning("Frame capture failed: %s", e)
            return
        self._frames.append(img)

    def stop(self) -> Status:
        if not self.is_recording:
            return rejected(StatusKind.NOT_RECORDING)

        self._capture_task.stop()
        self._state = SessionState.IDLE
        logger.info(
            "Recording stopped: %d frames, %d failed captures",
            len(self._frames), self.capture_failures,
        )

        try:
            written = save_frames_as_images(self._frames, self.output_dir)
        except PersistenceError as e:
            logger.exception("Saving frames to %s failed", self.output_dir)
            return rejected(StatusKind.PERSISTENCE_FAILED, str(e), saved=e.written)

        return ok(StatusKind.STOPPED, saved=len(written))

    # ---------------- Playback ----------------

    def play(self, display: FrameDisplay) -> Status:
        if not self._frames:
            return rejected(StatusKind.NOTHING_TO_PLAY)
        if self.is_playing:
            return rejected(StatusKind.ALREADY_PLAYING)

        self._playback = Playback(
            self._frames.snapshot(),
            display,
            self.timer_factory(),
            on_done=self._playback_done,
        )
        self._playback.start()
        return ok(StatusKind.PLAYING)

    def _playback_done(self, playback: Playback):
        if self._playback is playback:
            self._playback = None

    # ---------------- Teardown ----------------

    def close(self):
        if self._capture_task is not None:
            self._capture_task.stop()
        self._state = SessionState.IDLE
        if self._playback is not None:
            self._playback.cancel()
            self._playback = None
