import logging
from typing import Callable, Optional, Sequence

from recorder.frames import Frame
from recorder.scheduler import FRAME_INTERVAL_MS, PeriodicTask

logger = logging.getLogger(__name__)


class FrameDisplay:
    """Surface that shows one frame at a time."""

    def show_frame(self, frame: Frame):
        raise NotImplementedError

    def finished(self):
        pass


class Playback:
    def __init__(
        self,
        frames: Sequence[Frame],
        display: FrameDisplay,
        task: PeriodicTask,
        on_done: Optional[Callable[["Playback"], None]] = None,
    ):
        self.frames = frames
        self.display = display
        self.task = task
        self.on_done = on_done
        self.cursor = 0

    @property
    def active(self) -> bool:
        return self.task.active

    def start(self):
        logger.info("Playback started (%d frames)", len(self.frames))
        self.task.start(FRAME_INTERVAL_MS, self.tick)

    def tick(self):
        if self.cursor >= len(self.frames):
            self._finish()
            return
        self.display.show_frame(self.frames[self.cursor])
        self.cursor += 1

    def cancel(self):
        if self.task.active:
            self.task.stop()
            logger.info("Playback cancelled at frame %d", self.cursor)

    def _finish(self):
        self.task.stop()
        logger.info("Playback finished")
        self.display.finished()
        if self.on_done:
            self.on_done(self)
