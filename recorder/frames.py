import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple

import cv2
import numpy as np

from recorder.errors import PersistenceError

logger = logging.getLogger(__name__)

FRAME_NAME = "frame_{index}.png"


# -----------------------------
# Frame
# -----------------------------

@dataclass(frozen=True, eq=False)
class Frame:
    pixels: np.ndarray        # H x W x 3, BGR uint8, read-only
    index: int                # capture order, zero-based

    @classmethod
    def from_array(cls, img: np.ndarray, index: int) -> "Frame":
        pixels = np.ascontiguousarray(img).copy()
        pixels.setflags(write=False)
        return cls(pixels=pixels, index=index)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def filename(self) -> str:
        return FRAME_NAME.format(index=self.index)


# -----------------------------
# Frame sequence
# -----------------------------

class FrameSequence:
    """Capture-ordered frames of one recording."""

    def __init__(self):
        self._frames: List[Frame] = []

    def append(self, img: np.ndarray) -> Frame:
        frame = Frame.from_array(img, index=len(self._frames))
        self._frames.append(frame)
        return frame

    def clear(self):
        self._frames.clear()

    def snapshot(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    def __len__(self):
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __getitem__(self, idx) -> Frame:
        return self._frames[idx]

    def __bool__(self):
        return bool(self._frames)


# -----------------------------
# Persistence
# -----------------------------

def save_frames_as_images(frames, output_dir) -> List[Path]:
    """
    Write every frame as output_dir/frame_<index>.png in capture order.

    Existing files with the same name are overwritten. On failure the
    files written so far stay on disk.

    Returns:
        list of written paths
    """
    out = Path(output_dir)
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Cannot create output directory {out}: {e}") from e

    written = []
    for frame in frames:
        path = out / frame.filename
        try:
            ok = cv2.imwrite(str(path), frame.pixels)
        except cv2.error as e:
            raise PersistenceError(f"Failed to write {path}: {e}", written=len(written)) from e
        if not ok:
            raise PersistenceError(f"Failed to write {path}", written=len(written))
        written.append(path)

    logger.info("Saved %d frames to %s", len(written), out)
    return written
