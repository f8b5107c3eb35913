from dataclasses import dataclass
from enum import Enum
from typing import Optional


# -----------------------------
# Exceptions
# -----------------------------

class CaptureError(RuntimeError):
    """Screen grab failed (access denied, bad monitor, display gone)."""


class PersistenceError(OSError):
    """Writing frames to disk failed part way or up front."""

    def __init__(self, message, written=0):
        super().__init__(message)
        self.written = written  # frames already on disk


# -----------------------------
# Command results
# -----------------------------

class StatusKind(Enum):
    STARTED = "started"
    STOPPED = "stopped"
    PLAYING = "playing"
    ALREADY_RECORDING = "already_recording"
    NOT_RECORDING = "not_recording"
    NOTHING_TO_PLAY = "nothing_to_play"
    ALREADY_PLAYING = "already_playing"
    PERSISTENCE_FAILED = "persistence_failed"


MESSAGES = {
    StatusKind.STARTED: "Recording started!",
    StatusKind.STOPPED: "Recording stopped and saved!",
    StatusKind.PLAYING: "Playing recording",
    StatusKind.ALREADY_RECORDING: "Recording is already in progress!",
    StatusKind.NOT_RECORDING: "Recording is not started yet!",
    StatusKind.NOTHING_TO_PLAY: "No recording to play!",
    StatusKind.ALREADY_PLAYING: "Playback is already running!",
    StatusKind.PERSISTENCE_FAILED: "Recording stopped, but saving frames failed",
}


@dataclass(frozen=True)
class Status:
    ok: bool
    kind: StatusKind
    message: str
    saved: Optional[int] = None

    def __str__(self):
        return self.message


def ok(kind: StatusKind, saved: Optional[int] = None) -> Status:
    return Status(True, kind, MESSAGES[kind], saved)


def rejected(kind: StatusKind, detail: str = "", saved: Optional[int] = None) -> Status:
    message = MESSAGES[kind]
    if detail:
        message = f"{message}: {detail}"
    return Status(False, kind, message, saved)
