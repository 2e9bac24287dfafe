"""Frame-by-frame replay of a sketch byte stream.

:func:`play_frame` replays instructions from ``state.start`` until the
stream ends or a NEXTFRAME instruction is reached, and records where the
next pass resumes. :class:`SketchPlayer` owns one file's stream and state
for the host loop.

Usage example:

    player = SketchPlayer(SketchFile("anim.sk"))
    canvas = backend.begin_frame()
    more = player.advance(canvas)
    backend.end_frame()
"""

from __future__ import annotations

import logging

from sketchview.core.executor import apply
from sketchview.core.state import DrawingState
from sketchview.ingest.sketch_file import SketchFile
from sketchview.render.canvas import SketchCanvas

__all__ = ["play_frame", "SketchPlayer"]

logger = logging.getLogger(__name__)


def play_frame(stream: bytes, state: DrawingState, canvas: SketchCanvas) -> bool:
    """Replay one frame of *stream* starting at ``state.start``.

    Returns True when the pass stopped at a frame boundary, False when it
    ran off the end of the stream. In the latter case ``state.start`` is
    left at ``len(stream)`` so further calls replay nothing until the
    caller rewinds.
    """
    hit_boundary = False
    i = state.start
    n = len(stream)
    while i < n:
        apply(state, canvas, stream[i])
        if state.end:
            state.start = i + 1
            state.end = False
            hit_boundary = True
            break
        i += 1
    else:
        state.start = max(state.start, n)

    state.reset_pen()
    canvas.show()
    return hit_boundary


class SketchPlayer:
    """Owns the cached stream and DrawingState of one open sketch file."""

    def __init__(self, source: SketchFile, state: DrawingState | None = None) -> None:
        self._source = source
        self._state = state if state is not None else DrawingState()
        self._stream = source.read()
        self._frames = 0

    @property
    def state(self) -> DrawingState:
        return self._state

    @property
    def stream(self) -> bytes:
        return self._stream

    @property
    def frames_played(self) -> int:
        return self._frames

    @property
    def finished(self) -> bool:
        """True once the replay has passed the end of the stream."""
        return self._state.start >= len(self._stream)

    @property
    def is_animation(self) -> bool:
        """True if at least one frame boundary has been seen."""
        return self._frames > 0

    def rewind(self) -> None:
        self._state.reset()

    def reload_if_changed(self) -> bool:
        """Re-read the backing file if it changed; rewinds on reload."""
        if not self._source.changed():
            return False
        self._stream = self._source.read()
        self.rewind()
        self._frames = 0
        logger.info("reloaded %s", self._source.path)
        return True

    def advance(self, canvas: SketchCanvas) -> bool:
        """Play the next frame onto *canvas*; see :func:`play_frame`."""
        more = play_frame(self._stream, self._state, canvas)
        if more:
            self._frames += 1
        logger.debug(
            "frame pass done more=%s start=%d/%d",
            more,
            self._state.start,
            len(self._stream),
        )
        return more
