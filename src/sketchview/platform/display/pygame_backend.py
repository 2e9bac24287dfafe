"""Pygame-based DisplayBackend with headless (offscreen) support.

This module implements the SketchCanvas primitives and a DisplayBackend
using pygame. It's suitable for deterministic, headless tests by setting
the environment variable SDL_VIDEODRIVER=dummy before importing pygame.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from sketchview.platform.display.pygame_backend import PygameDisplayBackend

    backend = PygameDisplayBackend(size=(200, 200))
    canvas = backend.begin_frame()
    canvas.set_colour(0xFF0000FF)
    canvas.line(10, 10, 190, 10)
    backend.end_frame()
    backend.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Tuple

from sketchview.render.canvas import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    Color,
    DisplayBackend,
    SketchCanvas,
    rgba_from_int,
)

logger = logging.getLogger(__name__)

# Longest uninterrupted wait inside a PAUSE
PAUSE_SLICE_MS = 50

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


class _PygameCanvas(SketchCanvas):
    def __init__(self, backend: "PygameDisplayBackend") -> None:
        self._backend = backend
        self._surface = backend.surface

    def line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        pg.draw.line(self._surface, self._backend.colour, (x0, y0), (x1, y1), 1)

    def block(self, x: int, y: int, w: int, h: int) -> None:
        # Negative extents come from targets above/left of the cursor
        rect = pg.Rect(x, y, w, h)
        rect.normalize()
        self._surface.fill(self._backend.colour, rect)

    def set_colour(self, value: int) -> None:
        self._backend.colour = rgba_from_int(value)

    def show(self) -> None:
        self._backend.present()

    def pause(self, ms: int) -> None:
        """Present, then block for ``ms * pause_scale`` milliseconds.

        The wait runs in short slices and ends early once a quit or key
        event is queued; the event stays queued for the host loop.
        """
        self._backend.present()
        remaining = int(ms * self._backend.pause_scale)
        while remaining > 0:
            if pg.event.peek((pg.QUIT, pg.KEYDOWN)):
                logger.debug("pause cut short with %d ms left", remaining)
                return
            step = min(remaining, PAUSE_SLICE_MS)
            pg.time.wait(step)
            remaining -= step


class PygameDisplayBackend(DisplayBackend):
    """Pygame implementation of DisplayBackend with offscreen surface.

    Drawing always goes to an offscreen surface; when a window is created
    the surface is blitted to it on :meth:`present`. The surface keeps its
    contents between frames, so each frame draws over the previous one.
    """

    def __init__(
        self,
        size: Tuple[int, int] = (200, 200),
        *,
        create_window: bool = False,
        title: str = "sketchview",
        background: int = DEFAULT_BACKGROUND,
        foreground: int = DEFAULT_FOREGROUND,
        pause_scale: float = 1.0,
    ) -> None:
        local_pg = pg
        if local_pg is None:
            raise RuntimeError(
                "pygame is not available. "
                "Ensure it is installed and that SDL is configured."
            )

        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not local_pg.get_init():
            local_pg.init()

        self._width, self._height = int(size[0]), int(size[1])
        self.pause_scale = float(pause_scale)
        self.colour: Color = rgba_from_int(foreground)
        self._background: Color = rgba_from_int(background)
        self._window_surface = None
        if create_window and os.environ.get("SDL_VIDEODRIVER") != "dummy":
            try:
                self._window_surface = local_pg.display.set_mode(
                    (self._width, self._height)
                )
                local_pg.display.set_caption(title)
            except Exception:
                logger.warning(
                    "Window creation failed; falling back to offscreen. "
                    "Check SDL_VIDEODRIVER and display permissions."
                )
                self._window_surface = None

        self._surface = local_pg.Surface(
            (self._width, self._height), flags=local_pg.SRCALPHA
        )
        self._surface.fill(self._background)

    @property
    def surface(self) -> Any:
        return self._surface

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def clear(self) -> None:
        self._surface.fill(self._background)

    def begin_frame(self) -> SketchCanvas:
        return _PygameCanvas(self)

    def present(self) -> None:
        # If we have a window, blit the offscreen buffer and flip
        local_pg = pg
        if self._window_surface is not None and local_pg is not None:
            self._window_surface.fill(self._background)
            self._window_surface.blit(self._surface, (0, 0))
            local_pg.display.flip()

    def end_frame(self) -> None:
        self.present()

    def save_png(self, path: str) -> None:
        local_pg = pg
        if local_pg is None:  # pragma: no cover - should not happen at runtime
            raise RuntimeError("pygame is not available")
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        local_pg.image.save(self._surface, path)
