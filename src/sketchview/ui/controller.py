"""
Interactive viewer controller for sketchview.

Provides a ViewerController that owns the host loop: it polls pygame
input, asks the SketchPlayer for the next frame on every key press (and
optionally on an autoplay timer), and quits on escape/q or window close.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Optional

from sketchview.core.player import SketchPlayer
from sketchview.render.canvas import DisplayBackend
from sketchview.settings.schema import Settings
from sketchview.settings.values import QUIT_KEYS, REWIND_KEY

logger = logging.getLogger(__name__)

pg: Any = None
try:  # optional import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


class ViewerController:
    """Owns the redraw loop and input handling for one open sketch."""

    def __init__(
        self,
        *,
        display: DisplayBackend,
        player: SketchPlayer,
        settings: Optional[Settings] = None,
    ) -> None:
        self._display = display
        self._player = player
        self._settings = settings if settings is not None else Settings()
        self._running = False
        self._last_advance = 0.0

    @property
    def player(self) -> SketchPlayer:
        return self._player

    @property
    def running(self) -> bool:
        return self._running

    def process_key(self, key: Optional[str]) -> bool:
        """Handle one tick of input and redraw.

        *key* is a pygame key name, or None for the initial draw and timer
        ticks. Returns whether playback should continue.
        """
        if key in QUIT_KEYS:
            return False
        if self._player.reload_if_changed():
            self._display.clear()
        elif key == REWIND_KEY:
            self._player.rewind()
            self._display.clear()
        self._draw_next()
        return True

    def _draw_next(self) -> None:
        player = self._player
        if player.finished:
            if player.is_animation and not self._settings.loop:
                return
            player.rewind()
        canvas = self._display.begin_frame()
        player.advance(canvas)
        self._display.end_frame()
        self._last_advance = time.monotonic()

    def stop(self) -> None:
        self._running = False

    async def run(self) -> None:
        self._running = True
        dt_target = 1.0 / max(1e-6, float(self._settings.target_fps))
        if pg is not None and not pg.get_init():
            pg.init()

        if not self.process_key(None):
            self._running = False
        try:
            while self._running:
                self._process_input()
                self._autoplay_tick()
                await asyncio.sleep(dt_target)
        finally:
            self._running = False
            logger.info("viewer stopped after %d frames", self._player.frames_played)

    # Internals ----------------------------------------------------------
    def _autoplay_tick(self) -> None:
        interval = self._settings.autoplay_ms
        if interval is None or not self._running:
            return
        if (time.monotonic() - self._last_advance) * 1000.0 >= interval:
            self.process_key(None)

    def _process_input(self) -> None:
        if pg is None:
            return
        for ev in pg.event.get():
            if ev.type == pg.QUIT:
                self.stop()
            elif ev.type == pg.KEYDOWN:
                if not self.process_key(pg.key.name(ev.key)):
                    self.stop()
