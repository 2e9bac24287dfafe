"""Centralized default values for the viewer.

Window geometry, colours and key bindings used as defaults by the
settings schema and the UI controller.
"""

from __future__ import annotations

from typing import Dict, FrozenSet

WINDOW_DEFAULTS: Dict[str, int] = {
    "width": 200,
    "height": 200,
}

COLOUR_DEFAULTS: Dict[str, int] = {
    # 0xRRGGBBAA
    "background": 0x000000FF,
    "foreground": 0xFFFFFFFF,
}

PLAYBACK_DEFAULTS: Dict[str, float] = {
    "target_fps": 30.0,
    "pause_scale": 1.0,
}

# pygame key names that end the viewer
QUIT_KEYS: FrozenSet[str] = frozenset({"escape", "q"})

# pygame key name that rewinds to the first frame
REWIND_KEY = "r"

MAX_WINDOW_PX = 4096
