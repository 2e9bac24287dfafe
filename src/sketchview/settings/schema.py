"""Pydantic model for viewer settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .values import COLOUR_DEFAULTS, MAX_WINDOW_PX, PLAYBACK_DEFAULTS, WINDOW_DEFAULTS


class Settings(BaseModel):
    """Viewer settings persisted to disk.

    Parameters
    ----------
    width, height: Window size in pixels.
    background: Surface fill colour as ``0xRRGGBBAA``.
    foreground: Initial drawing colour as ``0xRRGGBBAA``.
    target_fps: Host loop tick rate.
    pause_scale: Multiplier applied to PAUSE durations; 0 skips pauses.
    autoplay_ms: When set, advance to the next frame every *autoplay_ms*
        milliseconds in addition to key presses.
    loop: Restart an animation from its first frame after the last one.
    """

    width: int = Field(default=WINDOW_DEFAULTS["width"])
    height: int = Field(default=WINDOW_DEFAULTS["height"])
    background: int = Field(default=COLOUR_DEFAULTS["background"])
    foreground: int = Field(default=COLOUR_DEFAULTS["foreground"])
    target_fps: float = Field(default=PLAYBACK_DEFAULTS["target_fps"])
    pause_scale: float = Field(default=PLAYBACK_DEFAULTS["pause_scale"])
    autoplay_ms: int | None = Field(default=None)
    loop: bool = Field(default=True)

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0 or v > MAX_WINDOW_PX:
            raise ValueError(f"window size must be in 1..{MAX_WINDOW_PX} px")
        return v

    @field_validator("background", "foreground")
    @classmethod
    def _chk_colour(cls, v: int) -> int:
        if not 0 <= v <= 0xFFFFFFFF:
            raise ValueError("colour must be a 32-bit 0xRRGGBBAA value")
        return v

    @field_validator("target_fps")
    @classmethod
    def _chk_fps(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("target_fps must be > 0")
        return v

    @field_validator("pause_scale")
    @classmethod
    def _chk_pause_scale(cls, v: float) -> float:
        if v < 0:
            raise ValueError("pause_scale must be >= 0")
        return v

    @field_validator("autoplay_ms")
    @classmethod
    def _chk_autoplay(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("autoplay_ms must be > 0 when set")
        return v
