"""Runtime configuration helpers.

Small aggregator that merges the persisted Settings store with CLI
overrides into the Settings used by the viewer for this session.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .settings.schema import Settings
from .settings.store import SettingsStore

# argparse attribute -> Settings field
_CLI_OVERRIDES = {
    "fps": "target_fps",
    "pause_scale": "pause_scale",
    "autoplay_ms": "autoplay_ms",
    "loop": "loop",
    "background": "background",
    "foreground": "foreground",
}


@dataclass(slots=True)
class RuntimeConfig:
    settings: Settings
    headless: bool = False
    title: str = "sketchview"


def make_runtime_config(*, args: Optional[object] = None) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and optional CLI *args*.

    Rules:
    - Persisted Settings (SettingsStore.load()) provide user defaults.
    - Attributes on *args* (argparse.Namespace-like) that are not None
      override them for the current session only.
    - The merged values are validated again, so a bad override raises
      pydantic's ValidationError.
    """
    settings = SettingsStore.load()
    if args is None:
        return RuntimeConfig(settings=settings)

    overrides: dict[str, Any] = {}
    size = getattr(args, "size", None)
    if size is not None:
        overrides["width"], overrides["height"] = size
    for attr, field in _CLI_OVERRIDES.items():
        value = getattr(args, attr, None)
        if value is not None:
            overrides[field] = value

    if overrides:
        settings = Settings.model_validate({**settings.model_dump(), **overrides})

    filename = getattr(args, "file", None)
    return RuntimeConfig(
        settings=settings,
        headless=bool(getattr(args, "headless", False)),
        title=f"sketchview - {filename}" if filename else "sketchview",
    )
