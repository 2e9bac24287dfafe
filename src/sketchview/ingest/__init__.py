"""Sketch file sources."""

from .sketch_file import SketchFile, SketchFileUnavailable

__all__ = ["SketchFile", "SketchFileUnavailable"]
