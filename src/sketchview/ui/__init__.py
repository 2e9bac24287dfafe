"""UI package: the interactive viewer controller."""

from .controller import ViewerController  # re-export for convenience

__all__ = ["ViewerController"]
