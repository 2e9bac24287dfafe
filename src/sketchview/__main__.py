"""Console entrypoint for the sketchview application.

This module delegates to :mod:`sketchview.cli` so that running
``python -m sketchview`` or the installed ``sketchview`` console script
executes the same application code.
"""

from __future__ import annotations

from sketchview.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`sketchview.cli.main`)."""
    cli_main()


if __name__ == "__main__":
    main()
