"""Command-line interface for sketchview.

``sketchview FILE`` opens a window and draws the sketch; each key press
replays the next frame of an animated sketch. ``--trace``,
``--disassemble`` and ``--headless`` run without a window.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Optional, Tuple

from pydantic import ValidationError

from sketchview import __version__
from sketchview.config import RuntimeConfig, make_runtime_config
from sketchview.core.player import SketchPlayer
from sketchview.ingest.sketch_file import SketchFile, SketchFileUnavailable
from sketchview.render.canvas import SketchCanvas
from sketchview.render.trace import TraceCanvas
from sketchview.settings.store import SettingsStore
from sketchview.tools.disassemble import disassemble

logger = logging.getLogger(__name__)

USAGE = "Use sketchview file"


def _parse_size(s: str) -> Tuple[int, int]:
    try:
        w, h = s.lower().split("x", 1)
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {s!r}") from None


def _parse_colour(s: str) -> int:
    try:
        return int(s.removeprefix("#"), 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected RRGGBBAA hex, got {s!r}") from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sketchview", description="Viewer for .sk sketch files"
    )
    p.add_argument("files", nargs="*", metavar="file", help="sketch file to view")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--headless",
        action="store_true",
        help="Draw without a window (use with --out to save the result)",
    )
    p.add_argument("--out", type=str, default=None, help="Save final image as PNG")
    p.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Number of frames to play in headless/trace mode (default: all)",
    )
    p.add_argument(
        "--trace",
        action="store_true",
        help="Print drawing primitive calls instead of drawing",
    )
    p.add_argument(
        "--disassemble",
        action="store_true",
        help="Print one decoded instruction per byte and exit",
    )
    p.add_argument("--size", type=_parse_size, default=None, help="Window WxH")
    p.add_argument("--fps", type=float, default=None, help="Host loop tick rate")
    p.add_argument(
        "--pause-scale",
        dest="pause_scale",
        type=float,
        default=None,
        help="Multiplier for PAUSE durations (0 disables pauses)",
    )
    p.add_argument(
        "--autoplay-ms",
        dest="autoplay_ms",
        type=int,
        default=None,
        help="Advance frames automatically every N milliseconds",
    )
    p.add_argument(
        "--loop",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Restart animations after the last frame",
    )
    p.add_argument("--background", type=_parse_colour, default=None)
    p.add_argument("--foreground", type=_parse_colour, default=None)
    p.add_argument(
        "--save-settings",
        dest="save_settings",
        action="store_true",
        help="Persist the merged settings as the new defaults",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments; exits with status 1 unless exactly one file."""
    args = build_parser().parse_args(argv)
    if args.version:
        return args
    if len(args.files) != 1:
        print(USAGE)
        sys.exit(1)
    args.file = args.files[0]
    if args.headless and args.pause_scale is None:
        args.pause_scale = 0.0
    return args


def _play_offline(
    player: SketchPlayer, canvas: SketchCanvas, frames: Optional[int]
) -> int:
    played = 0
    while frames is None or played < frames:
        more = player.advance(canvas)
        played += 1
        if not more or player.finished:
            break
    return played


def _run_trace(player: SketchPlayer, args: argparse.Namespace) -> None:
    _play_offline(player, TraceCanvas(sink=print), args.frames)


def _run_headless(
    player: SketchPlayer, rc: RuntimeConfig, args: argparse.Namespace
) -> None:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from sketchview.platform.display.pygame_backend import PygameDisplayBackend

    s = rc.settings
    backend = PygameDisplayBackend(
        (s.width, s.height),
        background=s.background,
        foreground=s.foreground,
        pause_scale=s.pause_scale,
    )
    played = _play_offline(player, backend.begin_frame(), args.frames)
    backend.end_frame()
    logger.info("played %d frame(s) headless", played)
    if args.out:
        backend.save_png(args.out)


async def _run_window(player: SketchPlayer, rc: RuntimeConfig) -> None:
    from sketchview.platform.display.pygame_backend import PygameDisplayBackend
    from sketchview.ui.controller import ViewerController

    s = rc.settings
    backend = PygameDisplayBackend(
        (s.width, s.height),
        create_window=True,
        title=rc.title,
        background=s.background,
        foreground=s.foreground,
        pause_scale=s.pause_scale,
    )
    ui = ViewerController(display=backend, player=player, settings=s)
    await ui.run()


async def run_async(argv: list[str] | None = None) -> None:
    """Async entrypoint for programmatic usage/testing."""
    args = parse_args(argv)
    if args.version:
        print(f"sketchview {__version__}")
        return

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        rc = make_runtime_config(args=args)
    except ValidationError as e:
        build_parser().error(str(e))

    if args.save_settings:
        SettingsStore.save(rc.settings)
        logger.info("saved settings to %s", SettingsStore.settings_path())

    try:
        source = SketchFile(args.file)
        if args.disassemble:
            for line in disassemble(source.read()):
                print(line)
            return
        player = SketchPlayer(source)
    except SketchFileUnavailable as e:
        logger.error("%s", e)
        print(f"sketchview: {e}", file=sys.stderr)
        sys.exit(1)

    if args.trace:
        _run_trace(player, args)
    elif rc.headless:
        _run_headless(player, rc, args)
    else:
        await _run_window(player, rc)


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the sketchview CLI."""
    try:
        asyncio.run(run_async(argv))
    except KeyboardInterrupt:
        # Allow graceful cancellation via Ctrl+C
        pass


if __name__ == "__main__":
    main()
