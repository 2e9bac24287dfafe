from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable

import pytest

from sketchview import cli
from sketchview.core.codec import Opcode, ToolCode, encode

NEXT = encode(Opcode.TOOL, ToolCode.NEXTFRAME)
ANIM = bytes(
    [encode(Opcode.DX, 4), encode(Opcode.DY, 4), NEXT]
    + [encode(Opcode.TOOL, ToolCode.BLOCK), encode(Opcode.DX, 8), encode(Opcode.DY, 8)]
)


@pytest.mark.parametrize("argv", [[], ["a.sk", "b.sk"]])
def test_wrong_argument_count_prints_usage(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.parse_args(argv)
    assert exc.value.code == 1
    assert "Use sketchview file" in capsys.readouterr().out


def test_parse_args_options() -> None:
    args = cli.parse_args(["x.sk", "--size", "64x32", "--background", "#102030ff"])
    assert args.file == "x.sk"
    assert args.size == (64, 32)
    assert args.background == 0x102030FF
    assert args.loop is None


def test_headless_disables_pauses_by_default() -> None:
    assert cli.parse_args(["x.sk", "--headless"]).pause_scale == 0.0
    assert cli.parse_args(["x.sk", "--headless", "--pause-scale", "1"]).pause_scale == 1.0


def test_missing_file_exits_with_status_one(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path / "nope.sk"), "--trace"])
    assert exc.value.code == 1


def test_trace_prints_all_frames(
    write_sketch: Callable[[Iterable[int], str], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = write_sketch(ANIM, "anim.sk")
    cli.main([str(path), "--trace"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["line(0,0,4,4)", "show()", "block(0,0,8,8)", "show()"]


def test_trace_frame_limit(
    write_sketch: Callable[[Iterable[int], str], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = write_sketch(ANIM, "anim.sk")
    cli.main([str(path), "--trace", "--frames", "1"])
    assert capsys.readouterr().out.splitlines() == ["line(0,0,4,4)", "show()"]


def test_disassemble(
    write_sketch: Callable[[Iterable[int], str], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = write_sketch(ANIM, "anim.sk")
    cli.main([str(path), "--disassemble"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == len(ANIM)
    assert out[2].endswith("NEXTFRAME")


def test_bad_setting_override_is_usage_error(
    write_sketch: Callable[[Iterable[int], str], Path],
) -> None:
    path = write_sketch(ANIM, "anim.sk")
    with pytest.raises(SystemExit) as exc:
        cli.main([str(path), "--trace", "--fps", "0"])
    assert exc.value.code == 2


@pytest.mark.asyncio
async def test_headless_saves_png(
    tmp_path: Path, write_sketch: Callable[[Iterable[int], str], Path]
) -> None:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    path = write_sketch(ANIM, "anim.sk")
    out = tmp_path / "final.png"
    await cli.run_async([str(path), "--headless", "--out", str(out)])
    assert out.exists()


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--version"])
    assert capsys.readouterr().out.startswith("sketchview ")


def test_save_settings_persists_merged_overrides(
    write_sketch: Callable[[Iterable[int], str], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    from sketchview.settings.store import SettingsStore

    path = write_sketch(ANIM, "anim.sk")
    cli.main([str(path), "--trace", "--size", "64x48", "--no-loop", "--save-settings"])
    capsys.readouterr()
    saved = SettingsStore.load()
    assert (saved.width, saved.height) == (64, 48)
    assert saved.loop is False
    assert SettingsStore.settings_path().exists()


def test_settings_not_written_without_flag(
    write_sketch: Callable[[Iterable[int], str], Path],
) -> None:
    from sketchview.settings.store import SettingsStore

    path = write_sketch(ANIM, "anim.sk")
    cli.main([str(path), "--trace", "--size", "64x48"])
    assert not SettingsStore.settings_path().exists()
