import pytest
from PIL import Image

from glyph_rogue.__main__ import main, parse_script
from glyph_rogue.assets import BUILTIN_FONT
from glyph_rogue.input import Key


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("glyph_rogue.__main__.setup_logging", lambda level: None)


def test_parse_script() -> None:
    assert parse_script("left;;up+right") == [
        frozenset({Key.LEFT}),
        frozenset(),
        frozenset({Key.UP, Key.RIGHT}),
    ]
    assert parse_script("") == []


def test_cli_writes_frame(tmp_path) -> None:
    out = tmp_path / "frame.png"
    code = main(
        [
            "--frames", "3",
            "--keys", "left;;left",
            "--sync",
            "--asset-root", str(tmp_path),
            "--tileset-font", BUILTIN_FONT,
            "--text-font", BUILTIN_FONT,
            "--out", str(out),
        ]
    )
    assert code == 0
    assert Image.open(out).size == (800, 600)


def test_cli_missing_tileset_exits_1(tmp_path) -> None:
    code = main(
        ["--frames", "1", "--sync", "--classic-fonts", "--asset-root", str(tmp_path)]
    )
    assert code == 1


def test_cli_default_fonts_run(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "frame.png"
    assert main(["--frames", "1", "--sync", "--out", str(out)]) == 0
    assert out.exists()


def test_cli_bad_keys(tmp_path) -> None:
    assert main(["--keys", "jump", "--asset-root", str(tmp_path)]) == 2
