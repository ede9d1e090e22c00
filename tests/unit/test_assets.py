import pytest

from glyph_rogue.assets import BUILTIN_FONT, AssetSource, render_text
from glyph_rogue.deferred import AssetStatus, InlineExecutor
from glyph_rogue.errors import AssetLoadError, AssetNotFoundError
from tests.test_utils import make_font


def test_missing_font_raises(tmp_path) -> None:
    source = AssetSource(str(tmp_path))
    with pytest.raises(AssetNotFoundError):
        source.load_font("nope.ttf", 12)


def test_corrupt_font_raises(tmp_path) -> None:
    (tmp_path / "broken.ttf").write_bytes(b"not a font")
    source = AssetSource(str(tmp_path))
    with pytest.raises(AssetLoadError):
        source.load_font("broken.ttf", 12)


def test_missing_font_asset_fails_without_raising(tmp_path) -> None:
    source = AssetSource(str(tmp_path), executor=InlineExecutor())
    asset = source.load_font_asset("nope.ttf", 12)
    assert asset.poll() is AssetStatus.FAILED
    assert isinstance(asset.error, AssetNotFoundError)


def test_text_asset_renders_image(tmp_path) -> None:
    source = AssetSource(str(tmp_path), executor=InlineExecutor())
    asset = source.text_asset(BUILTIN_FONT, "Hello", 20)
    assert asset.is_ready
    image = asset.result()
    assert image.mode == "RGBA"
    assert image.width > 0 and image.height > 0


def test_text_asset_failure_is_not_raised(tmp_path) -> None:
    source = AssetSource(str(tmp_path), executor=InlineExecutor())
    asset = source.text_asset("nope.ttf", "Hello", 20)
    assert asset.is_failed


def test_render_text_has_visible_pixels() -> None:
    image = render_text(make_font(), "##")
    alpha = image.getchannel("A")
    assert alpha.getbbox() is not None
