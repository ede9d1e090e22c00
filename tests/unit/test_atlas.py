import pytest

from glyph_rogue.assets import AssetSource, BUILTIN_FONT
from glyph_rogue.atlas import (
    Region,
    build_glyph_atlas,
    check_tileset,
    dedupe_glyphs,
    load_atlas_asset,
)
from glyph_rogue.deferred import DeferredAsset, InlineExecutor
from glyph_rogue.errors import TilesetLoadError
from glyph_rogue.types import Vector
from tests.test_utils import make_atlas, make_font


@pytest.mark.parametrize(
    "glyphs, tile_w, tile_h",
    [
        ("#@g.", 24, 24),
        ("#", 8, 12),
        ("abcdefghij", 10, 16),
    ],
)
def test_regions_are_sliced_left_to_right(glyphs: str, tile_w: int, tile_h: int) -> None:
    atlas = build_glyph_atlas(make_font(), glyphs, Vector(tile_w, tile_h))

    assert len(atlas) == len(glyphs)
    assert atlas.image.size == (len(glyphs) * tile_w, tile_h)
    for i, glyph in enumerate(glyphs):
        assert atlas.get(glyph) == Region(i * tile_w, 0, tile_w, tile_h)


def test_regions_share_backing_image() -> None:
    atlas = make_atlas("#@")
    boxes = [atlas.get(g).box for g in "#@"]  # type: ignore[union-attr]
    assert boxes == [(0, 0, 8, 8), (8, 0, 16, 8)]
    assert atlas.image.mode == "RGBA"


def test_duplicate_glyphs_last_write_wins() -> None:
    atlas = build_glyph_atlas(make_font(), "#.#", Vector(8, 8))
    assert len(atlas) == 2
    assert atlas.get("#") == Region(16, 0, 8, 8)
    assert atlas.get(".") == Region(8, 0, 8, 8)
    # The slot for the first '#' is still allocated.
    assert atlas.image.width == 24


def test_glyphs_follow_slot_order() -> None:
    atlas = build_glyph_atlas(make_font(), "#@g.", Vector(8, 8))
    assert atlas.glyphs == ("#", "@", "g", ".")
    assert list(atlas) == ["#", "@", "g", "."]


def test_glyphs_order_with_duplicates() -> None:
    atlas = build_glyph_atlas(make_font(), "#.#", Vector(8, 8))
    assert atlas.glyphs == (".", "#")


def test_dedupe_glyphs_keeps_first_order() -> None:
    assert dedupe_glyphs("#@#g..@") == "#@g."


def test_missing_glyph_lookup() -> None:
    atlas = make_atlas("#")
    assert atlas.get("x") is None
    assert "x" not in atlas
    assert "#" in atlas


def test_atlas_is_immutable() -> None:
    atlas = make_atlas("#")
    with pytest.raises(TypeError):
        atlas.regions["x"] = Region(0, 0, 1, 1)  # type: ignore[index]


def test_invalid_tile_size() -> None:
    with pytest.raises(ValueError):
        build_glyph_atlas(make_font(), "#", Vector(0, 8))


def test_load_atlas_asset_builtin_font(tmp_path) -> None:
    source = AssetSource(str(tmp_path), executor=InlineExecutor())
    asset = load_atlas_asset(source, BUILTIN_FONT, "#.", Vector(12, 12))
    assert asset.is_ready
    assert asset.result().glyphs == ("#", ".")


def test_load_atlas_asset_missing_font_is_fatal(tmp_path) -> None:
    source = AssetSource(str(tmp_path), executor=InlineExecutor())
    asset = load_atlas_asset(source, "square.ttf", "#.", Vector(12, 12))
    assert asset.is_failed
    with pytest.raises(TilesetLoadError, match="square.ttf"):
        check_tileset(asset, "square.ttf")


def test_check_tileset_ignores_pending_and_ready() -> None:
    check_tileset(DeferredAsset.ready(make_atlas()), "square.ttf")
