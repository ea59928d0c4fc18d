import random

from adastra.constants import RASTER, SCENE_H, SCENE_W, Z_PLANETS
from adastra.planet import BiomeType, Planet, planet_palette, planet_pixels


def test_palette_from_source():
    assert planet_palette(BiomeType.FROST)[0] == (140, 190, 220)
    assert planet_palette(BiomeType.CYBER)[2] == (0, 210, 210)


def test_pixels_inside_canvas_and_round():
    pixels = planet_pixels(BiomeType.OCEAN, 24, False)
    assert (12, 12) in pixels
    assert (0, 0) not in pixels
    assert (23, 23) not in pixels
    assert all(0 <= x < 24 and 0 <= y < 24 for x, y in pixels)


def test_rings_extend_canvas_with_one_colour():
    cells = 30
    plain = planet_pixels(BiomeType.DUST, cells, False)
    ringed = planet_pixels(BiomeType.DUST, cells, True)
    canvas = int(cells * 1.6)
    assert all(0 <= x < canvas and 0 <= y < canvas for x, y in ringed)
    center = canvas / 2.0
    radius = cells / 2.0
    outside = [
        color for (x, y), color in ringed.items()
        if ((x + 0.5) - center) ** 2 + ((y + 0.5) - center) ** 2 > radius * radius
    ]
    assert outside
    assert len(set(outside)) == 1
    assert len(ringed) > len(plain)


def test_pixel_colors_derive_from_palette():
    base, dark, detail = planet_palette(BiomeType.FIRE)
    colors = set(planet_pixels(BiomeType.FIRE, 24, False).values())
    assert {base, dark, detail} <= colors
    assert all(all(0 <= c <= 255 for c in col) for col in colors)


def test_planet_spawn_position():
    for seed in range(10):
        p = Planet(BiomeType.JUNGLE, random.Random(seed))
        assert p.x % RASTER == 0
        assert 0 <= p.x < SCENE_W
        assert p.y == -p.bounding_rect().height
        assert p.cells % 2 == 0 and 24 <= p.cells <= 50
        assert 0.1 <= p.speed < 0.4
        assert p.z == Z_PLANETS
        assert p.sprite.get_size() == (p.bounding_rect().width, p.bounding_rect().height)


def test_advance_and_exit():
    p = Planet(BiomeType.FROST, random.Random(3))
    p.set_pos(0, 0)
    p.advance()
    assert p.y == p.speed
    p.accelerate_exit()
    before = p.y
    p.advance()
    assert p.y == before + 8.0


def test_deleted_below_scene():
    p = Planet(BiomeType.FROST, random.Random(3))
    p.set_pos(0, SCENE_H + 199)
    p.accelerate_exit()
    p.advance()
    assert p.deleted