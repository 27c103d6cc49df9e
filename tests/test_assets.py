import numpy as np
import pygame
import pytest

from config import galaxy as config
from galaxy.bodies import Body, BodyStore
from rendering.export import get_unique_output_path, save_png
from rendering.sprites import SpriteLoader, circle_radii, sprite_batches, sprite_sizes
from tools.make_sprites import render_star, save_rgba, write_sprites


@pytest.fixture
def star_png(tmp_path):
    path = tmp_path / "star.png"
    save_rgba(render_star(8, (255, 200, 100)), path)
    return path


def test_loader_reaches_ready_when_every_image_fails(tmp_path):
    loader = SpriteLoader([tmp_path / "missing1.png", tmp_path / "missing2.png"])
    assert loader.count == 0

    loader.start()
    assert loader.wait(timeout=10)

    assert loader.count == 2
    assert loader.loaded_count == 0
    assert all(e.is_set() for e in loader.attempted)
    assert loader.get(0) is None


def test_loader_keeps_successful_slots(tmp_path, star_png):
    loader = SpriteLoader([star_png, tmp_path / "missing.png", star_png])
    loader.start()
    assert loader.wait(timeout=10)

    assert loader.loaded_count == 2
    assert loader.get(0).get_size() == (8, 8)
    assert loader.get(1) is None
    assert loader.get(5) is None


def test_render_star_is_brightest_in_the_middle():
    image = render_star(16, (100, 150, 255))
    assert image.shape == (16, 16, 4)
    assert image.dtype == np.uint8
    assert image[8, 8, 3] > image[0, 0, 3]
    assert image[0, 0, 3] == 0


def test_sprite_and_circle_sizes():
    masses = np.array([1.0, 10.0, 4000.0])
    np.testing.assert_allclose(sprite_sizes(masses), [15.5, 15.0 + np.sqrt(10.0) * 0.5, 30.0])
    np.testing.assert_allclose(circle_radii(np.array([0.25, 9.0])), [1.0, 3.0])


def test_unique_output_path(tmp_path):
    assert get_unique_output_path(tmp_path, "galaxy") == tmp_path / "galaxy.png"
    (tmp_path / "galaxy.png").touch()
    (tmp_path / "galaxy (1).png").touch()
    assert get_unique_output_path(tmp_path, "galaxy") == tmp_path / "galaxy (2).png"


def test_save_png_writes_frame(tmp_path):
    frame = np.zeros((20, 30, 3), dtype=np.uint8)
    frame[0, :, 0] = 255  # top row red

    first = save_png(frame, directory=tmp_path / "captures")
    second = save_png(frame, directory=tmp_path / "captures")

    assert first.name == "galaxy.png"
    assert second.name == "galaxy (1).png"
    surface = pygame.image.load(str(first))
    assert surface.get_size() == (30, 20)
    assert tuple(surface.get_at((5, 0)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((5, 19)))[:3] == (0, 0, 0)


def test_save_png_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = save_png(np.zeros((4, 4, 3), dtype=np.uint8))

    assert path.resolve() == (tmp_path / "captures" / "galaxy.png").resolve()
    assert path.exists()


def test_write_sprites_fills_in_missing_files(tmp_path):
    out_dir = tmp_path / "stars"
    out_dir.mkdir()
    custom = out_dir / "star2.png"
    save_rgba(render_star(4, (255, 0, 0)), custom)
    before = custom.read_bytes()

    written = write_sprites(out_dir, size=8, overwrite=False)

    assert [p.name for p in written] == ["star1.png", "star3.png", "star4.png", "star5.png"]
    assert custom.read_bytes() == before

    loader = SpriteLoader([out_dir / f for f in config.ASSETS["files"]])
    loader.start()
    assert loader.wait(timeout=10)
    assert loader.loaded_count == 5
    assert loader.get(1).get_size() == (4, 4)


def test_write_sprites_overwrites_by_default(tmp_path):
    write_sprites(tmp_path, size=4)
    assert len(write_sprites(tmp_path, size=8)) == 5
    assert pygame.image.load(str(tmp_path / "star1.png")).get_size() == (8, 8)


class FakeTextures:
    """Texture ids per slot; None marks a failed slot."""

    def __init__(self, textures, ready=True):
        self.textures = textures
        self.ready = ready

    def get(self, index):
        if not self.ready or not 0 <= index < len(self.textures):
            return None
        return self.textures[index]


def store_with_sprites(*sprites):
    return BodyStore.from_bodies(
        Body(id=i, position=(float(i), 0.0), mass=4.0, sprite_index=s)
        for i, s in enumerate(sprites)
    )


def test_batches_all_circles_before_sprites_are_ready():
    store = store_with_sprites(0, 1, None)
    batches, circles = sprite_batches(store, FakeTextures([10, 11], ready=False))

    assert batches == {}
    assert circles.tolist() == [True, True, True]


def test_batches_group_ready_sprites_by_texture():
    store = store_with_sprites(0, 1, 0, 1)
    batches, circles = sprite_batches(store, FakeTextures([10, 11]))

    assert set(batches) == {10, 11}
    assert batches[10].tolist() == [True, False, True, False]
    assert batches[11].tolist() == [False, True, False, True]
    assert not circles.any()


def test_batches_failed_slot_and_no_sprite_fall_back_to_circles():
    store = store_with_sprites(0, 1, None, 7)
    batches, circles = sprite_batches(store, FakeTextures([10, None]))

    assert list(batches) == [10]
    assert batches[10].tolist() == [True, False, False, False]
    assert circles.tolist() == [False, True, True, True]


def test_batches_empty_store():
    batches, circles = sprite_batches(BodyStore.empty(), FakeTextures([10]))
    assert batches == {}
    assert len(circles) == 0
