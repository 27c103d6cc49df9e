"""Main application class that ties everything together."""

from pathlib import Path
from typing import Optional

import numpy as np
import pygame
from pygame.locals import *

from config import galaxy as config
from galaxy import InjectionController, LiveSettings, SimulationLoop, generate_galaxy
from rendering.export import save_png
from rendering.renderer import BodyRenderer, SpriteTextures
from rendering.sprites import SpriteLoader
from rendering.text import TextRenderer
from tools.make_sprites import write_sprites
from tools.presets import get_preset_by_index, get_preset_config, get_preset_list
from .input_handler import InputHandler

HELP_LINES = [
    "Click: add one star | Drag: add many stars",
    "SPACE: Pause | C: Clear | S: Save PNG | R: Reset params",
    "[ ]: Mass | UP/DOWN: Gravity | LEFT/RIGHT: Time step",
    "1-9: Select galaxy | G: Spawn galaxy | H: Toggle help | ESC: Quit",
]


class Application:
    """Main application managing the frame loop, controls and rendering."""

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 seed: Optional[int] = None, asset_dir=None):
        pygame.init()

        self.settings = LiveSettings(
            width=width or config.WINDOW["width"],
            height=height or config.WINDOW["height"],
        )
        pygame.display.set_mode(
            (self.settings.width, self.settings.height),
            DOUBLEBUF | OPENGL | RESIZABLE
        )
        pygame.display.set_caption(config.WINDOW["title"])

        self.rng = np.random.default_rng(seed)

        # Sprites load in the background; stars render as circles until ready
        if asset_dir is None:
            asset_dir = config.ASSETS["directory"]
            self._prepare_default_sprites(asset_dir)
        asset_dir = Path(asset_dir)
        self.sprites = SpriteLoader([asset_dir / f for f in config.ASSETS["files"]])
        self.sprites.start()

        # Simulation
        self.simulation = SimulationLoop(self.settings, softening=config.SIMULATION["softening"])
        self.controller = InjectionController(
            self.settings, rng=self.rng, sprite_count=lambda: self.sprites.count
        )
        self.input_handler = InputHandler(self.controller, self.simulation)

        # Rendering components
        self.renderer = BodyRenderer(SpriteTextures(self.sprites))
        self.renderer.setup(self.settings.width, self.settings.height)
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        self.show_help = True
        self.body_count = 0
        self.save_requested = False
        self.preset_key, _ = get_preset_list()[0]

        self.simulation.on_count_change(self._on_count_change)
        self.simulation.on_pause_change(self._on_pause_change)

    @staticmethod
    def _prepare_default_sprites(asset_dir: Path):
        try:
            for path in write_sprites(asset_dir, overwrite=False):
                print(f"[Sprites] Generated {path}")
        except (pygame.error, OSError) as e:
            print(f"[Sprites] Could not generate sprites in {asset_dir}: {e}")

    def _on_count_change(self, count: int):
        self.body_count = count

    def _on_pause_change(self, paused: bool):
        print(f"[App] {'Paused' if paused else 'Running'}")

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def spawn_galaxy(self, key: Optional[str] = None, center: Optional[tuple] = None):
        """Add a generated galaxy at ``center`` (default: pointer or window centre)."""
        key = key or self.preset_key
        if center is None:
            center = pygame.mouse.get_pos() if pygame.mouse.get_focused() else self.settings.center

        bodies = generate_galaxy(
            center,
            mass=self.settings.mass,
            G=self.settings.G,
            sprite_count=self.sprites.count,
            rng=self.rng,
            softening=self.simulation.softening,
            **get_preset_config(key)
        )
        self.simulation.add_bodies(bodies)
        print(f"[Galaxy] Spawned '{key}' with {len(bodies)} stars at ({center[0]:.0f}, {center[1]:.0f})")

    def select_preset(self, index: int):
        key, preset = get_preset_by_index(index)
        if key is not None:
            self.preset_key = key
            print(f"[Galaxy] Selected preset: {preset['name']}")

    def save_image(self):
        """Write the star field of the frame just drawn (HUD excluded) to a PNG."""
        frame = self.renderer.capture()
        try:
            path = save_png(frame)
        except (pygame.error, OSError) as e:
            print(f"[Export] Failed to save image: {e}")
            return
        print(f"[Export] Saved {path.resolve()}")

    def _handle_key(self, key: int):
        if key == K_ESCAPE:
            self.running = False
        elif key == K_SPACE:
            self.simulation.toggle_pause()
        elif key == K_c:
            self.simulation.clear()
        elif key == K_s:
            self.save_requested = True
        elif key == K_r:
            self.settings.reset()
        elif key == K_RIGHTBRACKET:
            self.settings.adjust_mass(1)
        elif key == K_LEFTBRACKET:
            self.settings.adjust_mass(-1)
        elif key == K_UP:
            self.settings.adjust_gravity(1)
        elif key == K_DOWN:
            self.settings.adjust_gravity(-1)
        elif key == K_RIGHT:
            self.settings.adjust_time_step(1)
        elif key == K_LEFT:
            self.settings.adjust_time_step(-1)
        elif key == K_g:
            self.spawn_galaxy()
        elif key == K_h:
            self.show_help = not self.show_help
        elif K_1 <= key <= K_9:
            self.select_preset(key - K_1)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == KEYDOWN:
                self._handle_key(event.key)
            elif event.type == VIDEORESIZE:
                self.settings.resize(event.w, event.h)
                self.renderer.setup(event.w, event.h)
            elif not self.input_handler.handle_event(event):
                self.running = False

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def _draw_hud(self):
        screen_size = (self.settings.width, self.settings.height)
        status = "PAUSED" if self.simulation.is_paused() else "RUNNING"
        lines = [
            f"Stars: {self.body_count:,}  |  FPS: {self.fps:.0f}  |  {status}",
            f"Mass: {self.settings.mass:.0f}  Gravity: {self.settings.G:.1f}  "
            f"Time step: {self.settings.time_step:.2f}  |  Galaxy: {self.preset_key}",
        ]
        if self.show_help:
            lines += HELP_LINES
        self.text_renderer.draw_lines(lines, 10, 10, screen_size)

    def _render(self, store):
        self.renderer.draw(store)
        if self.save_requested:
            self.save_requested = False
            self.save_image()
        self._draw_hud()

    def run(self):
        """Main application loop."""
        print("[App] Starting main loop...")

        while self.running:
            self.clock.tick(config.WINDOW["fps"])
            self.fps = self.clock.get_fps()

            self._handle_events()
            if not self.running:
                break

            self.simulation.tick(self._render)
            pygame.display.flip()

        self.simulation.stop()
        pygame.quit()
        print("[App] Shutdown complete")
