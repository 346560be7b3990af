"""Main application class that ties everything together."""

from typing import Optional

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import particles as config
from particles import (
    Bounds, CursorCommand, ParticleStore, SimulationConstants, advance, warmup_kernels,
)
from scenes import MainMenu, MenuButtonAction, SceneLifecycle, SceneState
from rendering import MenuRenderer, ParticleRenderer, TextRenderer
from .camera import Camera2D
from .input_handler import InputHandler


class Application:
    """Main application managing the window, scenes and frame loop."""

    def __init__(self, width: int = None, height: int = None, interval: float = None,
                 shape: str = None, fullscreen: bool = False):
        pygame.init()
        self.screen_size = (
            int(width or config.WINDOW["width"]),
            int(height or config.WINDOW["height"]),
        )
        flags = DOUBLEBUF | OPENGL
        if config.WINDOW["resizable"]:
            flags |= RESIZABLE
        if fullscreen:
            flags |= FULLSCREEN
        pygame.display.set_mode(self.screen_size, flags)
        pygame.display.set_caption(config.WINDOW["title"])

        # Core components
        overrides = {} if interval is None else {"spatial_interval": float(interval)}
        self.lifecycle = SceneLifecycle(
            ParticleStore(interval),
            constants_factory=lambda: SimulationConstants.from_config(**overrides),
        )
        self.input_handler = InputHandler()
        self.camera: Optional[Camera2D] = None
        self.menu: Optional[MainMenu] = None

        # Rendering components
        self.text_renderer = TextRenderer()
        self.particle_renderer = ParticleRenderer(shape)
        self.menu_renderer = MenuRenderer(self.text_renderer)

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        self.show_hud = True
        self.last_command = CursorCommand.none()

        self._register_scenes()

        print("[App] Compiling particle kernels...")
        warmup_kernels()
        self.lifecycle.start()
        print("[App] Ready!")

    def _register_scenes(self):
        """Attach camera, renderer and menu setup/teardown to scene transitions."""
        lc = self.lifecycle
        lc.on_enter(SceneState.MENU_ACTIVE, self._menu_setup)
        lc.on_exit(SceneState.MENU_ACTIVE, self._menu_teardown)
        lc.on_enter(SceneState.SIMULATION_ACTIVE, self._particles_setup)
        lc.on_exit(SceneState.SIMULATION_ACTIVE, self._particles_teardown)

    def _menu_setup(self):
        self.menu = MainMenu(self.screen_size, pointer_down=self.input_handler.left_held())
        glClearColor(*config.COLORS["menu_background"])

    def _menu_teardown(self):
        self.menu = None

    def _particles_setup(self):
        self.camera = Camera2D(*self.screen_size)
        self.particle_renderer.setup(len(self.lifecycle.store))
        glClearColor(*config.COLORS["background"])
        print(f"[App] #Particles: {len(self.lifecycle.store):,}")

    def _particles_teardown(self):
        self.camera = None
        self.particle_renderer.release()
        self.last_command = CursorCommand.none()

    def _resize(self, size: tuple):
        """Track the new window size; bounds checks use it from the next frame."""
        self.screen_size = (int(size[0]), int(size[1]))
        if self.camera is not None:
            self.camera.resize(*self.screen_size)
        if self.menu is not None:
            self.menu.layout(self.screen_size)
        if self.lifecycle.simulation_active:
            self.lifecycle.resize(Bounds(*self.screen_size))

    def _handle_events(self):
        """Process all pending pygame events."""
        self.input_handler.begin_frame()
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

        if self.input_handler.resized:
            self._resize(self.input_handler.resized)
        if self.input_handler.toggle_hud:
            self.show_hud = not self.show_hud
        if self.input_handler.cancel_pressed:
            self.lifecycle.cancel()

    def _update(self, dt: float):
        """Update scene state."""
        if self.lifecycle.simulation_active:
            snapshot = self.input_handler.snapshot(self.camera)
            self.last_command = advance(
                self.lifecycle.store, snapshot, self.lifecycle.bounds, self.lifecycle.constants, dt
            )
        elif self.menu is not None:
            action = self.menu.update_pointer(
                self.input_handler.pointer_position(), self.input_handler.left_held()
            )
            if action is MenuButtonAction.PLAY:
                self.lifecycle.play(Bounds(*self.screen_size))
            elif action is MenuButtonAction.QUIT:
                self.running = False

    def _render(self):
        """Render the active scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        if self.lifecycle.simulation_active and self.camera is not None:
            self.camera.apply()
            self.particle_renderer.draw(self.lifecycle.store.positions)

            if self.show_hud:
                self.text_renderer.draw_text(
                    f"Particles: {len(self.lifecycle.store):,}  |  FPS: {self.fps:.0f}",
                    10, 10, self.screen_size
                )
                self.text_renderer.draw_text(
                    f"Mode: {self.last_command.mode.name}  |  LMB attract  RMB repel  MMB orbit  ESC menu",
                    10, 35, self.screen_size
                )
        elif self.menu is not None:
            self.menu_renderer.draw(self.menu, self.screen_size)

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        while self.running:
            dt = self.clock.tick() / 1000.0  # Uncapped FPS
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        self.lifecycle.shutdown()
        pygame.quit()
