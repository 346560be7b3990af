"""Input handling for keyboard, mouse and window events."""

from typing import Optional, Tuple

import pygame
from pygame.locals import *

from particles import InputSnapshot
from .camera import Camera2D


class InputHandler:
    """
    Collects pygame input into per-frame edges and snapshots.

    Edge flags (cancel, right press, HUD toggle, resize) are cleared by
    ``begin_frame`` and set again by ``handle_event``.
    """
    
    def __init__(self):
        self.cancel_pressed = False
        self.right_just_pressed = False
        self.toggle_hud = False
        self.resized: Optional[Tuple[int, int]] = None
    
    def begin_frame(self):
        """Reset the one-frame edge flags."""
        self.cancel_pressed = False
        self.right_just_pressed = False
        self.toggle_hud = False
        self.resized = None
    
    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                self.cancel_pressed = True
            elif event.key == K_h:
                self.toggle_hud = True
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 3:
                self.right_just_pressed = True
        elif event.type == VIDEORESIZE:
            self.resized = (event.w, event.h)
        
        return True
    
    def pointer_position(self) -> Optional[Tuple[int, int]]:
        """Mouse position in window pixels, or None when the window lacks focus."""
        if not pygame.mouse.get_focused():
            return None
        return pygame.mouse.get_pos()
    
    def left_held(self) -> bool:
        return bool(pygame.mouse.get_pressed(num_buttons=3)[0])
    
    def snapshot(self, camera: Optional[Camera2D]) -> InputSnapshot:
        """Sample button state and project the cursor through ``camera``."""
        left, middle, _ = pygame.mouse.get_pressed(num_buttons=3)
        cursor_world = None
        if camera is not None:
            cursor_world = camera.screen_to_world(self.pointer_position())
        return InputSnapshot(
            left_held=bool(left),
            right_just_pressed=self.right_just_pressed,
            middle_held=bool(middle),
            cursor_world=cursor_world,
        )
