"""Cursor input mapping - pointer state to a single force command per frame."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

Vec2 = Tuple[float, float]


class ForceMode(IntEnum):
    """Active cursor interaction. Values are passed straight into the JIT kernels."""
    NONE = 0
    ATTRACT = 1
    REPEL = 2
    ORBIT = 3


@dataclass(frozen=True)
class CursorCommand:
    """The single force mode and world-space target resolved for one frame."""
    mode: ForceMode = ForceMode.NONE
    target: Optional[Vec2] = None

    def __post_init__(self):
        if self.mode == ForceMode.NONE and self.target is not None:
            raise ValueError("CursorCommand with mode NONE cannot carry a target")
        if self.mode != ForceMode.NONE and self.target is None:
            raise ValueError(f"CursorCommand with mode {self.mode.name} needs a target")

    @classmethod
    def none(cls) -> "CursorCommand":
        return cls()

    @property
    def active(self) -> bool:
        return self.mode != ForceMode.NONE


@dataclass(frozen=True)
class InputSnapshot:
    """
    Pointer state sampled once per frame.

    Attributes:
        left_held: Left button is down this frame
        right_just_pressed: Right button went down this frame
        middle_held: Middle button is down this frame
        cursor_world: Cursor in world space, or None when unavailable
    """
    left_held: bool = False
    right_just_pressed: bool = False
    middle_held: bool = False
    cursor_world: Optional[Vec2] = None


@dataclass(frozen=True)
class ViewportTransform:
    """
    Screen-to-world projection for a unit-scale 2D camera.

    Screen coordinates grow right and down from the top-left corner; world
    coordinates grow right and up. ``center`` is the world point shown in the
    middle of the viewport.
    """
    width: float
    height: float
    center: Optional[Vec2] = None

    def __post_init__(self):
        if self.center is None:
            object.__setattr__(self, "center", (self.width / 2.0, self.height / 2.0))

    def contains(self, screen_pos: Vec2) -> bool:
        sx, sy = screen_pos
        return 0.0 <= sx <= self.width and 0.0 <= sy <= self.height

    def screen_to_world(self, screen_pos: Optional[Vec2]) -> Optional[Vec2]:
        """Project a screen position into world space (None if off-viewport)."""
        if screen_pos is None or not self.contains(screen_pos):
            return None
        sx, sy = screen_pos
        cx, cy = self.center
        return (
            float(cx + sx - self.width / 2.0),
            float(cy + self.height / 2.0 - sy),
        )


def resolve_cursor_command(snapshot: InputSnapshot) -> CursorCommand:
    """
    Resolve the single force command for this frame.

    Buttons are checked in priority order (left, right, middle) and the first
    match wins. Every mode needs a cursor position, so an unavailable cursor
    always resolves to ForceMode.NONE.
    """
    target = snapshot.cursor_world
    if target is None:
        return CursorCommand.none()

    target = (float(target[0]), float(target[1]))
    if snapshot.left_held:
        return CursorCommand(ForceMode.ATTRACT, target)
    if snapshot.right_just_pressed:
        return CursorCommand(ForceMode.REPEL, target)
    if snapshot.middle_held:
        return CursorCommand(ForceMode.ORBIT, target)
    return CursorCommand.none()
