"""Main menu model - button layout, interaction state and actions."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from config import particles as config


class MenuButtonAction(Enum):
    PLAY = "Play"
    QUIT = "Quit"


class Interaction(Enum):
    NONE = 0
    HOVERED = 1
    PRESSED = 2


def button_color(interaction: Interaction, selected: bool) -> Tuple[float, float, float]:
    """Background colour for a button given its pointer interaction."""
    colors = config.COLORS
    if interaction is Interaction.PRESSED or (interaction is Interaction.NONE and selected):
        return colors["button_pressed"]
    if interaction is Interaction.HOVERED and selected:
        return colors["button_hovered_pressed"]
    if interaction is Interaction.HOVERED:
        return colors["button_hovered"]
    return colors["button_normal"]


@dataclass
class MenuButton:
    """A clickable button; ``rect`` is (x, y, width, height) in screen pixels."""
    action: MenuButtonAction
    rect: Tuple[float, float, float, float]
    interaction: Interaction = Interaction.NONE
    selected: bool = False

    @property
    def label(self) -> str:
        return self.action.value

    @property
    def color(self) -> Tuple[float, float, float]:
        return button_color(self.interaction, self.selected)

    def contains(self, pos: Tuple[float, float]) -> bool:
        x, y, w, h = self.rect
        return x <= pos[0] <= x + w and y <= pos[1] <= y + h


class MainMenu:
    """
    Title panel with a column of buttons, centred in the window.

    The menu owns no GL state; rendering.menu draws it. Actions fire when
    the pointer goes down over a button; the last button clicked stays
    selected. ``pointer_down`` is the primary button state when the menu is
    built, so a press that started before the menu existed never fires.
    """

    def __init__(
        self,
        screen_size: Tuple[int, int],
        actions: Optional[List[MenuButtonAction]] = None,
        pointer_down: bool = True
    ):
        self.actions = actions or [MenuButtonAction.PLAY, MenuButtonAction.QUIT]
        self.buttons: List[MenuButton] = []
        self.panel_rect = (0.0, 0.0, 0.0, 0.0)
        self.title_pos = (0.0, 0.0)
        self._pointer_was_down = pointer_down
        self._pressed_action: Optional[MenuButtonAction] = None
        self.layout(screen_size)

    def layout(self, screen_size: Tuple[int, int]):
        """Recompute panel and button rectangles for the window size."""
        cfg = config.MENU
        w, h = screen_size
        bw, bh, margin = cfg["button_width"], cfg["button_height"], cfg["button_margin"]
        pad = cfg["panel_padding"]

        title_h = cfg["title_font_size"] + 2 * 20
        content_h = title_h + len(self.actions) * (bh + 2 * margin)
        panel_w = max(bw + 2 * margin, len(cfg["title"]) * cfg["title_font_size"] * 0.6) + 2 * pad
        panel_h = content_h + 2 * pad
        px = (w - panel_w) / 2.0
        py = (h - panel_h) / 2.0
        self.panel_rect = (px, py, panel_w, panel_h)
        self.title_pos = (px + pad, py + pad + 20)

        old = {b.action: b for b in self.buttons}
        self.buttons = []
        y = py + pad + title_h + margin
        for action in self.actions:
            rect = ((w - bw) / 2.0, y, bw, bh)
            prev = old.get(action)
            self.buttons.append(MenuButton(
                action, rect,
                prev.interaction if prev else Interaction.NONE,
                prev.selected if prev else False,
            ))
            y += bh + 2 * margin

    def update_pointer(self, pos: Optional[Tuple[float, float]], pressed: bool) -> Optional[MenuButtonAction]:
        """
        Update button interactions from the pointer.

        Args:
            pos: Pointer position in screen pixels (None if outside the window)
            pressed: Primary button is down

        Returns:
            The action of the button pressed this frame, if any
        """
        just_pressed = pressed and not self._pointer_was_down
        self._pointer_was_down = pressed
        if not pressed:
            self._pressed_action = None

        fired = None
        for button in self.buttons:
            if pos is None or not button.contains(pos):
                button.interaction = Interaction.NONE
                continue
            if just_pressed and fired is None:
                fired = self._pressed_action = button.action
            if pressed and button.action is self._pressed_action:
                button.interaction = Interaction.PRESSED
            else:
                button.interaction = Interaction.HOVERED

        if fired is not None:
            for button in self.buttons:
                button.selected = button.action is fired
            print(f"[Menu] {fired.value} pressed")
        return fired

    def button(self, action: MenuButtonAction) -> MenuButton:
        for b in self.buttons:
            if b.action is action:
                return b
        raise KeyError(action)
