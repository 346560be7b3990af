"""Application scenes: lifecycle state machine and main menu model."""

from .lifecycle import SceneLifecycle, SceneState
from .menu import MainMenu, MenuButtonAction

__all__ = ["SceneLifecycle", "SceneState", "MainMenu", "MenuButtonAction"]
