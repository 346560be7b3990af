"""Tests for per-frame input edges collected from pygame events."""

import pygame
import pytest
from pygame.locals import KEYDOWN, K_ESCAPE, K_h, MOUSEBUTTONDOWN, QUIT, VIDEORESIZE

from core.input_handler import InputHandler


@pytest.fixture
def handler():
    h = InputHandler()
    h.begin_frame()
    return h


@pytest.fixture
def mouse(monkeypatch):
    """Fake pointer state: all buttons up, window focused at (10, 20)."""
    state = {"buttons": (False, False, False), "focused": True, "pos": (10, 20)}
    monkeypatch.setattr(pygame.mouse, "get_pressed", lambda num_buttons=3: state["buttons"])
    monkeypatch.setattr(pygame.mouse, "get_focused", lambda: state["focused"])
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: state["pos"])
    return state


def right_click():
    return pygame.event.Event(MOUSEBUTTONDOWN, button=3, pos=(10, 20))


def test_quit_event_stops_the_app(handler):
    assert handler.handle_event(pygame.event.Event(QUIT)) is False


def test_right_press_lasts_one_frame(handler):
    assert handler.handle_event(right_click()) is True
    assert handler.right_just_pressed

    # Button still held next frame, no new event
    handler.begin_frame()
    assert not handler.right_just_pressed


def test_other_buttons_do_not_arm_repel(handler):
    for button in (1, 2, 4, 5):
        handler.handle_event(pygame.event.Event(MOUSEBUTTONDOWN, button=button, pos=(0, 0)))
    assert not handler.right_just_pressed


def test_escape_is_edge_triggered(handler):
    handler.handle_event(pygame.event.Event(KEYDOWN, key=K_ESCAPE))
    assert handler.cancel_pressed

    handler.begin_frame()
    assert not handler.cancel_pressed


def test_hud_toggle_and_resize_are_one_frame(handler):
    handler.handle_event(pygame.event.Event(KEYDOWN, key=K_h))
    handler.handle_event(pygame.event.Event(VIDEORESIZE, w=800, h=600, size=(800, 600)))
    assert handler.toggle_hud
    assert handler.resized == (800, 600)

    handler.begin_frame()
    assert not handler.toggle_hud
    assert handler.resized is None


def test_snapshot_carries_the_right_press_edge(handler, mouse):
    mouse["buttons"] = (False, False, True)
    handler.handle_event(right_click())
    assert handler.snapshot(None).right_just_pressed

    handler.begin_frame()
    assert not handler.snapshot(None).right_just_pressed


def test_snapshot_reads_held_buttons(handler, mouse):
    mouse["buttons"] = (True, True, False)
    snapshot = handler.snapshot(None)
    assert snapshot.left_held
    assert snapshot.middle_held
    assert snapshot.cursor_world is None
    assert handler.left_held()


def test_pointer_hidden_without_focus(handler, mouse):
    assert handler.pointer_position() == (10, 20)
    mouse["focused"] = False
    assert handler.pointer_position() is None
