"""Rendering components for the particle field."""

from .text import TextRenderer
from .particles import ParticleRenderer
from .menu import MenuRenderer

__all__ = ["TextRenderer", "ParticleRenderer", "MenuRenderer"]
