"""Pytest configuration and shared fixtures."""

import os

# Headless pygame for surface and app tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from palimpsest.config import ErosionConfig, VisualParameters
from palimpsest.surfaces import PillowSurface


class FakeSurface:
    """
    Surface with fixed advances that records draw calls.

    Non-space glyphs are 10 units wide and spaces 4, at any size.
    """

    def __init__(self, width: int = 200, height: int = 100):
        self.width = width
        self.height = height
        self.draws = []
        self.clears = 0

    def resize(self, width, height):
        self.width = width
        self.height = height

    def clear(self):
        self.clears += 1
        self.draws = []

    def text_width(self, text, size):
        return float(sum(4 if ch == " " else 10 for ch in text))

    def draw_text(self, text, x, y, size, alpha):
        self.draws.append((text, x, y, size, alpha))


@pytest.fixture
def config() -> ErosionConfig:
    return ErosionConfig()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source."""
    return np.random.default_rng(42)


@pytest.fixture
def fake_surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def pillow_surface() -> PillowSurface:
    return PillowSurface(320, 200)


@pytest.fixture
def still_params() -> VisualParameters:
    """Parameters with no jitter, glitches or ghosts."""
    return VisualParameters(
        distortion=0.0,
        glitch_prob=0.0,
        ghost_prob=0.0,
        min_alpha=200,
        max_alpha=200,
    )
