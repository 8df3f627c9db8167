"""Shared fixtures: small RGBA buffers built with numpy."""

import numpy as np
import pytest


def _solid(width, height, rgba):
    return bytes(rgba) * (width * height)


@pytest.fixture()
def solid():
    """Factory: a width x height image filled with one RGBA value."""
    return _solid


@pytest.fixture()
def rng():
    return np.random.default_rng(162)


@pytest.fixture()
def random_image(rng):
    """Factory: random RGBA bytes for a given size."""
    def make(width, height):
        return rng.integers(0, 256, size=width * height * 4, dtype=np.uint8).tobytes()
    return make


@pytest.fixture()
def black_2x2():
    return _solid(2, 2, (0, 0, 0, 255))
