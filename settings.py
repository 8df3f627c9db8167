# settings.py
"""Shared constants and environment-driven defaults."""

import os

CHANNELS = 4

MIN_BLUR_RADIUS = 1
MAX_BLUR_RADIUS = 50
DEFAULT_BLUR_RADIUS = 5

DEFAULT_ENGINE = "reference"

# Encoder settings for raw_io.save_rgba
JPEG_QUALITY = 90
FLATTEN_BACKGROUND = "#ffffff"

LOG_FORMAT = "%(asctime)s  %(name)-12s  %(levelname)-7s  %(message)s"


def env_int(name: str, default: int) -> int:
    """Positive int from the environment, else default."""
    raw = os.environ.get(name, "")
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def bench_iterations() -> int:
    return env_int("BENCH_ITERATIONS", 3)


def bench_radius() -> int:
    return env_int("BENCH_RADIUS", DEFAULT_BLUR_RADIUS)
