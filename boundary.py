# boundary.py
"""
Host-facing entry points: validate, run the pipeline, report timing.

Every check runs before the output buffer is allocated, so a rejected
call leaves nothing behind.
"""

import logging
import numbers
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from errors import BufferSizeMismatch, InvalidArgumentCount, InvalidBlurRadius, InvalidDimensions
from pipeline import get_engine, process
from settings import CHANNELS, DEFAULT_BLUR_RADIUS, DEFAULT_ENGINE, MAX_BLUR_RADIUS, MIN_BLUR_RADIUS

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("imageBuffer", "width", "height")


@dataclass
class ProcessResult:
    data: bytearray
    duration_ms: int

    def as_response(self) -> Dict[str, Any]:
        return {"data": self.data, "durationMs": self.duration_ms}


def _is_int(v) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)


def as_byte_view(image_buffer) -> memoryview:
    """Flat unsigned-byte view of any C-contiguous buffer (TypeError otherwise)."""
    return memoryview(image_buffer).cast("B")


def validate(image_buffer, width, height, blur_radius) -> memoryview:
    """Check a call against the pipeline contract; return the flat byte view.

    Order: buffer size, dimensions, blur radius.
    """
    view = as_byte_view(image_buffer)
    if not (_is_int(width) and _is_int(height)):
        raise InvalidDimensions(width, height)
    expected = width * height * CHANNELS
    if view.nbytes != expected:
        raise BufferSizeMismatch(expected, view.nbytes)
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    if not _is_int(blur_radius) or not MIN_BLUR_RADIUS <= blur_radius <= MAX_BLUR_RADIUS:
        raise InvalidBlurRadius(blur_radius, MIN_BLUR_RADIUS, MAX_BLUR_RADIUS)
    return view


def process_image(
    image_buffer,
    width: int,
    height: int,
    blur_radius: int = DEFAULT_BLUR_RADIUS,
    engine: str = DEFAULT_ENGINE,
) -> ProcessResult:
    """Grayscale + box blur a raw RGBA buffer into a new buffer.

    duration_ms covers the pipeline only, not validation or allocation.
    """
    view = validate(image_buffer, width, height, blur_radius)
    width, height, blur_radius = int(width), int(height), int(blur_radius)
    get_engine(engine)
    output = bytearray(view.nbytes)

    logger.info("Processing %dx%d image (blur radius: %d, engine: %s)", width, height, blur_radius, engine)
    start = time.perf_counter()
    process(view, output, width, height, blur_radius, engine)
    duration_ms = int((time.perf_counter() - start) * 1000)
    logger.info("Completed in %d ms", duration_ms)

    return ProcessResult(output, duration_ms)


def handle_request(request: Mapping[str, Any], engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    """Service-style wrapper: {imageBuffer, width, height, blurRadius?} -> {data, durationMs}."""
    missing = [k for k in REQUIRED_FIELDS if request.get(k) is None]
    if missing:
        raise InvalidArgumentCount(missing)
    radius = request.get("blurRadius")
    result = process_image(
        request["imageBuffer"],
        request["width"],
        request["height"],
        DEFAULT_BLUR_RADIUS if radius is None else radius,
        engine=engine,
    )
    return result.as_response()
