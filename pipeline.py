# pipeline.py
"""
Grayscale-then-blur pipeline over raw RGBA buffers.

The two stages run back to back over the whole frame: blur reads
neighbouring pixels, so every pixel must already be gray before the
first window is summed.
"""

from contextlib import contextmanager
from types import ModuleType
from typing import Dict, Iterator

import fast_transforms
import transforms
from errors import UnknownEngine
from settings import CHANNELS, DEFAULT_ENGINE
from transforms import PixelBuffer

ENGINES: Dict[str, ModuleType] = {
    "reference": transforms,
    "numpy": fast_transforms,
}


def get_engine(name: str) -> ModuleType:
    try:
        return ENGINES[name]
    except KeyError:
        raise UnknownEngine(name, sorted(ENGINES)) from None


@contextmanager
def scratch_buffer(size: int) -> Iterator[bytearray]:
    """Fresh zeroed buffer owned by a single process() call.

    Not resized on exit: numpy views may still hold an export of it while
    an exception unwinds. Dropping the last reference frees it.
    """
    buf = bytearray(size)
    try:
        yield buf
    finally:
        del buf


def process(
    src: PixelBuffer,
    dst: PixelBuffer,
    width: int,
    height: int,
    blur_radius: int,
    engine: str = DEFAULT_ENGINE,
) -> None:
    """Grayscale src into a scratch buffer, then box-blur it into dst.

    src and dst must be distinct buffers of width*height*4 bytes; see
    boundary.validate for the checks a host has to run first.
    """
    impl = get_engine(engine)
    with scratch_buffer(width * height * CHANNELS) as gray:
        impl.to_grayscale(src, gray, width, height)
        impl.box_blur(gray, dst, width, height, blur_radius)
