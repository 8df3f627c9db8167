#!/usr/bin/env python3
"""
raw_io.py — Image files <-> raw RGBA buffers (Pillow)

Host-side helpers only: the pipeline itself never decodes or encodes.
Reads:
- Any Pillow-supported file, EXIF orientation applied, converted to RGBA
Writes:
- Format chosen by suffix; formats without alpha are flattened onto a
  solid background first
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from PIL import Image, ImageOps

from settings import FLATTEN_BACKGROUND, JPEG_QUALITY

logger = logging.getLogger(__name__)

# Pillow formats that cannot store an alpha channel
NO_ALPHA_FORMATS = {"JPEG", "PPM", "PCX"}


@dataclass
class RawImage:
    data: bytes
    width: int
    height: int

    @property
    def size_bytes(self) -> int:
        return len(self.data)


def load_rgba(path: Union[str, Path]) -> RawImage:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Image not found: {path}")
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img).convert("RGBA")
        raw = RawImage(img.tobytes(), img.width, img.height)
    logger.debug("Loaded %s: %dx%d (%.2f MB)", path, raw.width, raw.height, raw.size_bytes / 1024 / 1024)
    return raw


def to_image(raw: RawImage) -> Image.Image:
    return Image.frombytes("RGBA", (raw.width, raw.height), bytes(raw.data))


def save_rgba(raw: RawImage, path: Union[str, Path], quality: int = JPEG_QUALITY,
              background: str = FLATTEN_BACKGROUND) -> Path:
    path = Path(path)
    fmt = Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise ValueError(f"Unsupported output format: {path.suffix or path.name}")

    img = to_image(raw)
    if fmt in NO_ALPHA_FORMATS:
        flat = Image.new("RGB", img.size, background)
        flat.paste(img, mask=img.getchannel("A"))
        img = flat
    if fmt == "JPEG":
        img.save(path, format=fmt, quality=quality)
    else:
        img.save(path, format=fmt)
    logger.debug("Saved %s (%s)", path, fmt)
    return path


if __name__ == "__main__":
    import sys
    if len(sys.argv) < 2:
        print("Usage: python raw_io.py <image>")
    else:
        r = load_rgba(sys.argv[1])
        print(f"Dimensions: {r.width} × {r.height}")
        print(f"Buffer size: {r.size_bytes} bytes")
