# transforms.py
"""
Reference pixel transforms for raw RGBA buffers.
Uses manually implemented pixel loops (no NumPy/PIL built-ins).

Buffers are flat, row-major, 4 bytes per pixel: [R, G, B, A].
Callers validate sizes before calling in; nothing here re-checks them.
"""

from typing import Union

# Any writable/readable flat byte buffer
PixelBuffer = Union[bytes, bytearray, memoryview]

# Fixed-point luminosity weights (scaled by 256): 0.299, 0.587, 0.114
WEIGHT_R = 77
WEIGHT_G = 150
WEIGHT_B = 29


def luminance(r: int, g: int, b: int) -> int:
    """s = (77*R + 150*G + 29*B) >> 8, truncating."""
    return (WEIGHT_R * r + WEIGHT_G * g + WEIGHT_B * b) >> 8

# ---------------------------------------------------------------------
# 1. Grayscale Transformation
# ---------------------------------------------------------------------
def to_grayscale(src: PixelBuffer, dst: PixelBuffer, width: int, height: int) -> None:
    """Write (s, s, s, A) for every pixel of src into dst."""
    for offset in range(0, width * height * 4, 4):
        s = luminance(src[offset], src[offset + 1], src[offset + 2])
        dst[offset] = s
        dst[offset + 1] = s
        dst[offset + 2] = s
        dst[offset + 3] = src[offset + 3]

# ---------------------------------------------------------------------
# 2. Box Blur
# ---------------------------------------------------------------------
def box_blur(src: PixelBuffer, dst: PixelBuffer, width: int, height: int, radius: int) -> None:
    """Unweighted (2r+1)x(2r+1) mean over in-bounds neighbours.

    Out-of-bounds offsets are skipped, not padded, so edge pixels average
    fewer samples. Each channel mean is truncated (integer division).
    """
    stride = width * 4
    for y in range(height):
        # Window rows clipped to the image once per output row
        y_lo = max(0, y - radius)
        y_hi = min(height, y + radius + 1)
        for x in range(width):
            x_lo = max(0, x - radius)
            x_hi = min(width, x + radius + 1)
            r = g = b = a = 0
            for py in range(y_lo, y_hi):
                row = py * stride
                for o in range(row + x_lo * 4, row + x_hi * 4, 4):
                    r += src[o]
                    g += src[o + 1]
                    b += src[o + 2]
                    a += src[o + 3]
            count = (y_hi - y_lo) * (x_hi - x_lo)
            o = y * stride + x * 4
            dst[o] = r // count
            dst[o + 1] = g // count
            dst[o + 2] = b // count
            dst[o + 3] = a // count
