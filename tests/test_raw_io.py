"""Pillow-backed file I/O for raw RGBA buffers."""

import pytest
from PIL import Image

from raw_io import RawImage, load_rgba, save_rgba


def write_png(path, size, color):
    Image.new("RGBA", size, color).save(path)
    return path


def test_load_png_as_rgba(tmp_path):
    p = write_png(tmp_path / "red.png", (3, 2), (255, 0, 0, 128))
    raw = load_rgba(p)
    assert (raw.width, raw.height) == (3, 2)
    assert raw.size_bytes == 3 * 2 * 4
    assert raw.data[:4] == bytes((255, 0, 0, 128))


def test_load_rgb_gets_opaque_alpha(tmp_path):
    p = tmp_path / "rgb.png"
    Image.new("RGB", (2, 2), (10, 20, 30)).save(p)
    assert load_rgba(p).data[:4] == bytes((10, 20, 30, 255))


def test_png_keeps_pixels(tmp_path):
    raw = RawImage(bytes(range(16)), 2, 2)
    out = save_rgba(raw, tmp_path / "out.png")
    assert load_rgba(out).data == raw.data


def test_jpeg_flattens_alpha_onto_background(tmp_path):
    raw = RawImage(bytes((0, 0, 0, 0)) * 64, 8, 8)
    out = save_rgba(raw, tmp_path / "out.jpg")
    with Image.open(out) as img:
        assert img.mode == "RGB"
        assert all(c > 245 for c in img.getpixel((4, 4)))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rgba(tmp_path / "nope.png")


def test_unknown_suffix(tmp_path):
    with pytest.raises(ValueError, match="Unsupported output format"):
        save_rgba(RawImage(bytes(4), 1, 1), tmp_path / "out.xyz")
