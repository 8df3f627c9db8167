# errors.py
"""
Errors raised at the host boundary, before any pixel is touched.
The transforms themselves never raise.
"""


class PixelPipelineError(ValueError):
    """Base class for rejected pipeline calls."""


class InvalidArgumentCount(PixelPipelineError):
    def __init__(self, missing=()):
        self.missing = tuple(missing)
        msg = "Expected at least 3 arguments: imageBuffer, width, height, [blurRadius]"
        if self.missing:
            msg += f" (missing: {', '.join(self.missing)})"
        super().__init__(msg)


class BufferSizeMismatch(PixelPipelineError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Buffer size mismatch: expected width * height * 4 bytes ({expected}), got {actual}"
        )


class InvalidDimensions(PixelPipelineError):
    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(f"Width and height must be positive (got {width}x{height})")


class InvalidBlurRadius(PixelPipelineError):
    def __init__(self, radius, lo: int, hi: int):
        self.radius = radius
        super().__init__(f"Blur radius must be between {lo} and {hi} (got {radius})")


class UnknownEngine(PixelPipelineError):
    def __init__(self, name, available):
        self.name = name
        super().__init__(f"Unknown engine {name!r}; choose one of: {', '.join(available)}")
