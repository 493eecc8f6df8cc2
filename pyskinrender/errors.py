# pyskinrender/errors.py


class SkinRenderError(Exception):
    """Base class for all skin rendering errors."""


class InvalidImage(SkinRenderError):
    """The skin could not be read as an image."""


class InvalidDimensions(InvalidImage):
    """The skin is readable but is neither 64x32 nor 64x64."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Invalid skin image: {width}x{height} (expected 64x32 or 64x64)")


class FormatMismatch(SkinRenderError):
    """A layout conversion was requested on a skin already in the target layout."""
