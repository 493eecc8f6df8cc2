from .errors import FormatMismatch, InvalidDimensions, InvalidImage, SkinRenderError
from .skins_render import SkinCompositor, SkinMeta, generate_avatar, to_png_bytes

__all__ = [
    "SkinCompositor",
    "SkinMeta",
    "SkinRenderError",
    "InvalidImage",
    "InvalidDimensions",
    "FormatMismatch",
    "generate_avatar",
    "to_png_bytes",
]
