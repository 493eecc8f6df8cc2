# pyskinrender/canvas.py
#
# Region-level primitives shared by the compositor. Canvases are plain
# Pillow RGBA images; every helper here writes into `dst` in place.

from typing import Optional, Tuple

from PIL import Image, ImageChops

from .regions import Rect

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)


def create_canvas(width: int, height: int, rgb: Optional[RGB] = None) -> Image.Image:
    """Allocates an RGBA canvas filled with an opaque `rgb` colour, or fully transparent."""
    fill = TRANSPARENT if rgb is None else (rgb[0], rgb[1], rgb[2], 255)
    return Image.new("RGBA", (width, height), fill)


def copy_region(dst: Image.Image, src: Image.Image, dest_xy: Tuple[int, int], rect: Rect) -> None:
    """Composites `rect` of `src` onto `dst` at `dest_xy`, honouring source alpha."""
    dst.alpha_composite(src, dest=dest_xy, source=rect.box)


def paste_region(dst: Image.Image, src: Image.Image, dest_xy: Tuple[int, int], rect: Rect) -> None:
    """Replaces the destination pixels with `rect` of `src`, alpha included."""
    dst.paste(src.crop(rect.box), dest_xy)


def key_out(region: Image.Image, key_rgb: RGB) -> Image.Image:
    """Returns a copy of `region` whose pixels matching `key_rgb` are fully transparent."""
    keyed = region.copy()
    diff = ImageChops.difference(keyed.convert("RGB"), Image.new("RGB", keyed.size, tuple(key_rgb[:3])))
    r, g, b = diff.split()
    # 0 where all three channels match the key, 255 elsewhere
    mask = ImageChops.lighter(ImageChops.lighter(r, g), b).point(lambda v: 255 if v else 0)
    keyed.putalpha(ImageChops.multiply(keyed.getchannel("A"), mask))
    return keyed


def copy_region_with_background_key(
    dst: Image.Image,
    src: Image.Image,
    dest_xy: Tuple[int, int],
    rect: Rect,
    key_rgb: RGB,
    has_alpha: bool,
) -> None:
    """Composites an overlay layer (hat, jacket, sleeves, pants).

    Skins without a real alpha channel often fill the "empty" parts of the
    overlay layer with one solid colour. When `has_alpha` is false, pixels
    whose RGB equals `key_rgb` are treated as fully transparent so the base
    layer underneath stays visible; the rest blend by their own alpha.
    """
    if has_alpha:
        copy_region(dst, src, dest_xy, rect)
        return

    dst.alpha_composite(key_out(src.crop(rect.box), key_rgb), dest=dest_xy)


def mirror_region(
    dst: Image.Image,
    src: Image.Image,
    dest_xy: Tuple[int, int],
    x: int = 0,
    y: int = 0,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> None:
    """Composites a horizontally flipped copy of a `src` region onto `dst`.

    Unset or non-positive sizes fall back to the full dimensions of `src`.
    """
    if not width or width < 1:
        width = src.width
    if not height or height < 1:
        height = src.height

    limb = src.crop((x, y, x + width, y + height)).transpose(Image.FLIP_LEFT_RIGHT)
    dst.alpha_composite(limb, dest=dest_xy)


def scale_canvas(image: Image.Image, scale: int) -> Image.Image:
    """Nearest-neighbour upscale by an integer factor, keeping the pixelated look."""
    if scale == 1:
        return image
    return image.resize((image.width * scale, image.height * scale), Image.NEAREST)
