# pyskinrender/skins_render.py

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, Optional, Tuple, Union

from PIL import Image

from .canvas import (
    RGB,
    copy_region,
    copy_region_with_background_key,
    create_canvas,
    mirror_region,
    paste_region,
    scale_canvas,
)
from .errors import FormatMismatch, InvalidDimensions, InvalidImage, SkinRenderError
from .regions import (
    ALPHA_PROBE,
    ATLAS_WIDTH,
    BACK,
    COMBINED_OFFSETS,
    COMBINED_SIZE,
    FACE,
    FRONT,
    LEGACY_HEIGHT,
    LEGACY_OVERLAY_PROMOTIONS,
    MODERN_HEIGHT,
    MODERN_LIMB_DUPLICATES,
    VALID_SIZES,
    Rect,
    RegionMapping,
    ViewLayout,
)

logger = logging.getLogger(__name__)

VIEW_NAMES = ("face", "front", "back", "combined")


@dataclass(frozen=True)
class SkinMeta:
    has_alpha: bool
    is_modern_format: bool
    is_valid: bool


def _check_positive(scale) -> None:
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 1:
        raise ValueError(f"Expected a positive integer, got {scale!r}")


def _check_rgb(rgb) -> None:
    if rgb is None:
        return
    if not isinstance(rgb, tuple) or len(rgb) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in rgb):
        raise ValueError(f"Background must be an (r, g, b) tuple of 0-255 ints, got {rgb!r}")


class SkinCompositor:
    """Renders 2D views of a single Minecraft skin atlas.

    The atlas is validated and copied at construction, so no instance ever
    exists for an unreadable or wrongly sized skin. Every render call
    returns a new Pillow image that belongs to the caller.
    """

    def __init__(self, image: Optional[Image.Image]):
        if image is None:
            raise InvalidImage("Could not read png image.")

        width, height = image.size
        if (width, height) not in VALID_SIZES:
            raise InvalidDimensions(width, height)

        self._image = image.convert("RGBA")
        # The atlas never changes after this point, so the metadata is computed once.
        self.meta = SkinMeta(
            has_alpha=self._image.getpixel(ALPHA_PROBE)[3] == 0,
            is_modern_format=height == MODERN_HEIGHT,
            is_valid=True,
        )
        logger.debug("Loaded %dx%d skin (alpha=%s)", width, height, self.meta.has_alpha)

    @classmethod
    def from_file(cls, path: Union[str, Path, BinaryIO]) -> "SkinCompositor":
        try:
            with Image.open(path) as img:
                # Reject on the header before decoding any pixel data
                if img.size not in VALID_SIZES:
                    raise InvalidDimensions(*img.size)
                img.load()
                return cls(img)
        except (OSError, Image.DecompressionBombError) as e:
            raise InvalidImage(f"Could not read png image: {e}") from e

    @classmethod
    def from_bytes(cls, data: bytes) -> "SkinCompositor":
        if not data:
            raise InvalidImage("Could not read png image: empty data")
        return cls.from_file(io.BytesIO(data))

    # --- Lifetime ---

    def close(self) -> None:
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def atlas(self) -> Image.Image:
        if self._image is None:
            raise SkinRenderError("Skin compositor is closed")
        return self._image

    # --- Metadata ---

    @property
    def width(self) -> int:
        return self.atlas.width

    @property
    def height(self) -> int:
        return self.atlas.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.atlas.size

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    def is_alpha(self) -> bool:
        """True if the skin has a real alpha channel (pixel (1, 1) is fully transparent)."""
        return self.meta.has_alpha

    def is_valid(self) -> bool:
        return self.meta.is_valid

    def is_modern_format(self) -> bool:
        """True for 64x64 (1.8+) skins, False for legacy 64x32 ones."""
        return self.meta.is_modern_format

    # --- Rendering ---

    def _key_color(self, xy: Tuple[int, int]) -> RGB:
        return self.atlas.getpixel(xy)[:3]

    def _draw(self, canvas: Image.Image, rows: Iterable[RegionMapping]) -> None:
        for row in rows:
            if row.overlay:
                copy_region_with_background_key(
                    canvas, self.atlas, row.dest, row.source,
                    self._key_color(row.key), self.meta.has_alpha,
                )
            else:
                copy_region(canvas, self.atlas, row.dest, row.source)

    def _render_body(self, layout: ViewLayout, scale: int, rgb: Optional[RGB]) -> Image.Image:
        _check_positive(scale)
        _check_rgb(rgb)

        canvas = create_canvas(*layout.size, rgb=rgb)

        # head with mask
        if layout.face_offset is not None:
            copy_region(canvas, self.render_face(), layout.face_offset, Rect(0, 0, *FACE.size))

        self._draw(canvas, layout.base)

        if self.meta.is_modern_format:
            self._draw(canvas, layout.modern)
        else:
            # Legacy skins have no left limbs; flip the right ones instead
            for row in layout.mirror:
                mirror_region(canvas, self.atlas, row.dest, *row.source)

        return scale_canvas(canvas, scale)

    def render_face(self, scale: int = 1) -> Image.Image:
        """Returns the 8x8 face with its hat layer, scaled by `scale`."""
        _check_positive(scale)
        canvas = create_canvas(*FACE.size)
        self._draw(canvas, FACE.base)
        return scale_canvas(canvas, scale)

    def render_avatar(self, size: int = 128) -> Image.Image:
        """Returns the face resized to exactly `size` x `size` pixels, keeping the pixelated look."""
        _check_positive(size)
        return self.render_face().resize((size, size), Image.NEAREST)

    def render_front(self, scale: int = 1, rgb: Optional[RGB] = None) -> Image.Image:
        """Returns the 16x32 front view. `rgb` sets an opaque background, None keeps it transparent."""
        return self._render_body(FRONT, scale, rgb)

    def render_back(self, scale: int = 1, rgb: Optional[RGB] = None) -> Image.Image:
        """Returns the 16x32 back view. `rgb` sets an opaque background, None keeps it transparent."""
        return self._render_body(BACK, scale, rgb)

    def render_combined(self, scale: int = 1, rgb: Optional[RGB] = None) -> Image.Image:
        """Returns the front and back views side by side on a 32x32 canvas."""
        _check_positive(scale)
        _check_rgb(rgb)

        canvas = create_canvas(*COMBINED_SIZE, rgb=rgb)
        front = self.render_front(1, rgb)
        back = self.render_back(1, rgb)
        copy_region(canvas, front, COMBINED_OFFSETS["front"], Rect(0, 0, *FRONT.size))
        copy_region(canvas, back, COMBINED_OFFSETS["back"], Rect(0, 0, *BACK.size))

        return scale_canvas(canvas, scale)

    def render(self, view: str, scale: int = 1, rgb: Optional[RGB] = None) -> Image.Image:
        if view == "face":
            return self.render_face(scale)
        if view == "front":
            return self.render_front(scale, rgb)
        if view == "back":
            return self.render_back(scale, rgb)
        if view == "combined":
            return self.render_combined(scale, rgb)
        raise ValueError(f"Unknown view {view!r}, expected one of {', '.join(VIEW_NAMES)}")

    # --- Layout conversion ---

    def to_legacy(self, overlay: bool = False) -> Image.Image:
        """Degrades a 64x64 skin to the 64x32 layout.

        With `overlay`, the modern second-layer blocks are drawn over the
        legacy single layer; arms and legs may show artifacts.
        """
        if not self.meta.is_modern_format:
            raise FormatMismatch("Skin not in 1.8 format!")

        canvas = create_canvas(ATLAS_WIDTH, LEGACY_HEIGHT)
        paste_region(canvas, self.atlas, (0, 0), Rect(0, 0, ATLAS_WIDTH, LEGACY_HEIGHT))

        if overlay:
            self._draw(canvas, LEGACY_OVERLAY_PROMOTIONS)

        logger.debug("Converted skin to legacy format (overlay=%s)", overlay)
        return canvas

    def to_modern(self) -> Image.Image:
        """Extends a 64x32 skin to the 64x64 layout.

        The right arm and leg are duplicated into the new bottom half; the
        overlay layers stay empty.
        """
        if self.meta.is_modern_format:
            raise FormatMismatch("Skin already in 1.8 format!")

        canvas = create_canvas(ATLAS_WIDTH, MODERN_HEIGHT)
        paste_region(canvas, self.atlas, (0, 0), Rect(0, 0, ATLAS_WIDTH, LEGACY_HEIGHT))

        for row in MODERN_LIMB_DUPLICATES:
            paste_region(canvas, self.atlas, row.dest, row.source)

        logger.debug("Converted skin to 1.8 format")
        return canvas


def to_png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def generate_avatar(skin_path, output_path, size: int = 128):
    """Writes a pixelated face avatar of `size` x `size` pixels for the skin at `skin_path`."""
    with SkinCompositor.from_file(skin_path) as skin:
        avatar = skin.render_avatar(size)
    avatar.save(output_path, format="PNG")
    return avatar.size
