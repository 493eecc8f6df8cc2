# pyskinrender/regions.py
#
# Fixed coordinate tables of the Minecraft skin atlas.
# Every rectangle is (x, y, width, height) with a top-left origin.

from typing import NamedTuple, Optional, Tuple


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Pillow crop box (left, upper, right, lower)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)


class RegionMapping(NamedTuple):
    part: str
    source: Rect
    dest: Tuple[int, int]
    overlay: bool = False
    # Atlas pixel sampled as the background-key colour for overlay rows
    key: Tuple[int, int] = (62, 1)


class ViewLayout(NamedTuple):
    name: str
    size: Tuple[int, int]
    # Where the rendered face is pasted, None when the view draws its own head
    face_offset: Optional[Tuple[int, int]]
    base: Tuple[RegionMapping, ...]
    modern: Tuple[RegionMapping, ...]
    mirror: Tuple[RegionMapping, ...]


# --- Atlas formats ---
ATLAS_WIDTH = 64
LEGACY_HEIGHT = 32
MODERN_HEIGHT = 64
VALID_SIZES = ((ATLAS_WIDTH, LEGACY_HEIGHT), (ATLAS_WIDTH, MODERN_HEIGHT))

# Not (0, 0): some skin editors keep a colour palette swatch in that corner.
ALPHA_PROBE = (1, 1)


# --- Face (8x8) ---
FACE = ViewLayout(
    name="face",
    size=(8, 8),
    face_offset=None,
    base=(
        RegionMapping("head", Rect(8, 8, 8, 8), (0, 0)),
        RegionMapping("head_mask", Rect(40, 8, 8, 8), (0, 0), overlay=True),
    ),
    modern=(),
    mirror=(),
)


# --- Front (16x32) ---
FRONT = ViewLayout(
    name="front",
    size=(16, 32),
    face_offset=(4, 0),
    base=(
        RegionMapping("body", Rect(20, 20, 8, 12), (4, 8)),
        RegionMapping("right_leg", Rect(4, 20, 4, 12), (4, 20)),
        RegionMapping("right_arm", Rect(44, 20, 4, 12), (0, 8)),
    ),
    modern=(
        RegionMapping("left_leg", Rect(20, 52, 4, 12), (8, 20)),
        RegionMapping("left_arm", Rect(36, 52, 4, 12), (12, 8)),
        RegionMapping("body_2", Rect(20, 36, 8, 12), (4, 8), overlay=True),
        RegionMapping("right_leg_2", Rect(4, 36, 4, 12), (4, 20), overlay=True),
        RegionMapping("left_leg_2", Rect(4, 52, 4, 12), (8, 20), overlay=True),
        RegionMapping("right_arm_2", Rect(44, 36, 4, 12), (0, 8), overlay=True),
        RegionMapping("left_arm_2", Rect(52, 52, 4, 12), (12, 8), overlay=True),
    ),
    mirror=(
        RegionMapping("left_leg", Rect(4, 20, 4, 12), (8, 20)),
        RegionMapping("left_arm", Rect(44, 20, 4, 12), (12, 8)),
    ),
)


# --- Back (16x32) ---
BACK = ViewLayout(
    name="back",
    size=(16, 32),
    face_offset=None,
    base=(
        RegionMapping("head", Rect(24, 8, 8, 8), (4, 0)),
        RegionMapping("head_mask", Rect(56, 8, 8, 8), (4, 0), overlay=True, key=(63, 0)),
        RegionMapping("body", Rect(32, 20, 8, 12), (4, 8)),
        RegionMapping("right_leg", Rect(12, 20, 4, 12), (8, 20)),
        RegionMapping("right_arm", Rect(52, 20, 4, 12), (12, 8)),
    ),
    modern=(
        RegionMapping("left_leg", Rect(28, 52, 4, 12), (4, 20)),
        RegionMapping("left_arm", Rect(44, 52, 4, 12), (0, 8)),
        RegionMapping("body_2", Rect(32, 36, 8, 12), (4, 8), overlay=True),
        RegionMapping("right_leg_2", Rect(12, 36, 4, 12), (8, 20), overlay=True),
        RegionMapping("left_leg_2", Rect(12, 52, 4, 12), (4, 20), overlay=True),
        RegionMapping("right_arm_2", Rect(52, 36, 4, 12), (12, 8), overlay=True),
        RegionMapping("left_arm_2", Rect(60, 52, 4, 12), (0, 8), overlay=True),
    ),
    mirror=(
        RegionMapping("left_leg", Rect(12, 20, 4, 12), (4, 20)),
        RegionMapping("left_arm", Rect(52, 20, 4, 12), (0, 8)),
    ),
)


# --- Combined (32x32): front on the left, back on the right ---
COMBINED_SIZE = (32, 32)
COMBINED_OFFSETS = {"front": (0, 0), "back": (16, 0)}


# --- Layout conversion ---
# Modern second-layer blocks pushed onto the legacy single layer by to_legacy(overlay=True)
LEGACY_OVERLAY_PROMOTIONS = (
    RegionMapping("left_arm_2", Rect(40, 32, 16, 16), (40, 16)),
    RegionMapping("left_leg_2", Rect(0, 48, 16, 16), (0, 16)),
    RegionMapping("body_2", Rect(16, 32, 24, 16), (16, 16)),
)

# Legacy right limbs duplicated into the modern bottom half by to_modern()
MODERN_LIMB_DUPLICATES = (
    RegionMapping("right_arm", Rect(40, 16, 16, 16), (32, 48)),
    RegionMapping("right_leg", Rect(0, 16, 16, 16), (16, 48)),
)
