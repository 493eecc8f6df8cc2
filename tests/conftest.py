import io

import pytest
from PIL import Image

KEY = (10, 20, 30)
RED = (200, 0, 0, 255)
GREEN = (0, 200, 0, 255)
BLUE = (0, 0, 200, 255)


def make_atlas(height=64, has_alpha=True):
    """Blank skin atlas. Without alpha, every pixel is the opaque KEY colour."""
    fill = (0, 0, 0, 0) if has_alpha else KEY + (255,)
    return Image.new("RGBA", (64, height), fill)


def fill_rect(image, rect, color):
    x, y, w, h = rect
    image.paste(color, (x, y, x + w, y + h))


def paint_gradient(image, rect):
    """Paints `rect` with an opaque per-pixel colour pattern."""
    x, y, w, h = rect
    for i in range(w):
        for j in range(h):
            image.putpixel((x + i, y + j), ((40 + i * 50) % 256, (40 + j * 15) % 256, (x + y) % 256, 255))


def png_bytes(image):
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def legacy_atlas():
    return make_atlas(32)


@pytest.fixture
def modern_atlas():
    return make_atlas(64)
