from PIL import Image

from pyskinrender.canvas import (
    copy_region,
    copy_region_with_background_key,
    create_canvas,
    key_out,
    mirror_region,
    paste_region,
    scale_canvas,
)
from pyskinrender.regions import Rect

from conftest import BLUE, GREEN, KEY, RED, paint_gradient


def test_create_canvas_transparent_by_default():
    canvas = create_canvas(16, 32)
    assert canvas.mode == "RGBA"
    assert canvas.size == (16, 32)
    assert canvas.getpixel((5, 5)) == (0, 0, 0, 0)


def test_create_canvas_with_background():
    canvas = create_canvas(8, 8, rgb=(255, 128, 0))
    assert canvas.getpixel((7, 7)) == (255, 128, 0, 255)


def assert_close(actual, expected, tolerance=1):
    assert len(actual) == len(expected)
    assert all(abs(a - e) <= tolerance for a, e in zip(actual, expected)), (actual, expected)


def test_copy_region_opaque_source_replaces():
    src = Image.new("RGBA", (2, 2), RED)
    dst = Image.new("RGBA", (2, 2), BLUE)

    copy_region(dst, src, (0, 0), Rect(0, 0, 2, 2))

    assert dst.getpixel((1, 1)) == RED


def test_copy_region_half_alpha():
    src = Image.new("RGBA", (1, 1), (255, 0, 0, 128))
    dst = Image.new("RGBA", (1, 1), (0, 0, 255, 255))

    copy_region(dst, src, (0, 0), Rect(0, 0, 1, 1))

    assert dst.getpixel((0, 0)) == (128, 0, 127, 255)


def test_copy_region_uses_source_offset():
    src = Image.new("RGBA", (8, 8), (0, 0, 0, 0))
    src.putpixel((5, 6), GREEN)
    dst = Image.new("RGBA", (4, 4), (0, 0, 0, 0))

    copy_region(dst, src, (1, 1), Rect(4, 4, 3, 3))

    assert dst.getpixel((2, 3)) == GREEN
    assert dst.getpixel((0, 0)) == (0, 0, 0, 0)



def test_copy_region_respects_source_alpha():
    src = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    src.putpixel((1, 1), GREEN)
    dst = Image.new("RGBA", (4, 4), BLUE)

    copy_region(dst, src, (0, 0), Rect(0, 0, 4, 4))

    assert dst.getpixel((1, 1)) == GREEN
    assert dst.getpixel((0, 0)) == BLUE


def test_paste_region_replaces_alpha_too():
    src = Image.new("RGBA", (4, 4), (7, 8, 9, 0))
    dst = Image.new("RGBA", (4, 4), BLUE)

    paste_region(dst, src, (2, 2), Rect(0, 0, 2, 2))

    assert dst.getpixel((2, 2)) == (7, 8, 9, 0)
    assert dst.getpixel((1, 1)) == BLUE


def test_background_key_pixels_are_skipped_without_alpha():
    src = Image.new("RGBA", (4, 4), KEY + (255,))
    src.putpixel((2, 3), GREEN)
    dst = Image.new("RGBA", (4, 4), RED)

    copy_region_with_background_key(dst, src, (0, 0), Rect(0, 0, 4, 4), KEY, has_alpha=False)

    assert dst.getpixel((2, 3)) == GREEN
    assert dst.getpixel((0, 0)) == RED
    assert dst.getpixel((3, 3)) == RED


def test_background_key_ignored_when_skin_has_alpha():
    src = Image.new("RGBA", (2, 2), KEY + (255,))
    dst = Image.new("RGBA", (2, 2), RED)

    copy_region_with_background_key(dst, src, (0, 0), Rect(0, 0, 2, 2), KEY, has_alpha=True)

    assert dst.getpixel((1, 1)) == KEY + (255,)


def test_background_key_compares_rgb_only():
    src = Image.new("RGBA", (1, 1), KEY + (0,))
    dst = Image.new("RGBA", (1, 1), RED)

    copy_region_with_background_key(dst, src, (0, 0), Rect(0, 0, 1, 1), KEY, has_alpha=False)

    assert dst.getpixel((0, 0)) == RED


def test_mirror_region_flips_horizontally():
    src = Image.new("RGBA", (10, 12), (0, 0, 0, 0))
    paint_gradient(src, (4, 0, 4, 12))
    dst = Image.new("RGBA", (4, 12), (0, 0, 0, 0))

    mirror_region(dst, src, (0, 0), 4, 0, 4, 12)

    for i in range(4):
        for j in range(12):
            assert dst.getpixel((i, j)) == src.getpixel((4 + 3 - i, j))


def test_mirror_region_defaults_to_full_source():
    src = Image.new("RGBA", (3, 2), (0, 0, 0, 0))
    paint_gradient(src, (0, 0, 3, 2))
    dst = Image.new("RGBA", (5, 5), (0, 0, 0, 0))

    mirror_region(dst, src, (1, 1), width=0, height=-1)

    assert dst.getpixel((1, 1)) == src.getpixel((2, 0))
    assert dst.getpixel((3, 2)) == src.getpixel((0, 1))
    assert dst.getpixel((0, 0)) == (0, 0, 0, 0)


def test_scale_canvas():
    image = Image.new("RGBA", (2, 1), RED)
    image.putpixel((1, 0), GREEN)

    assert scale_canvas(image, 1) is image

    scaled = scale_canvas(image, 3)
    assert scaled.size == (6, 3)
    assert scaled.getpixel((2, 2)) == RED
    assert scaled.getpixel((3, 0)) == GREEN


def test_key_out_clears_only_key_pixels():
    region = Image.new("RGBA", (2, 1), KEY + (255,))
    region.putpixel((1, 0), (10, 20, 31, 200))

    keyed = key_out(region, KEY)

    assert keyed.getpixel((0, 0))[3] == 0
    assert keyed.getpixel((1, 0)) == (10, 20, 31, 200)
    assert region.getpixel((0, 0)) == KEY + (255,)


def test_background_key_blends_translucent_pixels_by_their_alpha():
    src = Image.new("RGBA", (2, 1), KEY + (255,))
    src.putpixel((1, 0), (0, 0, 255, 128))
    dst = Image.new("RGBA", (2, 1), RED)

    copy_region_with_background_key(dst, src, (0, 0), Rect(0, 0, 2, 1), KEY, has_alpha=False)

    assert dst.getpixel((0, 0)) == RED
    # about half red base, half blue overlay
    assert_close(dst.getpixel((1, 0)), (100, 0, 128, 255))
