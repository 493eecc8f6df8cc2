# pyskinrender/web.py

import logging
import re
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, Response, UploadFile

from config import API_PREFIX, AVATAR_SIZE, MAX_SCALE, MAX_UPLOAD_SIZE
from .canvas import RGB
from .errors import FormatMismatch, InvalidImage
from .skins_render import VIEW_NAMES, SkinCompositor, to_png_bytes

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_PREFIX, tags=["Skins"])

HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6})$")


def parse_background(value: Optional[str]) -> Optional[RGB]:
    """Parses an `RRGGBB` (optionally `#`-prefixed) colour, None/empty means transparent."""
    if not value:
        return None
    match = HEX_COLOR.match(value.strip())
    if not match:
        raise HTTPException(status_code=400, detail="Background must be a hex colour like 'ff8800'")
    hex_value = match.group(1)
    return tuple(int(hex_value[i:i + 2], 16) for i in (0, 2, 4))


def check_scale(scale: int) -> int:
    if scale < 1 or scale > MAX_SCALE:
        raise HTTPException(status_code=400, detail=f"Scale must be between 1 and {MAX_SCALE}")
    return scale


def png_response(image) -> Response:
    return Response(content=to_png_bytes(image), media_type="image/png")


async def load_skin(skin_file: UploadFile) -> SkinCompositor:
    """Reads an uploaded skin and wraps it in a compositor, rejecting bad uploads with 400."""
    # File size limit
    contents = await skin_file.read()
    if len(contents) > MAX_UPLOAD_SIZE:
        logger.info("Rejected %s: %d bytes exceeds upload limit", skin_file.filename, len(contents))
        raise HTTPException(status_code=400, detail="File size must be less than 1MB")

    # File type validation
    if not skin_file.content_type or not skin_file.content_type.startswith("image/png"):
        logger.info("Rejected %s: content type %s", skin_file.filename, skin_file.content_type)
        raise HTTPException(status_code=400, detail="Only PNG files are allowed")

    try:
        return SkinCompositor.from_bytes(contents)
    except InvalidImage as e:
        logger.info("Rejected %s: %s", skin_file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))


# --- Endpoints ---

@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/inspect")
async def inspect_skin(skin_file: UploadFile = File(...)):
    with await load_skin(skin_file) as skin:
        return {
            "width": skin.width,
            "height": skin.height,
            "has_alpha": skin.is_alpha(),
            "is_modern_format": skin.is_modern_format(),
            "is_valid": skin.is_valid(),
        }


@router.post("/avatar")
async def avatar(skin_file: UploadFile = File(...)):
    with await load_skin(skin_file) as skin:
        return png_response(skin.render_avatar(AVATAR_SIZE))


@router.post("/render/{view}")
async def render_view(
    view: str,
    skin_file: UploadFile = File(...),
    scale: int = Form(1),
    background: Optional[str] = Form(None),
):
    if view not in VIEW_NAMES:
        raise HTTPException(status_code=404, detail=f"Unknown view '{view}'")
    check_scale(scale)
    rgb = parse_background(background)

    with await load_skin(skin_file) as skin:
        return png_response(skin.render(view, scale, rgb))


@router.post("/convert/{target}")
async def convert_skin(
    target: str,
    skin_file: UploadFile = File(...),
    overlay: bool = Form(False),
):
    if target not in ("legacy", "modern"):
        raise HTTPException(status_code=404, detail=f"Unknown target format '{target}'")

    with await load_skin(skin_file) as skin:
        try:
            if target == "legacy":
                converted = skin.to_legacy(overlay=overlay)
            else:
                converted = skin.to_modern()
        except FormatMismatch as e:
            raise HTTPException(status_code=409, detail=str(e))
        return png_response(converted)
