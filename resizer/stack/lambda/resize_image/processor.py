from io import BytesIO

from PIL import Image, UnidentifiedImageError

# JPEG로 저장할 수 없는 모드는 RGB로 변환
JPEG_MODES = ("RGB", "L", "CMYK")


def read_metadata(body: bytes):
    """Return ``{"width", "height", "format"}`` for ``body``, or None if it is not an image."""
    try:
        img = Image.open(BytesIO(body))
    except UnidentifiedImageError:
        return None

    width, height = img.size
    return {
        "width": width,
        "height": height,
        "format": img.format,
    }


def resize_to_width(body: bytes, target_width: int) -> bytes:
    img = Image.open(BytesIO(body))
    width, height = img.size
    target_height = max(1, round(height * target_width / width))

    image_format = img.format or "JPEG"
    # 카메라/휴대폰 JPEG는 MPO로 열리지만 결과물은 일반 JPEG로 저장
    if image_format == "MPO":
        image_format = "JPEG"
    resized = img.resize((target_width, target_height), Image.Resampling.LANCZOS)
    if image_format == "JPEG" and resized.mode not in JPEG_MODES:
        resized = resized.convert("RGB")

    buffer = BytesIO()
    resized.save(buffer, format=image_format)
    return buffer.getvalue()
