import base64
import io

from PIL import Image, UnidentifiedImageError

from app.core.errors import InvalidImage


def image_to_base64(data: bytes, max_size: int = 900, quality: float = 0.75) -> str:
    """
    Shrinks an uploaded picture to fit in max_size x max_size (never
    upscales) and re-encodes it as JPEG.

    Returns pure base64, without the "data:image/jpeg;base64," prefix,
    which is what category and product records store.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img = img.convert("RGB")
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImage() from e

    width, height = img.size
    ratio = min(max_size / width, max_size / height, 1)
    if ratio < 1:
        size = (max(1, round(width * ratio)), max(1, round(height * ratio)))
        img = img.resize(size, Image.Resampling.LANCZOS)

    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=int(quality * 100))
    return base64.b64encode(buf.getvalue()).decode("ascii")
