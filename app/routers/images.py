from fastapi import APIRouter, Depends, File, UploadFile

from app.core.config import Settings
from app.dependencies.auth import ShopPrincipal, get_settings, require_shop
from app.utils.image import image_to_base64

router = APIRouter(prefix="/images", tags=["Images"])


@router.post("/encode")
def encode_image(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
    principal: ShopPrincipal = Depends(require_shop),
):
    data = file.file.read()
    return {
        "image": image_to_base64(
            data,
            max_size=settings.IMAGE_MAX_SIZE,
            quality=settings.IMAGE_QUALITY,
        )
    }
