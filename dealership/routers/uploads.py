"""
Image upload route used by the admin car form.
"""
import logging
from fastapi import APIRouter, Depends, File, UploadFile

from dealership.errors import ValidationFailed
from dealership.images import ImageUploader, get_image_uploader
from dealership.schemas.upload import UploadResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("/", response_model=UploadResult)
async def upload_image(
    file: UploadFile = File(...),
    uploader: ImageUploader = Depends(get_image_uploader),
):
    """
    Upload one car photo to the image host and return its URL.
    """
    data = await file.read()
    if not data:
        raise ValidationFailed("Uploaded file is empty")

    image = await uploader.upload(data, file.filename or "upload")
    logger.info(f"Uploaded image {image.public_id}")
    return UploadResult(url=image.url, public_id=image.public_id)
