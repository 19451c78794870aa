"""Cloudinary client for car photo uploads."""

import logging
from dataclasses import dataclass

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from fastapi.concurrency import run_in_threadpool

from dealership.config import get_settings
from dealership.errors import ImageUploadError

logger = logging.getLogger(__name__)

# Every car photo is cropped to the same 4:3 frame used by the listing cards.
CAR_IMAGE_TRANSFORMATION = [{"width": 800, "height": 600, "crop": "fill", "quality": "auto"}]


@dataclass
class UploadedImage:
    url: str
    public_id: str


class ImageUploader:
    """Uploads through the Cloudinary SDK with per-call credentials."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "carmazon",
        timeout: float = 30.0,
    ):
        """
        Initialize the uploader.

        Args:
            cloud_name: Cloudinary cloud name.
            api_key: Public API key.
            api_secret: Secret the SDK signs upload parameters with.
            folder: Root folder; car photos land in ``<folder>/cars``.
            timeout: Request timeout in seconds.
        """
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def upload_options(self, filename: str) -> dict:
        return {
            "folder": f"{self.folder}/cars",
            "transformation": CAR_IMAGE_TRANSFORMATION,
            "resource_type": "auto",
            "filename": filename,
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "timeout": self.timeout,
        }

    async def upload(self, data: bytes, filename: str = "upload") -> UploadedImage:
        """
        Upload one image and return its public URL.

        Raises:
            ImageUploadError: not configured, host unreachable, or upload rejected.
        """
        if not self.is_configured():
            raise ImageUploadError("Image hosting is not configured")

        try:
            # The SDK is blocking
            result = await run_in_threadpool(
                cloudinary.uploader.upload, data, **self.upload_options(filename)
            )
        except CloudinaryError as e:
            logger.error(f"Image host rejected the upload: {e}")
            raise ImageUploadError("Image host rejected the upload")

        try:
            return UploadedImage(url=result["secure_url"], public_id=result["public_id"])
        except (TypeError, KeyError) as e:
            logger.error(f"Unexpected image host response: {e}")
            raise ImageUploadError("Unexpected response from image host")


def get_image_uploader() -> ImageUploader:
    """FastAPI dependency building the uploader from settings."""
    settings = get_settings()
    return ImageUploader(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
        folder=settings.cloudinary_folder,
        timeout=settings.upload_timeout_seconds,
    )
