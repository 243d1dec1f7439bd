"""Image hosting client for avatars and cover photos (Imgur)."""

import base64
import logging
from dataclasses import dataclass

import httpx

from simple_twitter.config import get_settings

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


@dataclass
class ImageFile:
    """An uploaded image read into memory."""

    filename: str
    content_type: str | None
    data: bytes


class ImgurUploader:
    """Service for uploading images to Imgur."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        settings = get_settings()
        self.client_id = settings.imgur_client_id
        self.api_url = settings.imgur_api_url
        self.timeout = settings.upload_timeout_seconds
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        """Check if the Imgur client id is configured."""
        return bool(self.client_id)

    async def upload(self, image: ImageFile) -> str:
        """Upload an image and return its public link."""
        if not self.is_configured:
            raise ValueError("Imgur API not configured")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(
                    self.api_url,
                    headers={"Authorization": f"Client-ID {self.client_id}"},
                    data={
                        "image": base64.b64encode(image.data).decode("utf-8"),
                        "type": "base64",
                        "name": image.filename,
                    },
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                logger.error(f"Imgur upload of '{image.filename}' failed: {e}")
                raise

        link = response.json()["data"]["link"]
        logger.info(f"Uploaded '{image.filename}' to {link}")
        return link
