"""Turn a file path or URL into something the image_url content part accepts."""

import base64
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

REMOTE_PREFIXES = ("http://", "https://")

# Local files are always labelled JPEG, whatever their real format.
LOCAL_MIME_TYPE = "image/jpeg"


def is_remote_file(file_path: str) -> bool:
    return file_path.startswith(REMOTE_PREFIXES)


def encode_image(image_path: str) -> str:
    """Read a local image and return its standard base64 encoding."""
    image_bytes = Path(image_path).read_bytes()
    return base64.standard_b64encode(image_bytes).decode("utf-8")


def resolve_image_url(file_path: str) -> str:
    """Return ``file_path`` unchanged for remote URLs, otherwise a data URI."""
    if is_remote_file(file_path):
        logger.debug("Using remote image %s", file_path)
        return file_path
    data = encode_image(file_path)
    logger.debug("Encoded local image %s (%d base64 chars)", file_path, len(data))
    return f"data:{LOCAL_MIME_TYPE};base64,{data}"
