"""Image loading and encoding utilities"""

import base64
from pathlib import Path

from ..exceptions import ImageReadError, PermissionDenied
from ..models.travel_models import ImageReference

_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


def load_image_bytes(image: ImageReference) -> bytes:
    """Resolve an image reference to its raw bytes

    Raises:
        PermissionDenied: The file exists but may not be read
        ImageReadError: The reference cannot be resolved to image bytes
    """
    if isinstance(image, (bytes, bytearray)):
        data = bytes(image)
    elif isinstance(image, (str, Path)):
        path = Path(image).expanduser()
        try:
            data = path.read_bytes()
        except PermissionError as e:
            raise PermissionDenied(f"Permission denied reading image: {path}") from e
        except OSError as e:
            raise ImageReadError(f"Cannot read image {path}: {e}") from e
    else:
        raise ImageReadError(f"Unsupported image reference: {type(image).__name__}")

    if not data:
        raise ImageReadError("Image is empty")
    return data


def guess_mime_type(data: bytes) -> str:
    """Sniff the image MIME type from its magic bytes, defaulting to JPEG"""
    for signature, mime_type in _SIGNATURES:
        if data.startswith(signature):
            return mime_type
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def encode_image_data_url(data: bytes) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{guess_mime_type(data)};base64,{encoded}"
