"""Downscales and recompresses uploaded images before they go over the wire."""

import io
import math

from PIL import Image, ImageOps, UnidentifiedImageError

from examlens.logging.logger import Log
from examlens.upload.models import NormalizedPayload, UploadedFile

_TRANSPARENT_MODES = frozenset({"RGBA", "LA", "PA"})


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def scaled_size(width: int, height: int, max_edge: int) -> tuple[int, int]:
    """Clamp the longer side to ``max_edge`` and scale the other to keep the ratio.

    Halves round up, so 2048x5 becomes 1024x3.
    """
    if width > height:
        if width > max_edge:
            return max_edge, max(1, _round_half_up(height * max_edge / width))
    elif height > max_edge:
        return max(1, _round_half_up(width * max_edge / height)), max_edge
    return width, height


class ImageNormalizer:
    """Bounds image dimensions and re-encodes images as JPEG.

    Documents (PDF) pass through untouched. Images that cannot be decoded
    are passed through with their original bytes and media type.
    """

    OUTPUT_MEDIA_TYPE = "image/jpeg"

    def __init__(self, *, max_edge: int = 1024, quality: int = 50) -> None:
        self._max_edge = max_edge
        self._quality = quality

    def normalize(self, upload: UploadedFile) -> NormalizedPayload:
        if not upload.media_type.startswith("image/"):
            Log.debug(f"Passing {upload.name} through unchanged ({upload.media_type})")
            return NormalizedPayload.from_bytes(upload.raw_bytes, upload.media_type)

        try:
            encoded, size = self._recompress(upload.raw_bytes)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
            Log.warning(
                "Image compression failed, using original data", file=upload.name, error=exc
            )
            return NormalizedPayload.from_bytes(upload.raw_bytes, upload.media_type)

        Log.info(
            "Compressed image",
            file=upload.name,
            size=f"{size[0]}x{size[1]}",
            bytes_in=len(upload.raw_bytes),
            bytes_out=len(encoded),
        )
        return NormalizedPayload.from_bytes(encoded, self.OUTPUT_MEDIA_TYPE)

    def _recompress(self, raw: bytes) -> tuple[bytes, tuple[int, int]]:
        with Image.open(io.BytesIO(raw)) as source:
            source.load()
            image = ImageOps.exif_transpose(source)
            image = self._to_rgb(image)
            size = scaled_size(image.width, image.height, self._max_edge)
            if size != image.size:
                image = image.resize(size, Image.Resampling.LANCZOS)
            buffer = io.BytesIO()
            image.save(buffer, format="JPEG", quality=self._quality)
        return buffer.getvalue(), size

    @staticmethod
    def _to_rgb(image: Image.Image) -> Image.Image:
        if image.mode == "P" and "transparency" in image.info:
            image = image.convert("RGBA")
        if image.mode in _TRANSPARENT_MODES:
            rgba = image.convert("RGBA")
            background = Image.new("RGB", rgba.size, (255, 255, 255))
            background.paste(rgba, mask=rgba.getchannel("A"))
            return background
        if image.mode != "RGB":
            return image.convert("RGB")
        return image
