import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class SelectedFile:
    """A file the user picked or dropped, not yet read."""

    path: Path
    media_type: str
    name: str

    @classmethod
    def from_path(cls, path: Path, media_type: str | None = None) -> "SelectedFile":
        """Build a selection, guessing the media type from the file name if needed."""
        if not media_type:
            guessed, _ = mimetypes.guess_type(path.name)
            media_type = guessed or _FALLBACK_MEDIA_TYPE
        return cls(path=path, media_type=media_type, name=path.name)


@dataclass(frozen=True)
class UploadedFile:
    """Raw bytes of a selected file plus its declared media type."""

    name: str
    media_type: str
    raw_bytes: bytes


@dataclass(frozen=True)
class NormalizedPayload:
    """Size-bounded, base64-encoded content ready to send to the AI service."""

    data: str
    media_type: str

    @classmethod
    def from_bytes(cls, raw: bytes, media_type: str) -> "NormalizedPayload":
        return cls(data=base64.b64encode(raw).decode("ascii"), media_type=media_type)

    @property
    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.data)

    @property
    def is_image(self) -> bool:
        return self.media_type.startswith("image/")
