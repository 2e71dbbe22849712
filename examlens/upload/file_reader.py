from examlens.upload.exceptions import InputReadError
from examlens.upload.models import SelectedFile, UploadedFile


class FileReader:
    """Reads a selected file's bytes from disk."""

    def read(self, selected: SelectedFile) -> UploadedFile:
        """Read the selection into memory.

        Raises:
            InputReadError: if the file is missing, unreadable or empty.
        """
        try:
            raw_bytes = selected.path.read_bytes()
        except OSError as exc:
            raise InputReadError(f"Failed to read {selected.path}: {exc}") from exc
        if not raw_bytes:
            raise InputReadError(f"File is empty: {selected.path}")
        return UploadedFile(
            name=selected.name,
            media_type=selected.media_type,
            raw_bytes=raw_bytes,
        )
