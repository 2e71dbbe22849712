class UploadError(Exception):
    """Base exception for all upload-related errors."""


class UnsupportedMediaTypeError(UploadError):
    """Raised when a selected file is neither an image nor a PDF."""


class InputReadError(UploadError):
    """Raised when a selected file cannot be read into memory."""
