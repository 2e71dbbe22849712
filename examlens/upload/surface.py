from examlens.logging.logger import Log
from examlens.session.controller import AnalysisController
from examlens.session.state import AppState
from examlens.upload.exceptions import UnsupportedMediaTypeError
from examlens.upload.models import SelectedFile

UNSUPPORTED_MEDIA_TYPE_NOTICE = "Please upload an image or PDF file."
_DOCUMENT_MEDIA_TYPE = "application/pdf"


def accepts(media_type: str) -> bool:
    """Images of any subtype and PDF documents are accepted."""
    return media_type.startswith("image/") or media_type == _DOCUMENT_MEDIA_TYPE


class UploadSurface:
    """Entry point for drag-and-drop or file-picker selections."""

    def __init__(self, controller: AnalysisController) -> None:
        self._controller = controller

    @property
    def enabled(self) -> bool:
        return not self._controller.is_busy

    async def select(self, selected: SelectedFile) -> AppState:
        """Validate a selection and hand it to the controller.

        Raises:
            UnsupportedMediaTypeError: before any processing, for other file types.
        """
        if not accepts(selected.media_type):
            Log.warning("Rejected upload", file=selected.name, media_type=selected.media_type)
            raise UnsupportedMediaTypeError(UNSUPPORTED_MEDIA_TYPE_NOTICE)
        if not self.enabled:
            Log.warning("Upload disabled while analyzing", file=selected.name)
            return self._controller.state
        return await self._controller.submit(selected)
