import asyncio
from collections.abc import Callable
from functools import partial

from examlens.analysis.base import BaseAnalyzer
from examlens.analysis.exceptions import AnalysisError
from examlens.analysis.factory import AnalyzerFactory
from examlens.analysis.models import AnalysisResult
from examlens.config.settings import Settings
from examlens.imaging.normalizer import ImageNormalizer
from examlens.logging.logger import Log
from examlens.session.messages import GENERIC_FAILURE_MESSAGE, user_message
from examlens.session.state import AppState
from examlens.upload.exceptions import UploadError
from examlens.upload.file_reader import FileReader
from examlens.upload.models import SelectedFile


class AnalysisController:
    """Owns the session state and runs one analysis at a time.

    Pipeline: read -> normalize -> request -> parse. Blocking stages run in
    worker threads so the event loop stays responsive.
    """

    def __init__(
        self,
        *,
        reader: FileReader,
        normalizer: ImageNormalizer,
        analyzer_factory: Callable[[], BaseAnalyzer],
    ) -> None:
        self._reader = reader
        self._normalizer = normalizer
        self._analyzer_factory = analyzer_factory
        self._state = AppState.idle()

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state.is_analyzing

    async def submit(self, selected: SelectedFile) -> AppState:
        """Analyze a selected file, ignoring it if an analysis is in flight."""
        if self.is_busy:
            Log.warning("Ignoring upload: an analysis is already in progress", file=selected.name)
            return self._state

        # The transition happens before the first await so a concurrent
        # submit sees the busy state.
        self._state = self._state.submit()
        Log.info("Analyzing upload", file=selected.name, media_type=selected.media_type)
        try:
            result = await self._run_pipeline(selected)
        except (AnalysisError, UploadError) as exc:
            Log.error("Analysis failed", file=selected.name, error=exc)
            self._state = self._state.fail(user_message(exc))
        except Exception:
            Log.exception("Unexpected failure during analysis", file=selected.name)
            self._state = self._state.fail(GENERIC_FAILURE_MESSAGE)
        else:
            self._state = self._state.succeed(result)
        return self._state

    def reset(self) -> AppState:
        """Return to idle, discarding the current result or error."""
        self._state = self._state.reset()
        return self._state

    async def _run_pipeline(self, selected: SelectedFile) -> AnalysisResult:
        analyzer = await asyncio.to_thread(self._analyzer_factory)
        upload = await asyncio.to_thread(self._reader.read, selected)
        payload = await asyncio.to_thread(self._normalizer.normalize, upload)
        return await asyncio.to_thread(analyzer.analyze, payload)


def build_controller(settings: Settings) -> AnalysisController:
    """Build an AnalysisController with all required adapters."""
    normalizer = ImageNormalizer(
        max_edge=settings.image_max_edge,
        quality=settings.image_jpeg_quality,
    )
    return AnalysisController(
        reader=FileReader(),
        normalizer=normalizer,
        analyzer_factory=partial(AnalyzerFactory.create, settings),
    )
