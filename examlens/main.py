from dataclasses import dataclass, field

from examlens.config.settings import Settings
from examlens.logging.logger import Log
from examlens.report.builder import ReportBuilder
from examlens.session.controller import AnalysisController, build_controller
from examlens.upload.surface import UploadSurface


@dataclass(frozen=True)
class App:
    """What the presentation layer gets: upload entry, state and reset, report view."""

    controller: AnalysisController
    upload: UploadSurface
    reports: ReportBuilder = field(default_factory=ReportBuilder)


def create_app(settings: Settings | None = None) -> App:
    """Entry point: load settings -> configure logging -> wire the session."""
    if settings is None:
        settings = Settings()
    Log.configure(settings.log_level)
    Log.info(
        f"Starting examlens ({settings.app_env}) with provider '{settings.analysis_provider}'"
    )
    controller = build_controller(settings)
    return App(controller=controller, upload=UploadSurface(controller))
