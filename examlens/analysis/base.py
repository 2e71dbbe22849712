from abc import ABC, abstractmethod

from examlens.analysis.models import AnalysisResult
from examlens.upload.models import NormalizedPayload


class BaseAnalyzer(ABC):
    """Contract for all exam analyzers."""

    @abstractmethod
    def analyze(self, payload: NormalizedPayload) -> AnalysisResult:
        """Diagnose an exam paper from its normalized image or document.

        Args:
            payload: Size-bounded content from the image normalizer.

        Returns:
            AnalysisResult with scores, weaknesses, plan and mistakes.

        Raises:
            AnalysisError: on any failure.
        """
