from abc import ABC, abstractmethod

from examlens.upload.models import NormalizedPayload


class BaseAnalysisClient(ABC):
    """Contract for provider-specific multimodal AI clients."""

    @abstractmethod
    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        payload: NormalizedPayload,
        json_schema: dict[str, object],
    ) -> str:
        """Send the payload and prompt in one request and return the reply text.

        Raises:
            AnalysisError: or one of its subclasses, on any provider failure.
        """
