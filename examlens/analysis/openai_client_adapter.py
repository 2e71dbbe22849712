import httpx
import openai

from examlens.analysis.client_base import BaseAnalysisClient
from examlens.analysis.exceptions import (
    AnalysisError,
    ConfigurationError,
    ResponseFormatError,
    ServiceUnavailableError,
    error_for_status,
)
from examlens.upload.models import NormalizedPayload


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client adapter built on OpenAI-compatible chat API."""

    DOCUMENT_FILENAME = "exam.pdf"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("OpenAI API key is missing")
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        payload: NormalizedPayload,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "analysis_result",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {
                        "role": "user",
                        "content": [
                            self._payload_part(payload),
                            {"type": "text", "text": prompt},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.TransportError) as exc:
            raise ServiceUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise error_for_status(exc.status_code, f"AI provider API error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ResponseFormatError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise ResponseFormatError("AI returned empty response")
        return content

    @classmethod
    def _payload_part(cls, payload: NormalizedPayload) -> dict[str, object]:
        data_url = f"data:{payload.media_type};base64,{payload.data}"
        if payload.is_image:
            return {"type": "image_url", "image_url": {"url": data_url}}
        return {
            "type": "file",
            "file": {"filename": cls.DOCUMENT_FILENAME, "file_data": data_url},
        }
