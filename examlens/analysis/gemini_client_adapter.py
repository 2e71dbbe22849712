import httpx
from google import genai
from google.genai import errors, types

from examlens.analysis.client_base import BaseAnalysisClient
from examlens.analysis.exceptions import (
    ConfigurationError,
    ResponseFormatError,
    ServiceUnavailableError,
    error_for_status,
)
from examlens.upload.models import NormalizedPayload


class GeminiClientAdapter(BaseAnalysisClient):
    """Analysis client adapter built on the Google Gen AI SDK."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        if not api_key:
            raise ConfigurationError("Gemini API key is missing")
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
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
            response = self._client.models.generate_content(
                model=model,
                contents=[
                    types.Part.from_bytes(
                        data=payload.raw_bytes,
                        mime_type=payload.media_type,
                    ),
                    prompt,
                ],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_json_schema=json_schema,
                    temperature=temperature,
                ),
            )
        except httpx.TransportError as exc:
            raise ServiceUnavailableError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise error_for_status(exc.code, f"AI provider API error: {exc}") from exc

        text = response.text
        if not text:
            raise ResponseFormatError("AI returned empty response")
        return text
