"""AI-powered exam paper analyzer."""

import json
from pathlib import Path

from examlens.analysis.base import BaseAnalyzer
from examlens.analysis.client_base import BaseAnalysisClient
from examlens.analysis.exceptions import ResponseFormatError
from examlens.analysis.models import AnalysisResult
from examlens.analysis.prompt_loader import load_json_schema, load_prompt_template
from examlens.analysis.validator import validate_and_build
from examlens.logging.logger import Log
from examlens.upload.models import NormalizedPayload

_MAX_TEMPERATURE = 0.5


class Analyzer(BaseAnalyzer):
    """Analyzes an exam paper with one schema-constrained AI request."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.4,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(_MAX_TEMPERATURE, temperature))
        schema_str = load_json_schema(json_schema_path)
        self._json_schema_dict = json.loads(schema_str)
        self._prompt = load_prompt_template(prompt_template_path).format(
            json_schema=schema_str,
        )

    def analyze(self, payload: NormalizedPayload) -> AnalysisResult:
        """Send the payload to the AI provider and validate its reply."""
        Log.debug(
            f"Analysis request: model={self._model}, media_type={payload.media_type}, "
            f"payload={len(payload.data)} chars"
        )

        raw_response = self._client.generate_content(
            model=self._model,
            temperature=self._temperature,
            prompt=self._prompt,
            payload=payload,
            json_schema=self._json_schema_dict,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        result = validate_and_build(parsed)

        Log.info(
            f"Analysis complete: subject={result.subject!r}, "
            f"{len(result.mistakes)} mistakes, {len(result.weaknesses)} weaknesses"
        )
        return result

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = (raw or "").strip()
        if not cleaned:
            raise ResponseFormatError("AI returned empty response")
        if cleaned.startswith("```"):
            # Opening fence is its own line; the closing one may trail the JSON.
            lines = cleaned.splitlines()[1:]
            if lines and lines[-1].rstrip().endswith("```"):
                lines[-1] = lines[-1].rstrip()[:-3]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ResponseFormatError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ResponseFormatError("JSON response must be an object")
        return parsed
