import json
from pathlib import Path

from examlens.analysis.exceptions import AnalysisError

_BUNDLED_DIR = Path(__file__).parent / "prompts"
_PROMPT_FILE = "analysis_prompt.txt"
_SCHEMA_FILE = "analysis_schema.json"


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load {what}: {exc}") from exc


def load_prompt_template(path: Path | None = None) -> str:
    """Load the exam analysis instructions.

    The returned template carries a ``{json_schema}`` placeholder; every
    other brace in it is literal text and must be doubled.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    return _read(path or _BUNDLED_DIR / _PROMPT_FILE, "prompt template")


def load_json_schema(path: Path | None = None) -> str:
    """Load the response schema as text, checking that it is a JSON object.

    Raises:
        AnalysisError: if the file cannot be read or is not a JSON object.
    """
    text = _read(path or _BUNDLED_DIR / _SCHEMA_FILE, "JSON schema")
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AnalysisError(f"JSON schema is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise AnalysisError("JSON schema must be an object")
    return text
