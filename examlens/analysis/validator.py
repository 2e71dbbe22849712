"""Validates parsed AI output against the analysis result contract."""

import math
from collections.abc import Callable
from typing import Any, TypeVar

from examlens.analysis.exceptions import ResponseFormatError
from examlens.analysis.models import AnalysisResult, Mistake, PlanItem, Weakness

T = TypeVar("T")

_TOP_LEVEL_FIELDS = (
    "subject",
    "estimatedScore",
    "totalScore",
    "summary",
    "weaknesses",
    "plan",
    "mistakes",
)
_MIN_SEVERITY = 0
_MAX_SEVERITY = 100


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate raw parsed JSON and build an AnalysisResult.

    Every field is required; list fields may be empty but must be present.
    Scores are passed through as given, even when the estimate exceeds the total.

    Raises:
        ResponseFormatError: on any validation failure.
    """
    _require_top_level_fields(data)
    return AnalysisResult(
        subject=_require_str(data["subject"], "subject"),
        estimated_score=_require_number(data["estimatedScore"], "estimatedScore"),
        total_score=_require_number(data["totalScore"], "totalScore"),
        summary=_require_str(data["summary"], "summary"),
        weaknesses=_build_list(data["weaknesses"], "weaknesses", _build_weakness),
        plan=_build_list(data["plan"], "plan", _build_plan_item),
        mistakes=_build_list(data["mistakes"], "mistakes", _build_mistake),
    )


def _require_top_level_fields(data: dict[str, Any]) -> None:
    for name in _TOP_LEVEL_FIELDS:
        if name not in data:
            raise ResponseFormatError(f"Missing required top-level field: {name}")


def _require_str(raw: Any, path: str) -> str:
    if not isinstance(raw, str):
        raise ResponseFormatError(f"'{path}' must be a string")
    return raw


def _require_number(raw: Any, path: str) -> int | float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ResponseFormatError(f"'{path}' must be a number")
    try:
        finite = math.isfinite(raw)
    except OverflowError:
        finite = False
    if not finite:
        raise ResponseFormatError(f"'{path}' must be a finite number, got {raw!r}")
    return raw


def _require_object(raw: Any, path: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ResponseFormatError(f"'{path}' must be an object")
    return raw


def _require_field(raw: dict[str, Any], name: str, path: str) -> Any:
    if name not in raw:
        raise ResponseFormatError(f"'{path}' is missing required field '{name}'")
    return raw[name]


def _build_list(raw: Any, path: str, build: Callable[[Any, str], T]) -> tuple[T, ...]:
    if not isinstance(raw, list):
        raise ResponseFormatError(f"'{path}' must be a list")
    return tuple(build(item, f"{path}[{i}]") for i, item in enumerate(raw))


def _build_weakness(raw: Any, path: str) -> Weakness:
    item = _require_object(raw, path)
    return Weakness(
        topic=_require_str(_require_field(item, "topic", path), f"{path}.topic"),
        severity=_build_severity(_require_field(item, "severity", path), f"{path}.severity"),
        description=_require_str(
            _require_field(item, "description", path), f"{path}.description"
        ),
    )


def _build_severity(raw: Any, path: str) -> int:
    number = _require_number(raw, path)
    if isinstance(number, float) and not number.is_integer():
        raise ResponseFormatError(f"'{path}' must be a whole number, got {raw!r}")
    if not _MIN_SEVERITY <= number <= _MAX_SEVERITY:
        raise ResponseFormatError(
            f"'{path}' must be between {_MIN_SEVERITY} and {_MAX_SEVERITY}, got {raw!r}"
        )
    return int(number)


def _build_plan_item(raw: Any, path: str) -> PlanItem:
    item = _require_object(raw, path)
    return PlanItem(
        stage=_require_str(_require_field(item, "stage", path), f"{path}.stage"),
        task=_require_str(_require_field(item, "task", path), f"{path}.task"),
        focus=_require_str(_require_field(item, "focus", path), f"{path}.focus"),
    )


def _build_mistake(raw: Any, path: str) -> Mistake:
    item = _require_object(raw, path)
    return Mistake(
        question_id=_require_str(
            _require_field(item, "questionId", path), f"{path}.questionId"
        ),
        topic=_require_str(_require_field(item, "topic", path), f"{path}.topic"),
        cause=_require_str(_require_field(item, "cause", path), f"{path}.cause"),
        solution=_require_str(_require_field(item, "solution", path), f"{path}.solution"),
    )
