"""Tests for the analysis result validator."""

import copy
from typing import Any

import pytest

from examlens.analysis.exceptions import ResponseFormatError
from examlens.analysis.models import AnalysisResult, Mistake, PlanItem, Weakness
from examlens.analysis.validator import validate_and_build


class TestValidPayloads:
    def test_builds_analysis_result(self, valid_analysis_data: dict[str, Any]) -> None:
        result = validate_and_build(valid_analysis_data)
        assert isinstance(result, AnalysisResult)
        assert result.subject == "Physics"
        assert result.estimated_score == 64
        assert result.total_score == 100
        assert result.summary == "Good effort; mechanics needs work."

    def test_preserves_list_order(self, valid_analysis_data: dict[str, Any]) -> None:
        result = validate_and_build(valid_analysis_data)
        assert [w.topic for w in result.weaknesses] == [
            "Newton's laws", "Kinematics", "Energy", "Optics",
        ]
        assert [p.stage for p in result.plan] == ["Days 1-3", "Week 2"]
        assert [m.question_id for m in result.mistakes] == ["Q4", "Q9"]

    def test_builds_nested_models(self, valid_analysis_data: dict[str, Any]) -> None:
        result = validate_and_build(valid_analysis_data)
        assert result.weaknesses[0] == Weakness(
            topic="Newton's laws", severity=80, description="Free-body diagrams."
        )
        assert result.plan[1] == PlanItem(stage="Week 2", task="Kinematics drills", focus="Signs")
        assert result.mistakes[1] == Mistake(
            question_id="Q9", topic="Kinematics", cause="Sign error",
            solution="Fix a positive direction.",
        )

    def test_empty_lists_are_valid(self, valid_analysis_data: dict[str, Any]) -> None:
        data = {**valid_analysis_data, "weaknesses": [], "plan": [], "mistakes": []}
        result = validate_and_build(data)
        assert result.weaknesses == ()
        assert result.plan == ()
        assert result.mistakes == ()

    def test_fractional_scores(self, valid_analysis_data: dict[str, Any]) -> None:
        data = {**valid_analysis_data, "estimatedScore": 87.5, "totalScore": 150}
        result = validate_and_build(data)
        assert result.estimated_score == 87.5
        assert result.total_score == 150

    def test_estimate_above_total_passes_through(
        self, valid_analysis_data: dict[str, Any]
    ) -> None:
        data = {**valid_analysis_data, "estimatedScore": 120, "totalScore": 100}
        assert validate_and_build(data).estimated_score == 120

    def test_integer_scores_keep_their_type(
        self, valid_analysis_data: dict[str, Any]
    ) -> None:
        result = validate_and_build(valid_analysis_data)
        assert type(result.estimated_score) is int
        assert result.to_dict()["estimatedScore"] == 64
        assert repr(result.to_dict()["totalScore"]) == "100"

    def test_whole_number_float_severity_is_accepted(
        self, valid_analysis_data: dict[str, Any]
    ) -> None:
        data = copy.deepcopy(valid_analysis_data)
        data["weaknesses"][0]["severity"] = 40.0
        result = validate_and_build(data)
        assert result.weaknesses[0].severity == 40
        assert isinstance(result.weaknesses[0].severity, int)


class TestMissingFields:
    @pytest.mark.parametrize(
        "field",
        ["subject", "estimatedScore", "totalScore", "summary", "weaknesses", "plan", "mistakes"],
    )
    def test_missing_top_level_field(
        self, valid_analysis_data: dict[str, Any], field: str
    ) -> None:
        data = {k: v for k, v in valid_analysis_data.items() if k != field}
        with pytest.raises(ResponseFormatError, match=field):
            validate_and_build(data)

    def test_missing_weakness_field(self, valid_analysis_data: dict[str, Any]) -> None:
        data = copy.deepcopy(valid_analysis_data)
        del data["weaknesses"][1]["description"]
        with pytest.raises(ResponseFormatError, match=r"weaknesses\[1\].*description"):
            validate_and_build(data)

    def test_missing_plan_field(self, valid_analysis_data: dict[str, Any]) -> None:
        data = copy.deepcopy(valid_analysis_data)
        del data["plan"][0]["focus"]
        with pytest.raises(ResponseFormatError, match="focus"):
            validate_and_build(data)

    def test_missing_mistake_field(self, valid_analysis_data: dict[str, Any]) -> None:
        data = copy.deepcopy(valid_analysis_data)
        del data["mistakes"][0]["questionId"]
        with pytest.raises(ResponseFormatError, match="questionId"):
            validate_and_build(data)


class TestWrongTypes:
    def test_subject_must_be_string(self, valid_analysis_data: dict[str, Any]) -> None:
        data = {**valid_analysis_data, "subject": 42}
        with pytest.raises(ResponseFormatError, match="subject"):
            validate_and_build(data)

    def test_score_must_be_number(self, valid_analysis_data: dict[str, Any]) -> None:
        data = {**valid_analysis_data, "estimatedScore": "64"}
        with pytest.raises(ResponseFormatError, match="estimatedScore"):
            validate_and_build(data)

    def test_boolean_is_not_a_number(self, valid_analysis_data: dict[str, Any]) -> None:
        data = {**valid_analysis_data, "totalScore": True}
        with pytest.raises(ResponseFormatError, match="totalScore"):
            validate_and_build(data)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), 10**400])
    @pytest.mark.parametrize("field", ["estimatedScore", "totalScore"])
    def test_score_must_be_finite(
        self, valid_analysis_data: dict[str, Any], field: str, value: float
    ) -> None:
        data = {**valid_analysis_data, field: value}
        with pytest.raises(ResponseFormatError, match=rf"'{field}' must be a finite number"):
            validate_and_build(data)

    def test_non_finite_severity_is_rejected(
        self, valid_analysis_data: dict[str, Any]
    ) -> None:
        data = copy.deepcopy(valid_analysis_data)
        data["weaknesses"][0]["severity"] = float("nan")
        with pytest.raises(ResponseFormatError, match="finite"):
            validate_and_build(data)

    def test_list_field_must_be_list(self, valid_analysis_data: dict[str, Any]) -> None:
        data = {**valid_analysis_data, "plan": {"stage": "x"}}
        with pytest.raises(ResponseFormatError, match="'plan' must be a list"):
            validate_and_build(data)

    def test_list_item_must_be_object(self, valid_analysis_data: dict[str, Any]) -> None:
        data = {**valid_analysis_data, "mistakes": ["Q1 wrong"]}
        with pytest.raises(ResponseFormatError, match=r"mistakes\[0\]"):
            validate_and_build(data)

    def test_null_field_is_rejected(self, valid_analysis_data: dict[str, Any]) -> None:
        data = {**valid_analysis_data, "summary": None}
        with pytest.raises(ResponseFormatError, match="summary"):
            validate_and_build(data)


class TestSeverity:
    @pytest.mark.parametrize("severity", [-1, 101, 250])
    def test_out_of_range(self, valid_analysis_data: dict[str, Any], severity: int) -> None:
        data = copy.deepcopy(valid_analysis_data)
        data["weaknesses"][0]["severity"] = severity
        with pytest.raises(ResponseFormatError, match="between 0 and 100"):
            validate_and_build(data)

    def test_fractional_severity(self, valid_analysis_data: dict[str, Any]) -> None:
        data = copy.deepcopy(valid_analysis_data)
        data["weaknesses"][0]["severity"] = 55.5
        with pytest.raises(ResponseFormatError, match="whole number"):
            validate_and_build(data)

    @pytest.mark.parametrize("severity", [0, 100])
    def test_bounds_are_inclusive(
        self, valid_analysis_data: dict[str, Any], severity: int
    ) -> None:
        data = copy.deepcopy(valid_analysis_data)
        data["weaknesses"][0]["severity"] = severity
        assert validate_and_build(data).weaknesses[0].severity == severity
