import math

from examlens.analysis.models import AnalysisResult, Weakness

_DEFAULT_TOTAL_SCORE = 100
_RECOVERABLE_SHARE = 0.6
_TOP_WEAKNESSES = 3
_FULL_MARK = 100


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class ReportBuilder:
    """Derives the dashboard figures shown alongside an AnalysisResult."""

    def build(self, result: AnalysisResult) -> dict[str, object]:
        """Return a JSON-ready report for the presentation layer.

        An estimated score above the total is kept as reported; only the
        derived potential gain is clamped at zero.
        """
        report = result.to_dict()
        report.update(
            scorePercentage=self.score_percentage(result),
            potentialGain=self.potential_gain(result),
            radar=[self._radar_point(w) for w in result.weaknesses],
            topWeaknesses=[w.to_dict() for w in result.weaknesses[:_TOP_WEAKNESSES]],
        )
        return report

    @staticmethod
    def score_percentage(result: AnalysisResult) -> int:
        total = result.total_score or _DEFAULT_TOTAL_SCORE
        return _round_half_up(result.estimated_score / total * 100)

    @staticmethod
    def potential_gain(result: AnalysisResult) -> int:
        lost = max(0.0, result.total_score - result.estimated_score)
        return _round_half_up(lost * _RECOVERABLE_SHARE)

    def _radar_point(self, weakness: Weakness) -> dict[str, object]:
        return {
            "subject": weakness.topic,
            "value": weakness.severity,
            "fullMark": _FULL_MARK,
        }
