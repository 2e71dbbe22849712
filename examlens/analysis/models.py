from dataclasses import dataclass, field


@dataclass(frozen=True)
class Weakness:
    """A weak knowledge point with a 0-100 severity score."""

    topic: str
    severity: int
    description: str

    def to_dict(self) -> dict[str, object]:
        return {
            "topic": self.topic,
            "severity": self.severity,
            "description": self.description,
        }


@dataclass(frozen=True)
class PlanItem:
    """One stage of the improvement plan."""

    stage: str
    task: str
    focus: str

    def to_dict(self) -> dict[str, object]:
        return {"stage": self.stage, "task": self.task, "focus": self.focus}


@dataclass(frozen=True)
class Mistake:
    """Diagnosis of a single wrong answer on the paper."""

    question_id: str
    topic: str
    cause: str
    solution: str

    def to_dict(self) -> dict[str, object]:
        return {
            "questionId": self.question_id,
            "topic": self.topic,
            "cause": self.cause,
            "solution": self.solution,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Structured report produced by one analysis request."""

    subject: str
    estimated_score: int | float
    total_score: int | float
    summary: str
    weaknesses: tuple[Weakness, ...] = field(default_factory=tuple)
    plan: tuple[PlanItem, ...] = field(default_factory=tuple)
    mistakes: tuple[Mistake, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        """Return the camelCase wire shape handed to the presentation layer."""
        return {
            "subject": self.subject,
            "estimatedScore": self.estimated_score,
            "totalScore": self.total_score,
            "summary": self.summary,
            "weaknesses": [w.to_dict() for w in self.weaknesses],
            "plan": [p.to_dict() for p in self.plan],
            "mistakes": [m.to_dict() for m in self.mistakes],
        }
