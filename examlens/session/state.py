"""Finite-state value for one analysis session.

idle -> analyzing -> success | error, and back to idle on reset. A new
submission from success or error discards the previous outcome.
"""

from dataclasses import dataclass
from enum import Enum

from examlens.analysis.models import AnalysisResult
from examlens.session.exceptions import InvalidTransitionError


class Mode(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class AppState:
    """Immutable session state; events return a new instance."""

    mode: Mode = Mode.IDLE
    result: AnalysisResult | None = None
    error_message: str = ""

    @classmethod
    def idle(cls) -> "AppState":
        return cls()

    @property
    def is_analyzing(self) -> bool:
        return self.mode is Mode.ANALYZING

    def submit(self) -> "AppState":
        self._reject_if(Mode.ANALYZING, event="submit")
        return AppState(mode=Mode.ANALYZING)

    def succeed(self, result: AnalysisResult) -> "AppState":
        self._require(Mode.ANALYZING, event="succeed")
        return AppState(mode=Mode.SUCCESS, result=result)

    def fail(self, message: str) -> "AppState":
        self._require(Mode.ANALYZING, event="fail")
        return AppState(mode=Mode.ERROR, error_message=message)

    def reset(self) -> "AppState":
        self._reject_if(Mode.ANALYZING, event="reset")
        return AppState.idle()

    def _require(self, mode: Mode, *, event: str) -> None:
        if self.mode is not mode:
            raise InvalidTransitionError(
                f"Cannot {event} in state '{self.mode.value}'"
            )

    def _reject_if(self, mode: Mode, *, event: str) -> None:
        if self.mode is mode:
            raise InvalidTransitionError(
                f"Cannot {event} in state '{self.mode.value}'"
            )
