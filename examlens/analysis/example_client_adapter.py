"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from examlens.analysis.client_base import BaseAnalysisClient
from examlens.upload.models import NormalizedPayload


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that returns a fixed valid analysis JSON.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "subject": "Mathematics",
        "estimatedScore": 72,
        "totalScore": 100,
        "summary": "Solid grasp of the basics; most lost marks come from algebra slips.",
        "weaknesses": [
            {
                "topic": "Quadratic equations",
                "severity": 70,
                "description": "Sign errors when applying the quadratic formula.",
            },
            {
                "topic": "Fractions",
                "severity": 35,
                "description": "Occasional mistakes finding a common denominator.",
            },
        ],
        "plan": [
            {
                "stage": "Days 1-3",
                "task": "Rework every quadratic question from this paper.",
                "focus": "Quadratic formula",
            },
            {
                "stage": "Week 2",
                "task": "Timed practice set of 20 mixed fraction problems.",
                "focus": "Fractions",
            },
        ],
        "mistakes": [
            {
                "questionId": "Q7",
                "topic": "Quadratic equations",
                "cause": "Calculation error",
                "solution": "Compute the discriminant first, then substitute carefully.",
            },
        ],
    }

    def __init__(self) -> None:
        pass

    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        payload: NormalizedPayload,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, prompt, payload, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
