import io
from collections.abc import Callable
from typing import Any

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def make_image_bytes() -> Callable[..., bytes]:
    """Build an encoded solid-colour image of the given size, mode and format."""

    def _make(
        width: int,
        height: int,
        *,
        mode: str = "RGB",
        fmt: str = "PNG",
    ) -> bytes:
        color: Any = 128 if mode in ("L", "P") else (200, 120, 40, 128)[: len(mode)]
        image = Image.new(mode, (width, height), color)
        buf = io.BytesIO()
        image.save(buf, format=fmt)
        return buf.getvalue()

    return _make


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Q1. Solve x^2 - 5x + 6 = 0")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def valid_analysis_data() -> dict[str, Any]:
    """A schema-conformant analysis reply, already parsed."""
    return {
        "subject": "Physics",
        "estimatedScore": 64,
        "totalScore": 100,
        "summary": "Good effort; mechanics needs work.",
        "weaknesses": [
            {"topic": "Newton's laws", "severity": 80, "description": "Free-body diagrams."},
            {"topic": "Kinematics", "severity": 55, "description": "Sign conventions."},
            {"topic": "Energy", "severity": 30, "description": "Units."},
            {"topic": "Optics", "severity": 10, "description": "Minor slips."},
        ],
        "plan": [
            {"stage": "Days 1-3", "task": "Redo Q4-Q6", "focus": "Forces"},
            {"stage": "Week 2", "task": "Kinematics drills", "focus": "Signs"},
        ],
        "mistakes": [
            {"questionId": "Q4", "topic": "Newton's laws", "cause": "Missed friction",
             "solution": "Draw every force first."},
            {"questionId": "Q9", "topic": "Kinematics", "cause": "Sign error",
             "solution": "Fix a positive direction."},
        ],
    }
