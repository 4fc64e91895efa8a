"""
Skill assessments: templated questions, scoring, skill gaps and learning style.

Questions are fixed templates with the topic interpolated; there is no
generation step. Scoring marks every unanswered or wrong question as a gap and
names the gap after the phrase following "about" or "in" in the question text.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from api.utils.common import iso_now
from api.utils.ids import uuid_like

_GAP_PATTERNS = (
    re.compile(r"about (.+?)[.?]", re.IGNORECASE),
    re.compile(r"in (.+?)[.?]", re.IGNORECASE),
)

_STYLE_ORDER = ("textual", "visual", "interactive")

DEFAULT_LEARNING_STYLE = {"visual": 33, "textual": 33, "interactive": 34, "current": "balanced"}


def _round_half_up(x: float) -> int:
    return int(x + 0.5)


def sample_questions(topic: str) -> list[dict[str, Any]]:
    return [
        {
            "question": f"What is a key concept in {topic}?",
            "options": ["Sample answer A", "Sample answer B", "Sample answer C", "Sample answer D"],
            "correctAnswer": 1,
        },
        {
            "question": f"Which of the following is true about {topic}?",
            "options": ["Sample statement A", "Sample statement B", "Sample statement C", "Sample statement D"],
            "correctAnswer": 2,
        },
        {
            "question": f"How would you implement a {topic} solution?",
            "options": [
                "Implementation approach A",
                "Implementation approach B",
                "Implementation approach C",
                "Implementation approach D",
            ],
            "correctAnswer": 0,
        },
        {
            "question": f"What is a common challenge when working with {topic}?",
            "options": ["Challenge A", "Challenge B", "Challenge C", "Challenge D"],
            "correctAnswer": 3,
        },
        {
            "question": f"Which tool is best for working with {topic}?",
            "options": ["Tool A", "Tool B", "Tool C", "Tool D"],
            "correctAnswer": 1,
        },
    ]


def new_assessment(user_id: str, topic: str) -> dict[str, Any]:
    now = iso_now()
    return {
        "id": uuid_like(),
        "userId": user_id,
        "topic": topic,
        "questions": sample_questions(topic),
        "userAnswers": [],
        "skillGaps": [],
        "recommendedCourses": [],
        "learningStyle": dict(DEFAULT_LEARNING_STYLE),
        "createdAt": now,
        "updatedAt": now,
    }


def skill_gap_for(question: str, topic: str) -> str:
    for pattern in _GAP_PATTERNS:
        m = pattern.search(question)
        if m:
            return m.group(1)
    return f"general {topic}"


def learning_style(interaction: Optional[dict[str, float]]) -> Optional[dict[str, Any]]:
    """Percentages per style plus the dominant one; None when there is nothing to measure."""
    if not interaction:
        return None
    raw = {
        "textual": float(interaction.get("timeSpentOnText") or 0),
        "visual": float(interaction.get("timeSpentOnVisuals") or 0),
        "interactive": float(interaction.get("interactiveElementsUsed") or 0),
    }
    total = sum(raw.values())
    if total <= 0:
        return None

    style: dict[str, Any] = {k: _round_half_up(v / total * 100) for k, v in raw.items()}
    dominant = _STYLE_ORDER[0]
    for name in _STYLE_ORDER[1:]:
        # Ties go to the later style.
        if not style[dominant] > style[name]:
            dominant = name
    style["current"] = dominant
    return style


def score_submission(
    assessment: dict[str, Any],
    answers: list[Optional[int]],
    interaction: Optional[dict[str, float]] = None,
) -> dict[str, int]:
    """
    Grade `answers` against the assessment in place (answers, gaps, style,
    recommendations, updatedAt) and return the performance summary.
    """
    topic = assessment.get("topic", "")
    questions = assessment.get("questions") or []

    gaps: list[str] = []
    correct = 0
    for i, q in enumerate(questions):
        given = answers[i] if i < len(answers) else None
        if given == q.get("correctAnswer"):
            correct += 1
            continue
        gap = skill_gap_for(q.get("question", ""), topic)
        if gap not in gaps:
            gaps.append(gap)

    assessment["userAnswers"] = list(answers)
    assessment["skillGaps"] = gaps
    style = learning_style(interaction)
    if style is not None:
        assessment["learningStyle"] = style
    assessment["recommendedCourses"] = [
        f"{topic} Fundamentals",
        f"Advanced {topic}",
        f"Practical {topic} Implementation",
    ]
    assessment["updatedAt"] = iso_now()

    total = len(questions)
    return {
        "correctAnswers": correct,
        "totalQuestions": total,
        "percentage": _round_half_up(correct / total * 100) if total else 0,
    }
