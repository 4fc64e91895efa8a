import pytest

from api.services.assessment_service import (
    DEFAULT_LEARNING_STYLE,
    learning_style,
    new_assessment,
    sample_questions,
    score_submission,
    skill_gap_for,
)


@pytest.mark.unit
class TestNewAssessment:
    def test_five_templated_questions(self):
        questions = sample_questions("Rust")
        assert len(questions) == 5
        assert all("Rust" in q["question"] for q in questions)
        assert all(len(q["options"]) == 4 for q in questions)
        assert [q["correctAnswer"] for q in questions] == [1, 2, 0, 3, 1]

    def test_record_shape(self):
        a = new_assessment("u1", "Rust")
        assert a["userId"] == "u1"
        assert a["userAnswers"] == [] and a["skillGaps"] == []
        assert a["learningStyle"] == DEFAULT_LEARNING_STYLE
        assert a["createdAt"] == a["updatedAt"]


@pytest.mark.unit
class TestSkillGap:
    def test_about_phrase(self):
        assert skill_gap_for("Which of the following is true about graphs?", "x") == "graphs"

    def test_in_phrase(self):
        assert skill_gap_for("What is a key concept in sorting?", "x") == "sorting"

    def test_no_phrase(self):
        assert skill_gap_for("How would you implement a heap solution?", "heaps") == "general heaps"


@pytest.mark.unit
class TestLearningStyle:
    def test_none_without_data(self):
        assert learning_style(None) is None
        assert learning_style({"timeSpentOnText": 0, "timeSpentOnVisuals": 0, "interactiveElementsUsed": 0}) is None

    def test_dominant_style(self):
        style = learning_style({"timeSpentOnText": 10, "timeSpentOnVisuals": 30, "interactiveElementsUsed": 10})
        assert style == {"textual": 20, "visual": 60, "interactive": 20, "current": "visual"}

    def test_tie_goes_to_later_style(self):
        style = learning_style({"timeSpentOnText": 1, "timeSpentOnVisuals": 1, "interactiveElementsUsed": 0})
        assert style["current"] == "visual"


@pytest.mark.unit
class TestScoreSubmission:
    def test_all_correct(self):
        a = new_assessment("u1", "python")
        perf = score_submission(a, [1, 2, 0, 3, 1])
        assert perf == {"correctAnswers": 5, "totalQuestions": 5, "percentage": 100}
        assert a["skillGaps"] == []
        assert a["userAnswers"] == [1, 2, 0, 3, 1]
        assert a["recommendedCourses"] == ["python Fundamentals", "Advanced python", "Practical python Implementation"]

    def test_all_wrong_dedupes_gaps(self):
        a = new_assessment("u1", "python")
        perf = score_submission(a, [0, 0, 1, 0, 0])
        assert perf["correctAnswers"] == 0
        assert perf["percentage"] == 0
        assert a["skillGaps"] == ["python", "general python"]

    def test_missing_answers_count_as_wrong(self):
        a = new_assessment("u1", "python")
        perf = score_submission(a, [1, 2])
        assert perf["correctAnswers"] == 2
        assert perf["percentage"] == 40

    def test_interaction_updates_style(self):
        a = new_assessment("u1", "python")
        score_submission(a, [], {"timeSpentOnText": 5, "timeSpentOnVisuals": 0, "interactiveElementsUsed": 0})
        assert a["learningStyle"]["current"] == "textual"
