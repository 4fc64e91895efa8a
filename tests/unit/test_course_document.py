"""Unit tests for the course document variants."""
import pytest

from api.models import (
    FlatModuleCourse,
    SectionedCourse,
    dump_course_document,
    infer_format,
    parse_course_document,
)


@pytest.mark.unit
class TestInferFormat:
    def test_explicit_format_wins(self):
        assert infer_format({"format": "modules", "sections": []}) == "modules"

    def test_from_body_list(self):
        assert infer_format({"sections": []}) == "sectioned"
        assert infer_format({"modules": []}) == "modules"

    def test_unknown(self):
        assert infer_format({"title": "x"}) is None


@pytest.mark.unit
class TestParseCourseDocument:
    def test_sectioned(self):
        doc = parse_course_document(
            {"title": "T", "summary": "S", "sections": [{"title": "a", "content": "body"}], "studyNext": ["x"]}
        )
        assert isinstance(doc, SectionedCourse)
        assert doc.summary_text() == "S"
        assert doc.body_blocks() == ["body"]

    def test_flat_modules_body_blocks(self):
        doc = parse_course_document(
            {
                "title": "T",
                "description": "D",
                "modules": [
                    {"title": "M1", "description": "intro", "detailedContent": "details", "keyPoints": ["k1", "k2"]}
                ],
            }
        )
        assert isinstance(doc, FlatModuleCourse)
        assert doc.summary_text() == "D"
        assert doc.body_blocks() == ["intro\n\ndetails"]

    def test_extra_keys_survive_dump(self):
        raw = {"title": "T", "sections": [], "difficulty": "Intermediate"}
        dumped = dump_course_document(parse_course_document(raw))
        assert dumped["difficulty"] == "Intermediate"
        assert dumped["format"] == "sectioned"

    @pytest.mark.parametrize("raw", [None, [], "text", {"title": "T"}, {"sections": []}])
    def test_invalid_raises_value_error(self, raw):
        with pytest.raises(ValueError):
            parse_course_document(raw)
