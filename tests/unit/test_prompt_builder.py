"""Unit tests for prompt_builder and the course prompt (no LLM)."""
import json

import pytest

from api.prompt_builders import build_course_prompt
from api.prompt_builders.course import TEMPLATE_COURSE
from api.utils.prompt_builder import build_from_template


@pytest.mark.unit
class TestBuildFromTemplate:
    def test_fills_placeholders(self):
        assert build_from_template("Hello {name}!", name="Ada") == "Hello Ada!"

    def test_missing_key_renders_empty(self):
        assert build_from_template("[{a}][{b}]", a="x") == "[x][]"

    def test_none_renders_empty(self):
        assert build_from_template("[{a}]", a=None) == "[]"

    def test_empty_template(self):
        assert build_from_template("", a="x") == ""


@pytest.mark.unit
class TestBuildCoursePrompt:
    def test_contains_topic_and_context(self):
        context = [{"domain": "computer science", "topics": ["data structures", "trees"]}]
        prompt = build_course_prompt("binary trees", context)
        assert '"binary trees"' in prompt
        assert "Domain: computer science" in prompt
        assert "Related topics: data structures, trees" in prompt

    def test_without_context(self):
        prompt = build_course_prompt("binary trees", [])
        assert prompt.startswith('Create a focused engineering course on "binary trees".')

    def test_json_example_keeps_single_braces(self):
        prompt = build_course_prompt("graphs", [])
        assert '"modules": [' in prompt
        assert "{{" not in prompt
        start = prompt.index("{\n")
        example = json.loads(prompt[start:])
        assert set(example) >= {"title", "description", "modules"}

    def test_template_has_no_unfilled_placeholders(self):
        assert "{topic}" in TEMPLATE_COURSE
        assert "{topic}" not in build_course_prompt("graphs", [])
