import pytest

from api.services.knowledge_base import (
    build_context_prompt,
    context_labels,
    find_relevant_context,
)


@pytest.mark.unit
class TestFindRelevantContext:
    def test_domain_topic_match(self):
        context = find_relevant_context("machine learning")
        domains = [c for c in context if "topics" in c]
        assert domains and domains[0]["domain"] == "computer science"
        assert "machine learning" in domains[0]["topics"]

    def test_concept_match(self):
        context = find_relevant_context("thermodynamics")
        concepts = [c for c in context if "concept" in c]
        assert concepts[0]["concept"] == "thermodynamics"
        assert "Carnot cycle" in concepts[0]["details"]["cycles"]

    def test_no_match(self):
        assert find_relevant_context("underwater basket weaving") == []

    def test_blank_topic(self):
        assert find_relevant_context("  ") == []

    def test_capped(self):
        kb = {f"d{i}": {"topics": ["graphs"], "concepts": {}} for i in range(10)}
        assert len(find_relevant_context("graphs", kb, limit=5)) == 5


@pytest.mark.unit
class TestContextHelpers:
    def test_labels_default(self):
        assert context_labels([]) == ["general engineering"]

    def test_labels_prefer_concept(self):
        ctx = [{"domain": "computer science", "topics": ["algorithms"]},
               {"domain": "computer science", "concept": "algorithms", "details": {}}]
        assert context_labels(ctx) == ["computer science", "algorithms"]

    def test_prompt_without_context(self):
        assert 'course on "kafka"' in build_context_prompt("kafka", [])

    def test_prompt_with_context(self):
        prompt = build_context_prompt("algorithms", find_relevant_context("algorithms"))
        assert "Domain: computer science" in prompt
        assert "Concept: algorithms" in prompt
