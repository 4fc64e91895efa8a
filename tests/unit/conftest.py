"""
Unit test fixtures. Use mocks; no real LLM, no HTTP server.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def fake_llm_factory():
    """
    Factory returning mocked LLMs whose agenerate() yields the queued responses
    per model name. A queued Exception instance is raised instead of returned.
    """
    def _make(responses: dict):
        calls: list[str] = []

        def factory(model: str):
            calls.append(model)
            llm = MagicMock()
            llm.model = model
            outcome = responses.get(model, ConnectionError(f"{model} unavailable"))
            if isinstance(outcome, Exception):
                llm.agenerate = AsyncMock(side_effect=outcome)
            else:
                llm.agenerate = AsyncMock(return_value=outcome)
            return llm

        factory.calls = calls
        return factory

    return _make
