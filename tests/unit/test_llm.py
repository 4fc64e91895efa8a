"""Unit tests for the LLM clients and factory (chat models mocked)."""
from __future__ import annotations

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from infra.llm.base import message_text
from infra.llm.factory import create_llm


@pytest.mark.unit
class TestMessageText:
    def test_string_content(self):
        assert message_text(SimpleNamespace(content="hello")) == "hello"

    def test_list_content(self):
        msg = SimpleNamespace(content=["a", {"type": "text", "text": "b"}, {"type": "image"}])
        assert message_text(msg) == "ab"

    def test_plain_string(self):
        assert message_text("raw") == "raw"


@pytest.mark.unit
class TestCreateLLM:
    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            create_llm("openai", "gpt")

    def test_gemini_requires_key(self):
        with pytest.raises(ValueError):
            create_llm("gemini", "gemini-1.5-flash", api_key=None)

    def test_gemini(self):
        with patch("infra.llm.gemini.ChatGoogleGenerativeAI") as chat_cls:
            llm = create_llm("gemini", "gemini-1.5-flash", api_key="k", temperature=0.2)
        assert llm.model == "gemini-1.5-flash"
        chat_cls.assert_called_once_with(model="gemini-1.5-flash", google_api_key="k", temperature=0.2)

    def test_ollama(self):
        with patch("infra.llm.ollama.ChatOllama") as chat_cls:
            llm = create_llm("ollama", "qwen:latest", base_url="http://ollama:11434/")
        assert llm.model == "qwen:latest"
        assert llm.base_url == "http://ollama:11434"
        chat_cls.assert_called_once()


@pytest.mark.unit
class TestGeminiLLM:
    @pytest.mark.asyncio
    async def test_agenerate_returns_text(self):
        mock_chat = MagicMock()
        mock_chat.ainvoke = AsyncMock(return_value=SimpleNamespace(content='{"title": "x"}'))
        with patch("infra.llm.gemini.ChatGoogleGenerativeAI", return_value=mock_chat):
            from infra.llm.gemini import GeminiLLM

            llm = GeminiLLM(model="gemini-1.5-flash", api_key="k")
            assert await llm.agenerate("prompt") == '{"title": "x"}'
        mock_chat.ainvoke.assert_called_once_with("prompt")

    @pytest.mark.asyncio
    async def test_agenerate_timeout(self):
        async def slow(prompt):
            await asyncio.sleep(1)

        mock_chat = MagicMock()
        mock_chat.ainvoke = slow
        with patch("infra.llm.gemini.ChatGoogleGenerativeAI", return_value=mock_chat):
            from infra.llm.gemini import GeminiLLM

            llm = GeminiLLM(model="gemini-1.5-flash", api_key="k", timeout=0.01)
            with pytest.raises(TimeoutError):
                await llm.agenerate("prompt")


@pytest.mark.unit
class TestOllamaLLM:
    @pytest.mark.asyncio
    async def test_agenerate_checks_server_then_calls_model(self):
        mock_chat = MagicMock()
        mock_chat.ainvoke = AsyncMock(return_value=SimpleNamespace(content="course json"))
        with patch("infra.llm.ollama.ChatOllama", return_value=mock_chat):
            from infra.llm.ollama import OllamaLLM

            llm = OllamaLLM(model="qwen:latest")
            with patch.object(OllamaLLM, "_check_available", new=AsyncMock()) as check:
                assert await llm.agenerate("prompt") == "course json"
            check.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unavailable_server_raises_connection_error(self):
        mock_chat = MagicMock()
        mock_chat.ainvoke = AsyncMock()
        with patch("infra.llm.ollama.ChatOllama", return_value=mock_chat):
            from infra.llm.ollama import OllamaLLM

            llm = OllamaLLM(model="qwen:latest")
            with patch.object(OllamaLLM, "_check_available", new=AsyncMock(side_effect=ConnectionError("down"))):
                with pytest.raises(ConnectionError):
                    await llm.agenerate("prompt")
        mock_chat.ainvoke.assert_not_called()

    def test_generate_sync(self):
        mock_chat = MagicMock()
        mock_chat.invoke.return_value = SimpleNamespace(content="hi")
        with patch("infra.llm.ollama.ChatOllama", return_value=mock_chat):
            from infra.llm.ollama import OllamaLLM

            assert OllamaLLM(model="m").generate("p") == "hi"
