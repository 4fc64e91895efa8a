import asyncio
import time

import httpx
from langchain_ollama import ChatOllama

from api.utils.logger import configure_logging
from infra.llm.base import LLM, message_text

logger = configure_logging()


class OllamaLLM(LLM):
    def __init__(
        self,
        model: str,
        temperature: float = 0.7,
        base_url: str = "http://localhost:11434",
        timeout: float = 120.0,
    ):
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._chat_llm = ChatOllama(model=model, temperature=temperature, base_url=base_url)

    def generate(self, prompt: str) -> str:
        return message_text(self._chat_llm.invoke(prompt))

    async def _check_available(self) -> None:
        try:
            async with httpx.AsyncClient(timeout=5.0) as client:
                response = await client.get(f"{self.base_url}/api/tags")
                if response.status_code != 200:
                    raise ConnectionError(f"Ollama API returned status {response.status_code}")
        except (httpx.HTTPError, ConnectionError) as e:
            logger.error("Ollama connection check failed: %s. Is Ollama running?", e)
            raise ConnectionError(
                f"Cannot connect to Ollama at {self.base_url}. Please ensure Ollama is running: 'ollama serve'"
            ) from e

    async def agenerate(self, prompt: str) -> str:
        await self._check_available()

        start_time = time.time()
        input_tokens = len(prompt) // 4  # Rough estimate
        logger.debug("LLM call starting: ~%d input tokens model=%s", input_tokens, self.model)
        try:
            result = await asyncio.wait_for(self._chat_llm.ainvoke(prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            elapsed = time.time() - start_time
            logger.error("LLM call timed out after %.2fs (timeout: %ss) model=%s", elapsed, self.timeout, self.model)
            raise TimeoutError(f"LLM call timed out after {self.timeout}s") from None

        text = message_text(result)
        elapsed = time.time() - start_time
        logger.info("LLM call completed in %.2fs (~%d in, ~%d out)", elapsed, input_tokens, len(text) // 4)
        if elapsed > 60:
            logger.warning("LLM call took %.2fs - consider a smaller model model=%s", elapsed, self.model)
        return text
