import asyncio
import time

from langchain_google_genai import ChatGoogleGenerativeAI

from api.utils.logger import configure_logging
from infra.llm.base import LLM, message_text

logger = configure_logging()


class GeminiLLM(LLM):
    def __init__(self, model: str, api_key: str, temperature: float = 0.7, timeout: float = 120.0):
        self.model = model
        self.timeout = timeout
        self._chat_llm = ChatGoogleGenerativeAI(model=model, google_api_key=api_key, temperature=temperature)

    def generate(self, prompt: str) -> str:
        return message_text(self._chat_llm.invoke(prompt))

    async def agenerate(self, prompt: str) -> str:
        start_time = time.time()
        try:
            result = await asyncio.wait_for(self._chat_llm.ainvoke(prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise TimeoutError(f"Gemini call timed out after {self.timeout}s model={self.model}") from None
        text = message_text(result)
        logger.info("gemini call completed model=%s elapsed=%.2fs chars=%d", self.model, time.time() - start_time, len(text))
        return text
