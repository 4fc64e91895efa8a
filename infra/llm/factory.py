"""Build an LLM client for one model name of the configured provider."""

from typing import Optional

from infra.llm.base import LLM


def create_llm(
    provider: str,
    model: str,
    *,
    api_key: Optional[str] = None,
    base_url: str = "http://localhost:11434",
    temperature: float = 0.7,
    timeout: float = 120.0,
) -> LLM:
    if provider == "gemini":
        from infra.llm.gemini import GeminiLLM

        if not api_key:
            raise ValueError("Gemini requires an API key")
        return GeminiLLM(model=model, api_key=api_key, temperature=temperature, timeout=timeout)
    if provider == "ollama":
        from infra.llm.ollama import OllamaLLM

        return OllamaLLM(model=model, temperature=temperature, base_url=base_url, timeout=timeout)
    raise ValueError(f"Unknown LLM provider: {provider}")
