from abc import ABC, abstractmethod


class LLM(ABC):
    """
    Defines the contract for all LLMs.
    """

    model: str

    @abstractmethod
    def generate(self, prompt: str) -> str:
        raise NotImplementedError

    @abstractmethod
    async def agenerate(self, prompt: str) -> str:
        raise NotImplementedError


def message_text(message) -> str:
    """Plain text of a LangChain chat response (content may be a str or a list of parts)."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return str(content)
