from abc import ABC, abstractmethod
from typing import Any

from langchain_core.messages import HumanMessage

SIMULATED_REPLY_PREFIX = "Simulated Gemini reply for prompt: "

class ReplyProvider(ABC):
    """
    Abstract Base Class for anything that can answer a flattened prompt.
    The relay only talks to this interface; the concrete provider is picked
    once at startup (see factory.get_reply_provider).

    chunk_size / chunk_delay describe how the reply is paced over SSE.
    """

    name: str = "base"

    def __init__(self, chunk_size: int, chunk_delay: float):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if chunk_delay < 0:
            raise ValueError("chunk_delay cannot be negative")
        self.chunk_size = chunk_size
        self.chunk_delay = chunk_delay

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the complete reply text for the prompt."""
        pass


class GeminiReplyProvider(ReplyProvider):
    """Real Gemini call through the LangChain chat model. One request, full text back."""

    name = "gemini"

    def __init__(self, llm: Any, chunk_size: int = 120, chunk_delay: float = 0.08):
        super().__init__(chunk_size, chunk_delay)
        self.llm = llm

    async def generate(self, prompt: str) -> str:
        response = await self.llm.ainvoke([HumanMessage(content=prompt)])
        return _content_to_text(response.content)


class SimulatedReplyProvider(ReplyProvider):
    """Canned reply used when the Gemini client could not be created."""

    name = "simulated"

    def __init__(self, preview_chars: int = 300, chunk_size: int = 60, chunk_delay: float = 0.12):
        super().__init__(chunk_size, chunk_delay)
        self.preview_chars = preview_chars

    async def generate(self, prompt: str) -> str:
        return f"{SIMULATED_REPLY_PREFIX}{prompt[:self.preview_chars]}"


def _content_to_text(content: Any) -> str:
    # Gemini kabhi kabhi content parts ki list bhejta hai
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return str(content)
