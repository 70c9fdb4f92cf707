import asyncio
import json
import logging
from typing import AsyncGenerator, Awaitable, Callable, Iterable, List, Optional

from backend.src.schemas.chat import ChatMessage
from backend.src.services.llm.providers import ReplyProvider

logger = logging.getLogger(__name__)

DisconnectCheck = Callable[[], Awaitable[bool]]

# ==========================================
# PROMPT + CHUNK HELPERS
# ==========================================

def build_prompt(messages: Optional[Iterable[ChatMessage]]) -> str:
    """Flatten the conversation into 'role: content' lines."""
    return "\n".join(f"{m.role}: {m.content}" for m in (messages or []))

def chunk_text(text: str, size: int) -> List[str]:
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return [text[i:i + size] for i in range(0, len(text), size)]

# ==========================================
# SSE FRAMES
# ==========================================

def _dumps(payload: dict) -> str:
    return json.dumps(payload, ensure_ascii=False)

def format_delta(fragment: str) -> str:
    return f"data: {_dumps({'delta': fragment})}\n\n"

def format_done() -> str:
    return f"data: {_dumps({'done': True})}\n\n"

def format_error(message: str) -> str:
    return f"event: error\ndata: {_dumps({'error': message})}\n\n"

def _error_message(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__

# ==========================================
# MAIN STREAM LOGIC
# ==========================================

async def stream_reply(
    provider: ReplyProvider,
    prompt: str,
    is_disconnected: Optional[DisconnectCheck] = None,
) -> AsyncGenerator[str, None]:
    """
    Provider se poora jawab le kar usay SSE frames mein tod kar bhejta hai.

    Exactly one terminal frame (done or error) is yielded, unless the client
    went away first; then the generator just stops. The pacing sleep is a
    plain asyncio.sleep, so closing the response cancels it.
    """

    async def client_gone() -> bool:
        if is_disconnected is None:
            return False
        return await is_disconnected()

    try:
        # 1. One complete reply (no token streaming from the provider)
        text = await provider.generate(prompt)

        # 2. Re-chunk with artificial pacing
        fragments = chunk_text(text, provider.chunk_size)
        for index, fragment in enumerate(fragments):
            if await client_gone():
                logger.info(f"🔌 Client disconnected after {index}/{len(fragments)} fragments")
                return
            yield format_delta(fragment)
            await asyncio.sleep(provider.chunk_delay)

        if await client_gone():
            logger.info("🔌 Client disconnected before done marker")
            return

        # 3. End of stream
        yield format_done()

    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.exception(f"❌ Relay stream failed ({provider.name}): {e}")
        yield format_error(_error_message(e))
