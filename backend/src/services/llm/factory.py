import logging

from langchain_google_genai import ChatGoogleGenerativeAI

from backend.src.core.config import Settings, settings as default_settings
from backend.src.services.llm.providers import (
    GeminiReplyProvider,
    ReplyProvider,
    SimulatedReplyProvider,
)

logger = logging.getLogger(__name__)

def _simulated_provider(settings: Settings) -> SimulatedReplyProvider:
    return SimulatedReplyProvider(
        preview_chars=settings.FALLBACK_PROMPT_PREVIEW_CHARS,
        chunk_size=settings.FALLBACK_CHUNK_SIZE,
        chunk_delay=settings.FALLBACK_CHUNK_DELAY_MS / 1000,
    )

def build_gemini_model(settings: Settings) -> ChatGoogleGenerativeAI:
    return ChatGoogleGenerativeAI(
        model=settings.GEMINI_MODEL_NAME,
        google_api_key=settings.GEMINI_API_KEY,
        temperature=settings.GEMINI_TEMPERATURE,
        max_output_tokens=settings.GEMINI_MAX_OUTPUT_TOKENS,
    )

def get_reply_provider(settings: Settings = None) -> ReplyProvider:
    """
    Provider Factory. Startup par sirf ek dafa chalti hai.

    - Key missing        -> warning, simulated provider
    - Client init failed -> warning, simulated provider (no retry)
    - Otherwise          -> real Gemini provider
    """
    settings = settings or default_settings

    if not settings.GEMINI_API_KEY:
        logger.warning("⚠️ GEMINI API KEY missing, using simulated replies")
        return _simulated_provider(settings)

    try:
        llm = build_gemini_model(settings)
    except Exception:
        logger.warning("⚠️ Failed to initialize Gemini client, using simulated replies", exc_info=True)
        return _simulated_provider(settings)

    logger.info(f"🤖 Gemini client initialized -> {settings.GEMINI_MODEL_NAME}")
    return GeminiReplyProvider(
        llm,
        chunk_size=settings.RELAY_CHUNK_SIZE,
        chunk_delay=settings.RELAY_CHUNK_DELAY_MS / 1000,
    )
