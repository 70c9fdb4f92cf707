# --- EXTERNAL IMPORTS ---
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

class Settings(BaseSettings):
    # ------------------- CORE PROJECT SETTINGS -------------------
    PROJECT_NAME: str = "Gemini SSE Relay"
    VERSION: str = "1.0.0"
    RELAY_PATH: str = "/api/gemini/sse"

    # ------------------- NETWORK / HOSTING -------------------
    HOST: str = "0.0.0.0"
    PORT: int = 8081
    # Vite dev server of the chat front-end
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    LOG_LEVEL: str = "INFO"

    # ------------------- AI MODEL (GEMINI) -------------------
    # The browser build exposes the same key as VITE_GEMINI_API_KEY
    GEMINI_API_KEY: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "VITE_GEMINI_API_KEY"),
    )
    GEMINI_MODEL_NAME: str = "gemini-2.5-flash"
    GEMINI_TEMPERATURE: float = 0.1
    GEMINI_MAX_OUTPUT_TOKENS: int = 1500

    # ------------------- STREAM PACING -------------------
    RELAY_CHUNK_SIZE: int = Field(default=120, gt=0)
    RELAY_CHUNK_DELAY_MS: int = Field(default=80, ge=0)

    FALLBACK_CHUNK_SIZE: int = Field(default=60, gt=0)
    FALLBACK_CHUNK_DELAY_MS: int = Field(default=120, ge=0)
    FALLBACK_PROMPT_PREVIEW_CHARS: int = Field(default=300, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8",
        populate_by_name=True,
        frozen=True,
    )

@lru_cache()
def get_settings():
    return Settings()

settings = get_settings()
