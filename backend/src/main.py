import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.src.core.config import Settings, settings as default_settings
from backend.src.core.logging import configure_logging
from backend.src.services.llm.factory import get_reply_provider
from backend.src.services.llm.providers import ReplyProvider

# --- API Route Imports ---
from backend.src.api.routes import relay

logger = logging.getLogger(__name__)

def create_app(settings: Settings = None, provider: ReplyProvider = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    # 1. App Initialize karein
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Streams Gemini replies to the chat client as server-sent events"
    )

    # 2. Provider sirf ek dafa, startup par (real ya simulated)
    app.state.reply_provider = provider or get_reply_provider(settings)

    # 3. CORS Setup (Security)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # 4. Health Check Route
    @app.get("/")
    async def root():
        return {
            "message": "Gemini SSE relay 🚀",
            "status": "active",
            "provider": app.state.reply_provider.name,
            "relay_url": settings.RELAY_PATH,
        }

    # 5. API Router Includes
    app.include_router(relay.router, prefix=settings.RELAY_PATH, tags=["Relay"])

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    logger.info(f"✅ Gemini SSE relay running on :{default_settings.PORT}")
    uvicorn.run("backend.src.main:app", host=default_settings.HOST, port=default_settings.PORT)
