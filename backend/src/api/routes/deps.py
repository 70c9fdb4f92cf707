from fastapi import Request

from backend.src.services.llm.providers import ReplyProvider

def get_provider(request: Request) -> ReplyProvider:
    """
    Startup par bana hua provider app.state se deta hai.
    Tests isay app.dependency_overrides se badal sakte hain.
    """
    return request.app.state.reply_provider
