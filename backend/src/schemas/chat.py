from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional

class ChatMessage(BaseModel):
    role: str      # "user" | "assistant"
    content: str

class RelayRequest(BaseModel):
    """
    Consent is checked on the raw JSON before this model is built
    (see api/routes/relay.py), so both flags stay loosely typed.
    """
    model_config = ConfigDict(extra="ignore")

    messages: Optional[List[ChatMessage]] = None  # null ya missing = empty conversation
    stream: Any = True  # accepted for client compatibility, always streamed
    acceptsMedicalDisclaimer: Any = None  # <--- consent gate 🩺

class ErrorResponse(BaseModel):
    error: str

def is_truthy(value: Any) -> bool:
    """JSON truthiness as the browser client sees it: empty list/object still count as true."""
    if isinstance(value, (list, dict)):
        return True
    return bool(value)
