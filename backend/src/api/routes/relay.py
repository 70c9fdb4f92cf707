import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError

from backend.src.api.routes.deps import get_provider
from backend.src.schemas.chat import ErrorResponse, RelayRequest, is_truthy
from backend.src.services.llm.providers import ReplyProvider
from backend.src.services.relay_service import build_prompt, stream_reply

logger = logging.getLogger(__name__)

# Mounted at settings.RELAY_PATH by main.create_app
router = APIRouter()

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # nginx buffering off, frames turant client tak
}

async def _read_json_body(request: Request) -> dict:
    # Empty ya broken body ko bhi "no consent" hi samjho
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}

@router.post(
    "",
    response_class=StreamingResponse,
    responses={
        200: {"content": {"text/event-stream": {}}},
        400: {"model": ErrorResponse},
    },
)
async def relay_endpoint(
    request: Request,
    provider: ReplyProvider = Depends(get_provider),
):
    payload = await _read_json_body(request)

    # 1. Consent check, before any other validation (no stream on rejection)
    if not is_truthy(payload.get("acceptsMedicalDisclaimer")):
        logger.info("🚫 Rejected relay request: disclaimer not accepted")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="Disclaimer required").model_dump(),
        )

    # 2. Validate the conversation
    try:
        request_body = RelayRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))

    # 3. Flatten conversation
    prompt = build_prompt(request_body.messages)
    logger.info(
        f"📡 Opening SSE stream via '{provider.name}' "
        f"({len(request_body.messages or [])} messages, stream={request_body.stream})"
    )

    # 4. Stream
    return StreamingResponse(
        stream_reply(provider, prompt, is_disconnected=request.is_disconnected),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
