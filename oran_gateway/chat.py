"""Chat handler: prompt injection and streaming passthrough to the inference service."""

from typing import Any, List

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

from oran_gateway import config
from oran_gateway.bindings import Env
from oran_gateway.config import log
from oran_gateway.models import ChatMessage, ChatRequest


def is_system_message(message: Any) -> bool:
    return isinstance(message, dict) and message.get("role") == "system"


def ensure_system_prompt(messages: List[Any], system_prompt: str) -> List[Any]:
    """Return the conversation with a leading system message if it has none.

    A conversation that already carries a system message is returned as-is.
    The input list is not modified and entries are never rewritten.
    """
    if any(is_system_message(msg) for msg in messages):
        return list(messages)
    return [ChatMessage(role="system", content=system_prompt).model_dump(), *messages]


async def handle_chat_request(
    request: Request,
    env: Env,
    system_prompt: str,
    model_id: str = config.AI_MODEL_ID,
    max_tokens: int = config.AI_MAX_TOKENS,
) -> Response:
    try:
        body = await request.json()
        # A body that is not a JSON object has no messages field.
        payload = ChatRequest.model_validate(body) if isinstance(body, dict) else ChatRequest()
        messages = ensure_system_prompt(payload.messages, system_prompt)

        response = await env.ai.run(
            model_id,
            {"messages": messages, "max_tokens": max_tokens},
            return_raw_response=True,
        )
        # Returned untouched so the body keeps streaming as it is produced.
        return response
    except Exception as e:
        log.error(f"Error processing chat request: {e!r}", exc_info=True)
        return JSONResponse(
            {"error": "Failed to process request"},
            status_code=500,
            media_type="application/json",
        )
