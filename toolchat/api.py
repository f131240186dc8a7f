"""REST API routes: chat turn and tool catalogue."""
import logging
from typing import List

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from .models import ChatResponse, ErrorResponse, ToolOut
from .pipeline import run_turn, TranscriptError
from .tools import list_tools, tool_descriptions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


@router.post("/chat")
async def chat(request: Request):
    # Any body that is not a JSON object reaches run_turn as a missing transcript
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    transcript = payload.get("messages") if isinstance(payload, dict) else None

    try:
        messages = await run_turn(transcript)
    except TranscriptError as e:
        logger.info(f"Rejected transcript: {e.message}")
        return JSONResponse(status_code=400, content=ErrorResponse(error=e.message).model_dump())
    except Exception as e:
        logger.error(f"Chat API error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content=ErrorResponse(error="Internal server error").model_dump())

    return ChatResponse(messages=messages).to_wire()


@router.get("/tools", response_model=List[ToolOut])
async def tools(format: str = "json"):
    if format == "text":
        return PlainTextResponse(tool_descriptions())
    return [
        ToolOut(
            name=t.name,
            description=t.description,
            category=t.category,
            parameters=t.parameter_schema,
        )
        for t in list_tools()
    ]
