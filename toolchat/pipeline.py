"""Turn pipeline: classify → optional tool call → render.

One turn takes the transcript, looks only at its last message, and returns
the one or two messages to append: a ``tool`` message when a tool ran,
always followed by the ``assistant`` reply.
"""
import logging
import time
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from .models import Message
from .renderer import render
from .tools import classify, execute_tool

logger = logging.getLogger(__name__)

TOOL_EXECUTED = "Tool executed"


class TranscriptError(ValueError):
    """Transcript rejected before any classification ran."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidTranscriptError(TranscriptError):
    def __init__(self, message: str = "Invalid messages format"):
        super().__init__(message)


class LastMessageNotFromUserError(TranscriptError):
    def __init__(self, message: str = "Last message must be from user"):
        super().__init__(message)


def _coerce(item: Union[Message, Mapping[str, Any]]) -> Message:
    if isinstance(item, Message):
        return item
    try:
        return Message.model_validate(item)
    except ValidationError as e:
        raise InvalidTranscriptError() from e


def validate_transcript(transcript: Optional[Sequence[Any]]) -> Message:
    """Return the last message, or raise a TranscriptError."""
    if transcript is None or not isinstance(transcript, (list, tuple)):
        raise InvalidTranscriptError()
    if not transcript:
        raise LastMessageNotFromUserError()

    messages = [_coerce(item) for item in transcript]
    last = messages[-1]
    if last.role != "user":
        raise LastMessageNotFromUserError()
    return last


async def run_turn(transcript: Optional[Sequence[Any]]) -> List[Message]:
    """Process one turn and return the new messages, in append order."""
    last = validate_transcript(transcript)
    t0 = time.monotonic()

    intent = classify(last.content)
    produced: List[Message] = []

    if intent.needs_tool and intent.tool_name:
        result = await execute_tool(intent.tool_name, intent.parameters)
        produced.append(Message(
            role="tool",
            content=TOOL_EXECUTED,
            tool_call=intent.tool_name,
            tool_result=result.to_dict(),
        ))
        reply = render(last.content, result, intent.tool_name)
    else:
        reply = render(last.content)

    produced.append(Message(role="assistant", content=reply))
    logger.info(
        f"Turn done: tool={intent.tool_name or '-'}, "
        f"{len(produced)} message(s), {(time.monotonic() - t0) * 1000:.1f}ms"
    )
    return produced
