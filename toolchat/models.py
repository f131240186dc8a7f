"""Chat transcript models exchanged with the HTTP layer."""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator


class Message(BaseModel):
    role: Literal["user", "assistant", "tool"]
    content: str
    tool_call: Optional[str] = Field(default=None, alias="toolCall")
    tool_result: Optional[Dict[str, Any]] = Field(default=None, alias="toolResult")

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="after")
    def _tool_message_has_call_and_result(self):
        if self.role == "tool" and (self.tool_call is None or self.tool_result is None):
            raise ValueError("tool messages require toolCall and toolResult")
        return self

    def to_wire(self) -> Dict[str, Any]:
        """camelCase dict with unset optional fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ChatResponse(BaseModel):
    messages: List[Message]

    def to_wire(self) -> Dict[str, Any]:
        return {"messages": [m.to_wire() for m in self.messages]}


class ErrorResponse(BaseModel):
    error: str


class ToolOut(BaseModel):
    name: str
    description: str
    category: str = ""
    parameters: Dict[str, str]
