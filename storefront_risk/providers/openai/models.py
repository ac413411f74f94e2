"""Pydantic models for chat completion API responses."""

from collections.abc import Sequence

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """Message returned in a completion choice."""

    role: str
    content: str | None = None


class ChatChoice(BaseModel):
    """A single completion choice."""

    index: int
    message: ChatMessage
    finish_reason: str | None = None


class ChatCompletionResponse(BaseModel):
    """Response from the chat completions API."""

    id: str
    model: str
    choices: Sequence[ChatChoice]
