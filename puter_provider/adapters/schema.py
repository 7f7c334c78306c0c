from typing import Literal, Union

from pydantic import BaseModel, Field

from puter_provider.models import ModelInfo


class TextEvent(BaseModel):
    """A fragment of generated text, emitted in gateway delivery order."""
    type: Literal["text"] = "text"
    text: str


class UsageEvent(BaseModel):
    """
    Token accounting for a completed request.

    Emitted at most once, always after every TextEvent.
    total_cost stays 0: Puter bills the end user, not this adapter.
    """
    type: Literal["usage"] = "usage"
    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
    total_cost: float = 0.0


StreamEvent = Union[TextEvent, UsageEvent]


class ResolvedModel(BaseModel):
    """Model identifier plus the metadata it resolved to."""
    id: str
    info: ModelInfo
