# =============================================================================
# core/models/webhook.py - Retell Webhook Schemas
# =============================================================================
# These models describe the JSON body Retell posts to POST /api/reservations.
# Only the fields the service reads are declared; everything else Retell
# sends (call timing, recordings, per-word timestamps, ...) is allowed and
# ignored.
#
# Flow:
# 1. Retell posts a webhook for every call event (call_started, call_ended, ...)
# 2. Only "call_analyzed" carries a final transcript worth extracting from
# 3. The transcript_object is a list of {role, content} utterances
# =============================================================================

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageRole(str, Enum):
    """
    Who spoke in a call transcript.

    - user: The caller
    - agent: The voice agent (Retell's name)
    - assistant: The voice agent (chat-style name)
    """
    USER = "user"
    AGENT = "agent"
    ASSISTANT = "assistant"


class WebhookEvent(str, Enum):
    """Retell call lifecycle events."""
    CALL_STARTED = "call_started"
    CALL_ENDED = "call_ended"
    CALL_ANALYZED = "call_analyzed"


class TranscriptMessage(BaseModel):
    """
    One utterance in a call transcript.

    Example:
        {"role": "user", "content": "Hi, I'd like a table for tonight"}
    """

    model_config = ConfigDict(extra="ignore")

    role: str = Field(
        default="",
        description="Speaker role: user, agent or assistant"
    )

    content: str = Field(
        default="",
        description="What was said"
    )

    @field_validator("role", "content", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        """Retell sends null for empty utterances."""
        return "" if value is None else value

    @property
    def is_user(self) -> bool:
        return self.role == MessageRole.USER.value

    @property
    def is_agent(self) -> bool:
        return self.role in (MessageRole.AGENT.value, MessageRole.ASSISTANT.value)


class RetellCall(BaseModel):
    """The call object embedded in a Retell webhook."""

    model_config = ConfigDict(extra="allow")

    call_id: str | None = Field(
        default=None,
        description="Retell call identifier"
    )

    transcript_object: list[TranscriptMessage] = Field(
        default_factory=list,
        description="Ordered utterances of the call"
    )

    @field_validator("transcript_object", mode="before")
    @classmethod
    def none_to_list(cls, value):
        return [] if value is None else value


class RetellWebhook(BaseModel):
    """
    Body of a Retell webhook.

    Example:
        {
            "event": "call_analyzed",
            "call": {
                "call_id": "abc123",
                "transcript_object": [
                    {"role": "agent", "content": "Could I get your name?"},
                    {"role": "user", "content": "Marco Rossi"}
                ]
            }
        }
    """

    model_config = ConfigDict(extra="allow")

    event: str | None = Field(
        default=None,
        description="Lifecycle event name"
    )

    call: RetellCall | None = Field(
        default=None,
        description="Call details (present on call events)"
    )

    @field_validator("event", mode="before")
    @classmethod
    def scalar_to_str(cls, value):
        """Echo numeric or boolean event names back as text."""
        if isinstance(value, (int, float, bool)):
            return str(value)
        return value

    @property
    def is_call_analyzed(self) -> bool:
        return self.event == WebhookEvent.CALL_ANALYZED.value

    @property
    def transcript(self) -> list[TranscriptMessage]:
        """Transcript of the call, or an empty list when absent."""
        if self.call is None:
            return []
        return self.call.transcript_object
