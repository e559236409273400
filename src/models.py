"""Shared Pydantic data models for the LINE survey webhook."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# LINE Messaging API accepts at most five messages per reply
MAX_REPLY_MESSAGES = 5

# --- Inbound event models ---


class TextMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    id: str = ""
    text: str


class UnknownMessage(BaseModel):
    """Message content the webhook does not act on (image, sticker, ...)."""

    model_config = ConfigDict(frozen=True)

    type: str


class MessageEvent(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["message"] = "message"
    # Absent on events delivered while the channel is in standby mode
    reply_token: str | None = Field(default=None, alias="replyToken")
    message: TextMessage | UnknownMessage
    timestamp: int = 0
    source: dict[str, object] = Field(default_factory=dict)


class UnknownEvent(BaseModel):
    """Follow, unfollow, postback and every other non-message event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    reply_token: str | None = Field(default=None, alias="replyToken")


Event = MessageEvent | UnknownEvent


# --- Outbound message models ---


class MessageAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["message"] = "message"
    label: str
    text: str


class ConfirmTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["confirm"] = "confirm"
    text: str
    actions: tuple[MessageAction, MessageAction]


class TemplateMessage(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["template"] = "template"
    alt_text: str = Field(alias="altText")
    template: ConfirmTemplate


class ReplyRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    reply_token: str = Field(alias="replyToken", min_length=1)
    messages: list[TemplateMessage] = Field(min_length=1, max_length=MAX_REPLY_MESSAGES)
