"""Survey trigger phrase and the confirm-template reply it produces."""

from __future__ import annotations

from typing import TypeGuard

from src.models import (
    ConfirmTemplate,
    Event,
    MessageAction,
    MessageEvent,
    TemplateMessage,
    TextMessage,
)

# Matched exactly: case-sensitive, no trimming or normalization
SURVEY_TRIGGER = "アンケート"

SURVEY_ALT_TEXT = "this is a confirm template"
SURVEY_QUESTION = "今日のもくもく会は楽しいですか？"
ANSWER_ENJOYABLE = "楽しい"
ANSWER_NOT_ENJOYABLE = "楽しくない"


def build_survey_template() -> TemplateMessage:
    """Build the confirm-template survey message sent in reply to the trigger.

    The label is what the bot's message shows on each button; the text is
    what the user sends back when tapping it.
    """
    return TemplateMessage(
        alt_text=SURVEY_ALT_TEXT,
        template=ConfirmTemplate(
            text=SURVEY_QUESTION,
            actions=(
                MessageAction(label=ANSWER_ENJOYABLE, text=ANSWER_ENJOYABLE),
                MessageAction(label=ANSWER_NOT_ENJOYABLE, text=ANSWER_NOT_ENJOYABLE),
            ),
        ),
    )


def is_survey_request(event: Event) -> TypeGuard[MessageEvent]:
    """Return True for a text message event whose text equals the trigger."""
    if not isinstance(event, MessageEvent):
        return False
    if not isinstance(event.message, TextMessage):
        return False
    return event.message.text == SURVEY_TRIGGER
