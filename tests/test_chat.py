from types import SimpleNamespace
from typing import List

import pytest

from therapy_journal.chat import (
    ASSISTANT,
    MISSING_KEY,
    RATE_LIMITED,
    SYSTEM_PROMPT,
    USER,
    ChatMessage,
    TherapistChat,
    conversation_content,
    greeting_message,
    to_contents,
)
from therapy_journal.config import Settings


class FakeModels:
    def __init__(self, replies: List[object]):
        self.replies = list(replies)
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(text=reply)


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def make_chat(replies, clock=None, **kwargs):
    models = FakeModels(replies)
    client = SimpleNamespace(models=models)
    chat = TherapistChat(
        Settings(api_key="test-key"),
        client=client,
        clock=clock or FakeClock(),
        retry_delay=0,
        **kwargs,
    )
    return chat, models


def history(*texts: str) -> List[ChatMessage]:
    return [greeting_message()] + [ChatMessage(role=USER, text=t) for t in texts]


def test_conversation_content() -> None:
    assert conversation_content("I'm tired", "Rest well.") == "I'm tired\n\nTherapist Response: Rest well."


def test_reply_success_sends_history_and_config() -> None:
    chat, models = make_chat(["  That sounds hard.  "])
    res = chat.reply(history("Long day at work"))
    assert res == {"success": True, "text": "That sounds hard."}

    call = models.calls[0]
    assert call["model"] == "gemini-2.5-flash"
    assert SYSTEM_PROMPT in str(call["config"].system_instruction)
    assert call["config"].temperature == 0.7
    assert call["config"].max_output_tokens == 150
    # greeting is UI-only
    assert len(call["contents"]) == 1
    assert call["contents"][0].role == "user"
    assert call["contents"][0].parts[0].text == "Long day at work"


def test_assistant_turns_map_to_model_role() -> None:
    contents = to_contents(
        [
            greeting_message(),
            ChatMessage(role=USER, text="hi"),
            ChatMessage(role=ASSISTANT, text="hello"),
            ChatMessage(role=USER, text="again"),
        ]
    )
    assert [c.role for c in contents] == ["user", "model", "user"]


def test_missing_key_is_reported() -> None:
    chat = TherapistChat(Settings(api_key=None), client=SimpleNamespace(models=FakeModels([])))
    assert chat.reply(history("hello")) == {"success": False, "text": MISSING_KEY}


def test_rate_limit_refuses_rapid_sends() -> None:
    clock = FakeClock()
    chat, models = make_chat(["one", "two"], clock=clock)
    assert chat.reply(history("a"))["success"]

    clock.now += 0.5
    assert chat.reply(history("b")) == {"success": False, "text": RATE_LIMITED}

    clock.now += 1.0
    assert chat.reply(history("c")) == {"success": True, "text": "two"}
    assert len(models.calls) == 2


def test_transport_error_is_retried_then_reported(caplog: pytest.LogCaptureFixture) -> None:
    chat, models = make_chat([RuntimeError("boom"), RuntimeError("still down")])
    res = chat.reply(history("hello"))
    assert res == {"success": False, "text": "still down"}
    assert len(models.calls) == 2
    assert "Chat attempt 1 failed" in caplog.text


def test_retry_recovers() -> None:
    chat, models = make_chat([RuntimeError("flaky"), "I'm here."])
    assert chat.reply(history("hello")) == {"success": True, "text": "I'm here."}


def test_single_attempt() -> None:
    chat, models = make_chat([RuntimeError("down"), "unused"], attempts=1)
    assert not chat.reply(history("hello"))["success"]
    assert len(models.calls) == 1


def test_empty_model_text() -> None:
    chat, _ = make_chat([None])
    assert chat.reply(history("hello")) == {"success": True, "text": ""}
