"""
Gemini-backed therapist chat.

The UI only ever sees ``{"success": bool, "text": str}`` from ``reply``; every
failure (missing key, rate limit, transport error) comes back as
``success=False`` with a message fit for display.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from google import genai
from google.genai import types

from therapy_journal.config import Settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a helpful AI therapist. Please reply in no more than 3 sentences."

GREETING = (
    "Hello! I'm here to listen and support you. How are you feeling today? "
    "What's on your mind?"
)

RATE_LIMITED = "You are sending messages too quickly. Please wait a moment."
MISSING_KEY = "Gemini API key is not set."
CONNECT_FAILED = "Failed to connect to the AI service."

USER = "user"
ASSISTANT = "assistant"


@dataclass
class ChatMessage:
    role: str
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now().astimezone())
    greeting: bool = False


def greeting_message() -> ChatMessage:
    return ChatMessage(role=ASSISTANT, text=GREETING, greeting=True)


def conversation_content(user_text: str, reply: str) -> str:
    """Transcript of one chat turn, stored as the journal entry content."""
    return f"{user_text}\n\nTherapist Response: {reply}"


def to_contents(history: List[ChatMessage]) -> List[types.Content]:
    contents = []
    for message in history:
        if message.greeting:
            continue
        role = "model" if message.role == ASSISTANT else "user"
        contents.append(types.Content(role=role, parts=[types.Part(text=message.text)]))
    return contents


class TherapistChat:
    def __init__(
        self,
        settings: Settings,
        client: Optional[Any] = None,
        clock: Callable[[], float] = time.monotonic,
        attempts: int = 2,
        retry_delay: float = 1.0,
    ):
        self.settings = settings
        self._client = client
        self._clock = clock
        self._last_request: Optional[float] = None
        self.attempts = max(1, attempts)
        self.retry_delay = retry_delay

    @property
    def client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.settings.api_key)
        return self._client

    def _config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=SYSTEM_PROMPT,
            temperature=self.settings.temperature,
            max_output_tokens=self.settings.max_tokens,
        )

    def _check_rate_limit(self) -> bool:
        now = self._clock()
        if (
            self._last_request is not None
            and now - self._last_request < self.settings.rate_limit_seconds
        ):
            return False
        self._last_request = now
        return True

    def reply(self, history: List[ChatMessage]) -> Dict[str, Any]:
        """Ask the model for the next assistant turn given the full *history*."""
        if not self._check_rate_limit():
            logger.warning("Chat request refused by rate limiter")
            return {"success": False, "text": RATE_LIMITED}
        if not self.settings.api_key:
            logger.warning("Chat request without GEMINI_API_KEY")
            return {"success": False, "text": MISSING_KEY}

        contents = to_contents(history)
        error = CONNECT_FAILED
        for attempt in range(self.attempts):
            try:
                response = self.client.models.generate_content(
                    model=self.settings.model_name,
                    contents=contents,
                    config=self._config(),
                )
                text = getattr(response, "text", None) or ""
                return {"success": True, "text": text.strip()}
            except Exception as e:
                logger.warning("Chat attempt %d failed: %s", attempt + 1, e)
                error = str(e) or CONNECT_FAILED
                if attempt + 1 < self.attempts:
                    time.sleep(self.retry_delay)
        return {"success": False, "text": error}
