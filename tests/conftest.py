from datetime import datetime, timedelta, timezone
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")

import pytest

from therapy_journal.entries import EntryCreated, JournalLog, reduce

START = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def build_log(moods: List[int], days: Optional[List[int]] = None, content: str = "Checking in today.") -> JournalLog:
    """Log with one entry per mood, on START + days[i] (default: same day, one hour apart)."""
    log = JournalLog()
    for i, mood in enumerate(moods):
        offset = timedelta(days=days[i]) if days is not None else timedelta(hours=i)
        log = reduce(log, EntryCreated(content, mood, START + offset))
    return log


@pytest.fixture(autouse=True)
def _no_gemini_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "CHAT_TEMPERATURE",
        "CHAT_MAX_TOKENS",
        "CHAT_RATE_LIMIT_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_log():
    return build_log
