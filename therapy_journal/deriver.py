"""
Keyword heuristics that turn a chat transcript into journal entry fields.

The rules here are deliberately simple and user-visible, so their behaviour is
pinned by tests. Anything smarter (a model-backed summariser, say) should be a
new ``EntryDeriver`` implementation rather than a change to these rules.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Protocol, Tuple


class Category(str, Enum):
    DEEP_REFLECTIONS = "Deep Reflections"
    RANDOM_THOUGHTS = "Random Thoughts"
    STRESS_DUMP = "Stress Dump / Rants"
    GRATITUDE = "Gratitude Moments"
    BREAKTHROUGHS = "Therapy Breakthroughs"
    DAILY_CHECK_IN = "Daily Check-in"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DerivedFields:
    title: str
    summary: str
    category: Category


class EntryDeriver(Protocol):
    def derive(self, content: str, mood: int) -> DerivedFields:
        ...


# ---------------------------
# Rule tables
# ---------------------------
TITLE_KEYWORDS: Tuple[str, ...] = (
    "worry",
    "stress",
    "happy",
    "sad",
    "grateful",
    "breakthrough",
    "anxious",
    "excited",
    "tired",
    "hopeful",
)
DEFAULT_TITLE = "Daily reflection"

# first match wins
CATEGORY_RULES: List[Tuple[Tuple[str, ...], Category]] = [
    (("grateful", "thankful"), Category.GRATITUDE),
    (("stress", "angry", "frustrated"), Category.STRESS_DUMP),
    (("breakthrough", "realized", "understand"), Category.BREAKTHROUGHS),
    (("random", "thinking"), Category.RANDOM_THOUGHTS),
    (("deep", "meaning", "purpose"), Category.DEEP_REFLECTIONS),
]
DEFAULT_CATEGORY = Category.DAILY_CHECK_IN

SUMMARY_LIMIT = 100

_TITLE_PATTERN = re.compile(
    r"\b(" + "|".join(TITLE_KEYWORDS) + r")", flags=re.IGNORECASE
)


def derive_title(content: str) -> str:
    match = _TITLE_PATTERN.search(content)
    if not match:
        return DEFAULT_TITLE
    return f"Thoughts on {match.group(1).lower()}"


def derive_summary(content: str) -> str:
    """First sentence of *content*, cut to 100 characters with an ellipsis."""
    first = content.split(".", 1)[0]
    if len(first) > SUMMARY_LIMIT:
        return first[:SUMMARY_LIMIT] + "..."
    return first + "."


def derive_category(content: str) -> Category:
    lowered = content.lower()
    for keywords, category in CATEGORY_RULES:
        if any(word in lowered for word in keywords):
            return category
    return DEFAULT_CATEGORY


class KeywordDeriver:
    """Lexical title/summary/category rules. Mood does not affect the result."""

    def derive(self, content: str, mood: int) -> DerivedFields:
        content = content or ""
        return DerivedFields(
            title=derive_title(content),
            summary=derive_summary(content),
            category=derive_category(content),
        )


DEFAULT_DERIVER = KeywordDeriver()


def derive_entry(content: str, mood: int) -> DerivedFields:
    return DEFAULT_DERIVER.derive(content, mood)
