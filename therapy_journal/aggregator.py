"""
Mood statistics over the journal.

Everything is recomputed from scratch on every call; the journal is small and
bounded by a single session, so there is no cached state between renders.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from therapy_journal.entries import JournalEntry
from therapy_journal.moods import mood_label

SERIES_DAYS = 7
ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class MoodStats:
    average_mood: float = 0
    trend: int = 0
    series: Dict[date, int] = field(default_factory=dict)
    distribution: Dict[str, int] = field(default_factory=dict)
    total_entries: int = 0

    @property
    def trend_direction(self) -> str:
        if self.trend > 0:
            return "improving"
        if self.trend < 0:
            return "declining"
        return "flat"

    @property
    def has_data(self) -> bool:
        return self.total_entries > 0


def average_mood(entries: List[JournalEntry]) -> float:
    if not entries:
        return 0
    return sum(e.mood for e in entries) / len(entries)


def mood_trend(entries: List[JournalEntry]) -> int:
    if len(entries) < 2:
        return 0
    return entries[-1].mood - entries[-2].mood


def mood_series(entries: List[JournalEntry], days: int = SERIES_DAYS) -> Dict[date, int]:
    """
    Map each calendar date to a mood, keeping the last ``days`` dates.

    A later entry on an already seen date overwrites its mood but the date
    keeps the position where it was first seen.
    """
    by_date: Dict[date, int] = {}
    for e in entries:
        by_date[e.date] = e.mood
    return dict(list(by_date.items())[-days:]) if days > 0 else {}


def mood_distribution(entries: List[JournalEntry]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for e in entries:
        label = mood_label(e.mood)
        counts[label] = counts.get(label, 0) + 1
    return counts


def category_counts(entries: Iterable[JournalEntry]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for e in entries:
        name = str(e.category)
        counts[name] = counts.get(name, 0) + 1
    return counts


def filter_entries(
    entries: Iterable[JournalEntry],
    category: Optional[str] = None,
    mood: Optional[int] = None,
) -> List[JournalEntry]:
    """Entries matching *category* (``None``/``"All"`` means any) and *mood*."""
    selected = []
    for e in entries:
        if category not in (None, ALL_CATEGORIES) and str(e.category) != str(category):
            continue
        if mood is not None and e.mood != mood:
            continue
        selected.append(e)
    return selected


def aggregate(entries: Iterable[JournalEntry]) -> MoodStats:
    entries = list(entries)
    return MoodStats(
        average_mood=average_mood(entries),
        trend=mood_trend(entries),
        series=mood_series(entries),
        distribution=mood_distribution(entries),
        total_entries=len(entries),
    )
