"""Journal entries, the append-only log that owns them, and its reducer."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterator, Optional, Tuple

from therapy_journal.deriver import Category, EntryDeriver, DEFAULT_DERIVER

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class JournalEntry:
    """One derived record created from a completed chat turn."""

    id: str
    created_at: datetime
    content: str
    mood: int
    title: str
    summary: str
    category: Category

    @property
    def date(self) -> date:
        """Local calendar date of the entry; the unit the mood series buckets on."""
        return self.created_at.date()


@dataclass(frozen=True)
class EntryCreated:
    content: str
    mood: int
    created_at: Optional[datetime] = None


def create_entry(
    content: str,
    mood: int,
    deriver: Optional[EntryDeriver] = None,
    created_at: Optional[datetime] = None,
) -> JournalEntry:
    fields = (deriver or DEFAULT_DERIVER).derive(content, mood)
    return JournalEntry(
        id=uuid.uuid4().hex,
        created_at=created_at or _now(),
        content=content,
        mood=mood,
        title=fields.title,
        summary=fields.summary,
        category=fields.category,
    )


@dataclass(frozen=True)
class JournalLog:
    """
    Insertion-ordered, append-only collection of entries.

    ``append`` never mutates: it returns a new log sharing the old entries,
    so a caller holding the previous log still sees the previous state.
    """

    entries: Tuple[JournalEntry, ...] = field(default_factory=tuple)

    def append(self, entry: JournalEntry) -> "JournalLog":
        return JournalLog(self.entries + (entry,))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[JournalEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __getitem__(self, index):
        return self.entries[index]


def reduce(
    log: JournalLog, event: EntryCreated, deriver: Optional[EntryDeriver] = None
) -> JournalLog:
    """Apply *event* to *log* and return the new log."""
    entry = create_entry(event.content, event.mood, deriver, event.created_at)
    logger.info(
        "Journal entry %s created: %r (%s, mood %s)",
        entry.id,
        entry.title,
        entry.category,
        entry.mood,
    )
    return log.append(entry)
