"""AI therapy journal: entry derivation, mood aggregation and the chat helper."""

from therapy_journal.aggregator import MoodStats, aggregate, filter_entries
from therapy_journal.deriver import Category, DerivedFields, derive_entry
from therapy_journal.entries import EntryCreated, JournalEntry, JournalLog, reduce

__all__ = [
    "Category",
    "DerivedFields",
    "EntryCreated",
    "JournalEntry",
    "JournalLog",
    "MoodStats",
    "aggregate",
    "derive_entry",
    "filter_entries",
    "reduce",
]
