"""Mood scale lookups shared by the deriver consumers, aggregator and UI."""

from typing import Dict, List, Tuple

UNKNOWN_MOOD = "Unknown"

MOOD_LABELS: Dict[int, str] = {
    1: "Very Sad",
    2: "Sad",
    3: "Neutral",
    4: "Happy",
    5: "Very Happy",
}

MOOD_COLORS: Dict[int, str] = {
    1: "#ef4444",
    2: "#f97316",
    3: "#eab308",
    4: "#22c55e",
    5: "#10b981",
}
UNKNOWN_COLOR = "#6b7280"

# (value, label, emoji) for the mood tracker
MOOD_CHOICES: List[Tuple[int, str, str]] = [
    (1, "Very Sad", "😣"),
    (2, "Sad", "😔"),
    (3, "Neutral", "😐"),
    (4, "Happy", "😊"),
    (5, "Very Happy", "😁"),
]

DEFAULT_MOOD = 3


def mood_label(mood) -> str:
    return MOOD_LABELS.get(mood, UNKNOWN_MOOD)


def mood_color(mood) -> str:
    return MOOD_COLORS.get(mood, UNKNOWN_COLOR)


def label_color(label: str) -> str:
    """Colour for a distribution bucket keyed by label rather than value."""
    for value, name in MOOD_LABELS.items():
        if name == label:
            return MOOD_COLORS[value]
    return UNKNOWN_COLOR
