"""Analytics copy: insight sentences and the static wellbeing panels."""

from typing import List, Tuple

from therapy_journal.aggregator import MoodStats

AFFIRMATION = (
    "You are capable of growth and change. Every conversation is a step "
    "forward in your healing journey."
)

# Mock panels; nothing is inferred from the conversations.
BIG_FIVE: List[Tuple[str, int]] = [
    ("Openness", 75),
    ("Conscientiousness", 60),
    ("Extraversion", 45),
    ("Agreeableness", 80),
    ("Neuroticism", 40),
]

CURRENT_CHALLENGES = [
    "Work-life balance",
    "Self-doubt",
    "Time management",
    "Social anxiety",
]

RECENT_GROWTH = [
    "Improved self-awareness",
    "Better emotional regulation",
    "Increased gratitude practice",
]

GRATITUDE_ITEMS = [
    "Family support",
    "Good health",
    "Career opportunities",
    "Personal relationships",
    "Learning experiences",
]

EMPTY_INSIGHTS = (
    "Start journaling to see personalized insights about your mood patterns and growth!"
)


def wellbeing(average: float) -> str:
    return "positive" if average >= 3 else "challenging"


def format_mood(average: float) -> str:
    return f"{average:.1f}"


def format_trend(trend: float) -> str:
    return f"{trend:+.1f}" if trend else "0.0"


def personal_insights(stats: MoodStats) -> List[str]:
    if not stats.has_data:
        return []
    # wellbeing follows the displayed one-decimal average
    shown = format_mood(stats.average_mood)
    lines = [
        f"You've been consistently engaging with self-reflection through "
        f"{stats.total_entries} journal entries.",
        f"Your average mood score is {shown}/5, showing "
        f"{wellbeing(float(shown))} overall wellbeing.",
    ]
    if stats.trend > 0:
        lines.append("Great news! Your mood has been trending upward recently.")
    elif stats.trend < 0:
        lines.append(
            "Your mood has dipped recently - consider what support you might need."
        )
    lines.append(
        "Regular journaling like this shows commitment to your mental health journey."
    )
    lines.append(
        "You're developing stronger emotional awareness and coping strategies."
    )
    return lines
