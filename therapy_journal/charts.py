"""matplotlib figures for the analytics tab."""

import math
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import pandas as pd

from therapy_journal.aggregator import MoodStats
from therapy_journal.moods import label_color

LINE_COLOR = "#6366f1"
RADAR_COLOR = "#8b5cf6"


def series_frame(stats: MoodStats) -> pd.DataFrame:
    if not stats.series:
        return pd.DataFrame(columns=["date", "mood"])
    return pd.DataFrame(
        [{"date": pd.Timestamp(day), "mood": mood} for day, mood in stats.series.items()]
    )


def distribution_frame(stats: MoodStats) -> pd.DataFrame:
    if not stats.distribution:
        return pd.DataFrame(columns=["mood", "count"])
    return pd.DataFrame(list(stats.distribution.items()), columns=["mood", "count"])


def plot_mood_series(stats: MoodStats) -> Optional[plt.Figure]:
    df = series_frame(stats)
    if df.empty:
        return None
    fig, ax = plt.subplots(figsize=(6, 3))
    ax.plot(
        df["date"].dt.strftime("%m/%d/%Y"),
        df["mood"],
        marker="o",
        color=LINE_COLOR,
        linewidth=3,
    )
    ax.set_title("Mood Over Time")
    ax.set_ylim(1, 5)
    ax.set_yticks([1, 2, 3, 4, 5])
    ax.grid(True, linestyle="--", color="#e5e7eb")
    fig.autofmt_xdate()
    return fig


def plot_distribution(stats: MoodStats) -> Optional[plt.Figure]:
    df = distribution_frame(stats)
    if df.empty:
        return None
    fig, ax = plt.subplots(figsize=(4, 4))
    ax.pie(
        df["count"],
        labels=df["mood"],
        colors=[label_color(label) for label in df["mood"]],
        autopct="%1.0f%%",
    )
    ax.set_title("Mood Distribution")
    return fig


def plot_big_five(traits: List[Tuple[str, int]]) -> plt.Figure:
    names = [name for name, _ in traits]
    values = [value for _, value in traits]
    angles = [2 * math.pi * i / len(traits) for i in range(len(traits))]
    # close the polygon
    values = values + values[:1]
    angles = angles + angles[:1]

    fig, ax = plt.subplots(figsize=(4, 4), subplot_kw={"polar": True})
    ax.plot(angles, values, color=RADAR_COLOR)
    ax.fill(angles, values, color=RADAR_COLOR, alpha=0.3)
    ax.set_xticks(angles[:-1])
    ax.set_xticklabels(names)
    ax.set_ylim(0, 100)
    ax.set_title("Personality Insights (Big Five)")
    return fig


def close(fig: Optional[plt.Figure]) -> None:
    if fig is not None:
        plt.close(fig)
