from therapy_journal.moods import MOOD_CHOICES, UNKNOWN_COLOR, label_color, mood_color, mood_label


def test_labels() -> None:
    assert [mood_label(m) for m in range(1, 6)] == ["Very Sad", "Sad", "Neutral", "Happy", "Very Happy"]


def test_out_of_range_is_unknown() -> None:
    for mood in (0, 6, 7, -1, None):
        assert mood_label(mood) == "Unknown"
        assert mood_color(mood) == UNKNOWN_COLOR


def test_label_color_matches_mood_color() -> None:
    assert label_color("Very Sad") == mood_color(1)
    assert label_color("Unknown") == UNKNOWN_COLOR


def test_choices_cover_scale() -> None:
    assert [value for value, _, _ in MOOD_CHOICES] == [1, 2, 3, 4, 5]
