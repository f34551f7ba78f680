from datetime import datetime, timedelta, timezone

import pytest

from mood_engine.domain.aggregation import (
    HOURS_PER_DAY,
    hourly_breakdown,
    mood_distribution,
    summarize_moods,
)
from mood_engine.domain.models import MoodCategory
from mood_engine.exceptions import InvalidArgument


def at(hour, minute=0, day=3):
    return datetime(2024, 6, day, hour, minute)


class TestHourlyBreakdown:

    def test_empty_input_gives_24_empty_buckets(self):
        buckets = hourly_breakdown([])

        assert len(buckets) == HOURS_PER_DAY
        assert [b.hour for b in buckets] == list(range(24))
        assert all(b.count == 0 and b.dominant_mood is None for b in buckets)

    def test_tie_goes_to_earlier_mood(self):
        buckets = hourly_breakdown([(at(9, 5), "sad"), (at(9, 40), "happy")])

        assert buckets[9].count == 2
        assert buckets[9].dominant_mood == MoodCategory.HAPPY

    def test_majority_wins(self):
        entries = [
            (at(22, 1), MoodCategory.ANXIOUS),
            (at(22, 15, day=4), MoodCategory.ANXIOUS),
            (at(22, 59, day=5), MoodCategory.CALM),
            (at(7), MoodCategory.ENERGETIC),
        ]

        buckets = hourly_breakdown(entries)

        assert buckets[22].count == 3
        assert buckets[22].dominant_mood == MoodCategory.ANXIOUS
        assert buckets[22].mood_counts[MoodCategory.CALM] == 1
        assert buckets[7].dominant_mood == MoodCategory.ENERGETIC
        assert sum(b.count for b in buckets) == 4

    def test_order_does_not_matter(self):
        entries = [(at(9), "sad"), (at(9), "happy"), (at(9), "sad"), (at(13), "calm")]

        assert hourly_breakdown(entries) == hourly_breakdown(list(reversed(entries)))

    def test_hour_read_as_given(self):
        tz = timezone(timedelta(hours=-5))
        buckets = hourly_breakdown([(datetime(2024, 6, 3, 23, 30, tzinfo=tz), "calm")])

        assert buckets[23].count == 1
        assert buckets[4].count == 0

    def test_label_strings(self):
        buckets = hourly_breakdown([(at(6), " Calm ")])

        assert buckets[6].dominant_mood == MoodCategory.CALM

    def test_unknown_mood(self):
        with pytest.raises(InvalidArgument):
            hourly_breakdown([(at(6), "sleepy")])

    @pytest.mark.parametrize("timestamp", ["2024-06-03T09:00:00", 1717405200, None])
    def test_timestamp_must_be_datetime(self, timestamp):
        with pytest.raises(InvalidArgument):
            hourly_breakdown([(timestamp, "happy")])


class TestMoodDistribution:

    def test_counts_and_percentages(self):
        dist = mood_distribution(["happy", "sad", "happy"])

        assert dist.total == 3
        assert dist.counts[MoodCategory.HAPPY] == 2
        assert dist.percentages[MoodCategory.HAPPY] == 66.7
        assert dist.percentages[MoodCategory.SAD] == 33.3
        assert dist.percentages[MoodCategory.CALM] == 0.0
        assert dist.dominant_mood == MoodCategory.HAPPY

    def test_every_mood_present(self):
        dist = mood_distribution([])

        assert list(dist.counts) == list(MoodCategory)
        assert dist.total == 0
        assert dist.dominant_mood is None


class TestSummarizeMoods:

    def test_summary_with_runners_up(self):
        moods = ["anxious", "calm", "anxious", "sad", "anxious"]

        assert summarize_moods(moods) == "Mostly anxious (3 of 5 entries); also calm, sad."

    def test_single_entry(self):
        assert summarize_moods(["happy"]) == "Mostly happy (1 of 1 entry)."

    def test_no_entries(self):
        assert summarize_moods([]) == "No journal entries yet."
