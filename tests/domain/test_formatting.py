"""Tests for episode number formatting."""

from trakt_actions.domain.formatting import checkin_message, format_episode_number


class TestFormatEpisodeNumber:
    def test_default(self):
        assert format_episode_number(1, 3) == "1x3"

    def test_padded(self):
        assert format_episode_number(1, 3, "padded") == "1x03"

    def test_english(self):
        assert format_episode_number(1, 3, "english") == "S01E03"

    def test_unknown_style_uses_default(self):
        assert format_episode_number(2, 10, "klingon") == "2x10"


class TestCheckinMessage:
    def test_title_and_number(self):
        assert checkin_message("Fargo", "1x3") == "checked in to Fargo 1x3"

    def test_number_only(self):
        assert checkin_message(None, "1x3") == "checked in to 1x3"

    def test_title_only(self):
        assert checkin_message("The Matrix") == "checked in to The Matrix"
