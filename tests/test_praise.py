"""
Test suite for encouragement messages.
"""

import random
import pytest

from praise import PRAISE_MESSAGES, get_praise, get_achievement_praise


class TestPraise:
    @pytest.mark.parametrize('category', list(PRAISE_MESSAGES))
    def test_message_comes_from_category(self, category):
        assert get_praise(category, random.Random(1)) in PRAISE_MESSAGES[category]

    def test_unknown_category_falls_back_to_general(self):
        assert get_praise('nonsense') in PRAISE_MESSAGES['general']

    def test_seeded_choice_is_repeatable(self):
        assert get_praise('study', random.Random(7)) == get_praise('study', random.Random(7))


class TestAchievementPraise:
    @pytest.mark.parametrize('value,expected', [
        (1000000, "One million! Your persistence made it real"),
        (600000, "Half a million, you are on the right track"),
        (100000, "A hundred thousand, keep going"),
    ])
    def test_savings_milestones(self, value, expected):
        assert get_achievement_praise('savings', value) == expected

    def test_small_savings_uses_category(self):
        assert get_achievement_praise('savings', 10) in PRAISE_MESSAGES['savings']

    @pytest.mark.parametrize('days,expected', [
        (30, "30 days! A whole month of practice"),
        (14, "Two weeks, the habit is forming"),
        (7, "One full week, a great start"),
    ])
    def test_streak_milestones(self, days, expected):
        assert get_achievement_praise('streak', days) == expected

    def test_short_streak(self):
        assert get_achievement_praise('streak', 2) in PRAISE_MESSAGES['streak']

    def test_income(self):
        assert get_achievement_praise('income', 500000).startswith("Half a million earned")
        assert get_achievement_praise('income', 5) in PRAISE_MESSAGES['sidejob']
