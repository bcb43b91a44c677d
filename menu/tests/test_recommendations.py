import unittest

from menu.logic.reporting.nutrition import WeeklySummary
from menu.logic.reporting.recommendations import (
    ADD_VEGETARIAN, BALANCED_CALORIES, BEGINNER_FRIENDLY, BUSY_DAYS_FRIENDLY,
    GOOD_VEGETARIAN_VARIETY, HIGH_CALORIE_WARNING, LOW_CALORIE_WARNING, recommend
)


def summary(avg, vegetarian=1, easy=0, quick=0):
    return WeeklySummary(total_calories=int(avg * 5), avg_calories=avg, vegetarian_count=vegetarian,
                         easy_count=easy, quick_count=quick)


class TestWeeklyRecommendations(unittest.TestCase):

    def test_calorie_band(self):
        self.assertEqual(recommend(summary(350))[0], LOW_CALORIE_WARNING)
        self.assertEqual(recommend(summary(900))[0], HIGH_CALORIE_WARNING)
        self.assertEqual(recommend(summary(600))[0], BALANCED_CALORIES)

    def test_band_edges_are_balanced(self):
        self.assertEqual(recommend(summary(400))[0], BALANCED_CALORIES)
        self.assertEqual(recommend(summary(800))[0], BALANCED_CALORIES)
        self.assertEqual(recommend(summary(399.8))[0], LOW_CALORIE_WARNING)

    def test_vegetarian_rules(self):
        self.assertIn(ADD_VEGETARIAN, recommend(summary(600, vegetarian=0)))
        one = recommend(summary(600, vegetarian=1))
        self.assertNotIn(ADD_VEGETARIAN, one)
        self.assertNotIn(GOOD_VEGETARIAN_VARIETY, one)
        self.assertIn(GOOD_VEGETARIAN_VARIETY, recommend(summary(600, vegetarian=2)))

    def test_easy_and_quick_rules(self):
        self.assertEqual(recommend(summary(600, easy=2, quick=2)), [BALANCED_CALORIES])
        lines = recommend(summary(600, vegetarian=3, easy=3, quick=4))
        self.assertEqual(lines, [BALANCED_CALORIES, GOOD_VEGETARIAN_VARIETY, BEGINNER_FRIENDLY, BUSY_DAYS_FRIENDLY])


if __name__ == '__main__':
    unittest.main()
