import unittest

from menu.domain.WeeklyMenu import WeeklyMenu
from menu.domain.errors import InvalidMenuShapeError
from menu.tests.helpers import make_recipe
from menu.utilities.constants import DIFFICULTY_EASY, DIFFICULTY_HARD, DIFFICULTY_MEDIUM


class TestWeeklyMenu(unittest.TestCase):

    def setUp(self):
        self.days = [
            make_recipe("1", name="Pastel de Choclo", calories=420, difficulty=DIFFICULTY_MEDIUM),
            make_recipe("2", name="Porotos Granados", calories=450, prep_time="90 min"),
            make_recipe("3", name="Cazuela", calories=380, difficulty=DIFFICULTY_HARD,
                        ingredients=["1 kg de vacuno"]),
            make_recipe("4", name="Empanadas", calories=None),
            make_recipe("5", name="Humitas", calories=300),
        ]
        self.menu = WeeklyMenu("Recetas de la Semana #10", 10, self.days)

    def test_shape_is_enforced(self):
        with self.assertRaises(InvalidMenuShapeError) as ctx:
            WeeklyMenu("corta", 1, self.days[:4])
        self.assertEqual(ctx.exception.days, 4)
        with self.assertRaises(InvalidMenuShapeError):
            WeeklyMenu("larga", 1, self.days + [make_recipe("6")])

    def test_every_day_needs_a_name(self):
        self.days[2].name = "   "
        with self.assertRaises(ValueError):
            WeeklyMenu("sin nombre", 1, self.days)

    def test_days_are_immutable(self):
        self.assertIsInstance(self.menu.days, tuple)
        self.days.pop()
        self.assertEqual(len(self.menu), 5)

    def test_recipe_by_index(self):
        self.assertEqual(self.menu.recipe(0).name, "Pastel de Choclo")
        self.assertEqual(self.menu.recipe(4).name, "Humitas")
        with self.assertRaises(IndexError):
            self.menu.recipe(5)
        with self.assertRaises(IndexError):
            self.menu.recipe(-1)

    def test_calories(self):
        self.assertEqual(self.menu.total_calories, 1550)
        self.assertAlmostEqual(self.menu.average_daily_calories, 310.0)
        self.assertEqual(self.menu.daily_calories()["Jueves"], 0)
        self.assertEqual(self.menu.count_with_nutrition(), 4)

    def test_by_difficulty(self):
        ordered = self.menu.by_difficulty()
        self.assertEqual(ordered[0].difficulty, DIFFICULTY_EASY)
        self.assertEqual(ordered[-1].name, "Cazuela")
        self.assertTrue(self.menu.has_difficulty_variety())

    def test_filters(self):
        self.assertEqual([r.id for r in self.menu.vegetarian()], ["1", "2", "4", "5"])
        self.assertEqual([r.id for r in self.menu.quick()], ["1", "3", "4", "5"])
        self.assertEqual([r.id for r in self.menu.search("pOrOtOs")], ["2"])
        self.assertEqual(len(self.menu.search("  ")), 5)

    def test_to_dict_names_each_day(self):
        data = self.menu.to_dict()
        self.assertEqual(data["week_number"], 10)
        self.assertEqual([d["day"] for d in data["days"]], ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes"])
        self.assertEqual(data["days"][2]["name"], "Cazuela")


if __name__ == '__main__':
    unittest.main()
