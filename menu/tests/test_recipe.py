import unittest

from menu.domain.NutritionalInfo import NutritionalInfo
from menu.domain.Recipe import Recipe, parse_prep_minutes
from menu.utilities.constants import CATEGORY_MAIN_DISH, CATEGORY_SOUP, DIFFICULTY_EASY


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.pastel = Recipe(
            id="1",
            name="Pastel de Choclo",
            description="Tradicional pastel chileno con choclo y pino de carne",
            prep_time="60 min",
            difficulty="Media",
            ingredients=["6 choclos", "500g de carne molida", "2 cebollas"],
            steps=["Preparar el pino", "Hornear"],
            nutrition=NutritionalInfo(calories=420, protein=28.5, carbs=45.2, fat=12.8),
            servings=6,
        )
        self.porotos = Recipe(
            id="2",
            name="Porotos Granados",
            prep_time="30-40 min",
            difficulty=DIFFICULTY_EASY,
            ingredients=["500g de porotos granados", "Albahaca"],
            category=CATEGORY_SOUP,
        )

    def test_vegetarian_detection(self):
        self.assertFalse(self.pastel.is_vegetarian())
        self.assertTrue(self.porotos.is_vegetarian())
        chorizo = self.porotos.copy(ingredients=["1 CHORIZO parrillero"])
        self.assertFalse(chorizo.is_vegetarian())

    def test_prep_time_parsing(self):
        self.assertEqual(parse_prep_minutes("40 min"), 40)
        self.assertEqual(parse_prep_minutes("1 h"), 60)
        self.assertEqual(parse_prep_minutes("1 h 30 min"), 90)
        self.assertEqual(parse_prep_minutes("30-40 min"), 40)
        self.assertEqual(parse_prep_minutes("2 horas"), 120)
        self.assertIsNone(parse_prep_minutes(""))
        self.assertIsNone(parse_prep_minutes("un rato"))
        self.assertIsNone(parse_prep_minutes(None))

    def test_prep_time_ranges_with_units_on_both_ends(self):
        self.assertEqual(parse_prep_minutes("30min-40min"), 40)
        self.assertEqual(parse_prep_minutes("30 min - 40 min"), 40)
        self.assertEqual(parse_prep_minutes("1 h – 2 h"), 120)
        self.assertEqual(parse_prep_minutes("30 - 40"), 40)

    def test_prep_time_ignores_counts_next_to_a_duration(self):
        self.assertEqual(parse_prep_minutes("90 min (2 porciones)"), 90)
        self.assertEqual(parse_prep_minutes("Para 4 personas: 30 min"), 30)
        self.assertEqual(parse_prep_minutes("45"), 45)
        self.assertTrue(self.porotos.copy(prep_time="Para 4 personas: 40 min").is_quick())

    def test_is_quick(self):
        self.assertFalse(self.pastel.is_quick())
        self.assertTrue(self.porotos.is_quick())
        self.assertTrue(self.porotos.copy(prep_time="40 min").is_quick())
        self.assertFalse(self.porotos.copy(prep_time="41 min").is_quick())
        self.assertFalse(self.porotos.copy(prep_time="").is_quick())

    def test_calories(self):
        self.assertEqual(self.pastel.total_calories, 420)
        self.assertTrue(self.pastel.has_nutrition())
        self.assertEqual(self.porotos.total_calories, 0)
        self.assertFalse(self.porotos.has_nutrition())

    def test_copy_replaces_fields_only(self):
        renamed = self.pastel.copy(id="1b", name="Pastel")
        self.assertEqual(renamed.id, "1b")
        self.assertEqual(renamed.ingredients, self.pastel.ingredients)
        self.assertIsNot(renamed.ingredients, self.pastel.ingredients)
        self.assertEqual(self.pastel.name, "Pastel de Choclo")

    def test_identity_is_the_id(self):
        self.assertEqual(self.pastel, self.pastel.copy(name="Otro nombre"))
        self.assertNotEqual(self.pastel, self.porotos)
        self.assertEqual(len({self.pastel, self.pastel.copy()}), 1)

    def test_dict_round_trip(self):
        data = self.pastel.to_dict()
        self.assertEqual(data["nutrition"]["calories"], 420)
        self.assertEqual(data["category"], CATEGORY_MAIN_DISH)
        restored = Recipe.from_dict(data)
        self.assertEqual(restored.to_dict(), data)
        self.assertIsNone(Recipe.from_dict(self.porotos.to_dict()).nutrition)

    def test_detailed_description(self):
        text = self.pastel.detailed_description()
        self.assertTrue(text.startswith("=== Pastel de Choclo ==="))
        self.assertIn("Porciones: 6", text)
        self.assertIn("Calorías: 420 kcal", text)
        self.assertNotIn("Información Nutricional", self.porotos.detailed_description())


if __name__ == '__main__':
    unittest.main()
