"""NutritionalInfo domain value: per-serving calories, macros, fiber, sodium and sugar."""
from typing import List, Optional

from menu.utilities.constants import (
    DAILY_VALUES, GOOD_FIBER_LIMIT, HIGH_FAT_LIMIT, HIGH_PROTEIN_LIMIT,
    HIGH_SODIUM_LIMIT, LOW_CALORIE_LIMIT, LOW_SODIUM_LIMIT
)

# Spanish and English spellings accepted by daily_value_percentage
_NUTRIENT_ALIASES = {
    'calorias': 'calories', 'calorías': 'calories', 'calories': 'calories',
    'proteinas': 'protein', 'proteínas': 'protein', 'protein': 'protein',
    'carbohidratos': 'carbs', 'carbs': 'carbs',
    'grasas': 'fat', 'fat': 'fat', 'fats': 'fat',
    'fibra': 'fiber', 'fiber': 'fiber',
    'sodio': 'sodium', 'sodium': 'sodium',
}


class NutritionalInfo:
    def __init__(self, calories: int = 0, protein: float = 0.0, carbs: float = 0.0, fat: float = 0.0,
                 fiber: float = 0.0, sodium: int = 0, sugar: float = 0.0):
        self.calories = calories
        self.protein = protein
        self.carbs = carbs
        self.fat = fat
        self.fiber = fiber
        self.sodium = sodium
        self.sugar = sugar

    @property
    def is_low_calorie(self) -> bool:
        return self.calories < LOW_CALORIE_LIMIT

    @property
    def is_high_protein(self) -> bool:
        return self.protein > HIGH_PROTEIN_LIMIT

    @property
    def is_low_sodium(self) -> bool:
        return self.sodium < LOW_SODIUM_LIMIT

    def macro_calories(self) -> int:
        """Calories implied by the macros (4 kcal/g protein and carbs, 9 kcal/g fat)."""
        return int(self.protein * 4 + self.carbs * 4 + self.fat * 9)

    def summary_text(self) -> str:
        lines = [
            f"Calorías: {self.calories} kcal",
            f"Proteínas: {self.protein}g",
            f"Carbohidratos: {self.carbs}g",
            f"Grasas: {self.fat}g",
        ]
        if self.fiber > 0:
            lines.append(f"Fibra: {self.fiber}g")
        if self.sugar > 0:
            lines.append(f"Azúcares: {self.sugar}g")
        if self.sodium > 0:
            lines.append(f"Sodio: {self.sodium}mg")
        return "\n".join(lines)

    def recommendations(self) -> List[str]:
        """Advisory lines for a single serving, most favourable first."""
        result: List[str] = []
        if self.is_low_calorie:
            result.append("✓ Bajo en calorías - ideal para control de peso")
        if self.is_high_protein:
            result.append("✓ Alto en proteínas - excelente para desarrollo muscular")
        if self.is_low_sodium:
            result.append("✓ Bajo en sodio - bueno para la presión arterial")
        if self.fiber >= GOOD_FIBER_LIMIT:
            result.append("✓ Buena fuente de fibra - ayuda a la digestión")
        if self.fat > HIGH_FAT_LIMIT:
            result.append("⚠ Alto en grasas - consumir con moderación")
        if self.sodium > HIGH_SODIUM_LIMIT:
            result.append("⚠ Alto en sodio - no recomendado para hipertensión")
        if not result:
            result.append("Receta nutricionalmente balanceada")
        return result

    @staticmethod
    def daily_value_percentage(nutrient: str, amount: float) -> float:
        """Percentage of the reference daily value; 0.0 for unknown nutrients."""
        key = _NUTRIENT_ALIASES.get((nutrient or '').strip().lower())
        if key is None:
            return 0.0
        return amount / DAILY_VALUES[key] * 100

    @staticmethod
    def from_dict(data) -> Optional['NutritionalInfo']:
        if not isinstance(data, dict):
            return None
        allowed = {"calories", "protein", "carbs", "fat", "fiber", "sodium", "sugar"}
        return NutritionalInfo(**{k: v for k, v in data.items() if k in allowed and v is not None})

    def to_dict(self):
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "fiber": self.fiber,
            "sodium": self.sodium,
            "sugar": self.sugar,
        }

    def __eq__(self, other):
        if not isinstance(other, NutritionalInfo):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return (f"{self.calories} kcal - Protein: {self.protein}g, Carbs: {self.carbs}g, "
                f"Fat: {self.fat}g")

    __repr__ = __str__
