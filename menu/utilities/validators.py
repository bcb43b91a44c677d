"""
Input validation schemas using Pydantic for catalog data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from menu.utilities.constants import DIFFICULTY_RANK


class NutritionInput(BaseModel):
    """Schema for per-serving nutritional facts."""
    calories: int = Field(..., ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)
    fiber: float = Field(0.0, ge=0)
    sodium: int = Field(0, ge=0)
    sugar: float = Field(0.0, ge=0)


class RecipeInput(BaseModel):
    """Schema for a catalog recipe entry."""
    id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    origin: str = "Chile"
    description: str = ""
    prep_time: str = ""
    difficulty: str = Field(..., min_length=1)
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    nutrition: Optional[NutritionInput] = None
    category: str = Field(..., min_length=1)
    servings: int = Field(4, ge=1, le=50)
    is_favorite: bool = False

    @field_validator('id', 'name', 'category', 'difficulty')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; reject blank values."""
        v = v.strip()
        if not v:
            raise ValueError('Value cannot be blank')
        return v

    @field_validator('difficulty')
    @classmethod
    def validate_difficulty(cls, v):
        if v not in DIFFICULTY_RANK:
            raise ValueError(f"Unknown difficulty '{v}', expected one of {sorted(DIFFICULTY_RANK)}")
        return v

    @field_validator('ingredients', 'steps')
    @classmethod
    def drop_empty_lines(cls, v):
        """Filter out empty ingredient lines and steps, keeping order."""
        return [line.strip() for line in v if line and line.strip()]
