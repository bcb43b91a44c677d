from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from menu.api.routes.plan import get_planner
from menu.logic.planning.planner import MenuPlanner

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(category: Optional[str] = Query(default=None), q: Optional[str] = Query(default=None),
                 planner: MenuPlanner = Depends(get_planner)):
    """Catalog recipes, optionally filtered by category and a name/description query."""
    catalog = planner.cache.catalog
    recipes = catalog.search(q) if q else catalog.get_all()
    if category:
        recipes = [r for r in recipes if r.category == category]
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.get("/{recipe_id}")
def recipe_detail(recipe_id: str, planner: MenuPlanner = Depends(get_planner)):
    """A catalog recipe or a composite from a generated week."""
    recipe = planner.get_recipe_by_id(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe_id}' not found")
    return recipe.to_dict()
