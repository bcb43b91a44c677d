import logging
import random
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from menu.api.routes import plan, recipes
from menu.domain.errors import CatalogInsufficientError, InvalidMenuShapeError
from menu.infra.Plan_Cache import WeeklyPlanCache
from menu.infra.Recipe_Repository import RecipeRepository
from menu.logic.planning.planner import MenuPlanner
from menu.utilities.config import RANDOM_SEED, RECIPES_FILE

# Logging
logger = logging.getLogger("menu_app")


def build_planner(catalog: Optional[RecipeRepository] = None, seed: Optional[int] = RANDOM_SEED) -> MenuPlanner:
    """Wire catalog, plan cache and planner (the application's composition root)."""
    if catalog is None:
        catalog = RecipeRepository.from_json(RECIPES_FILE)
    return MenuPlanner(WeeklyPlanCache(catalog, rng=random.Random(seed)))


def create_app(planner: Optional[MenuPlanner] = None) -> FastAPI:
    app = FastAPI(title="Weekly Menu API")
    app.state.planner = planner or build_planner()

    app.include_router(plan.router)
    app.include_router(recipes.router)

    @app.exception_handler(CatalogInsufficientError)
    async def _catalog_insufficient(request: Request, exc: CatalogInsufficientError):
        logger.error(f"Cannot plan week {exc.week_number}: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.exception_handler(InvalidMenuShapeError)
    async def _invalid_menu_shape(request: Request, exc: InvalidMenuShapeError):
        logger.error(f"Invalid weekly menu built for {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


app = create_app()
