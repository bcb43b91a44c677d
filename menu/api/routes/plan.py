from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response

from menu.infra.pdf_utils import generate_pdf_for_week
from menu.logic.planning.planner import MenuPlanner
from menu.utilities.constants import DAYS_PER_MENU

router = APIRouter(prefix="/api/plan", tags=["plan"])

# Week of year; defaults to the current ISO week
Week = Annotated[Optional[int], Query(ge=1, le=53)]


def get_planner(request: Request) -> MenuPlanner:
    return request.app.state.planner


@router.get("")
def weekly_plan(week: Week = None, planner: MenuPlanner = Depends(get_planner)):
    """Return the five-day menu for the week."""
    return planner.get_weekly_plan(week).to_dict()


@router.get("/day/{day}")
def plan_day(day: int = Path(..., description="0 = Monday .. 4 = Friday"), week: Week = None,
             planner: MenuPlanner = Depends(get_planner)):
    if not 0 <= day < DAYS_PER_MENU:
        raise HTTPException(status_code=404, detail=f"Day must be between 0 and {DAYS_PER_MENU - 1}")
    return planner.get_recipe_for_day(day, week).to_dict()


@router.get("/summary")
def plan_summary(week: Week = None, planner: MenuPlanner = Depends(get_planner)):
    return planner.get_summary(week).to_dict()


@router.get("/recommendations")
def plan_recommendations(week: Week = None, planner: MenuPlanner = Depends(get_planner)):
    menu = planner.get_weekly_plan(week)
    return {"week": menu.week_number, "recommendations": planner.get_recommendations(menu.week_number)}


@router.get("/report", response_class=Response)
def plan_report(week: Week = None, planner: MenuPlanner = Depends(get_planner)):
    """Plain-text weekly report."""
    return Response(content=planner.get_report(week), media_type="text/plain; charset=utf-8")


@router.get("/nutrition")
def plan_nutrition(week: Week = None, planner: MenuPlanner = Depends(get_planner)):
    return planner.get_daily_breakdown(week)


@router.get("/ingredients")
def plan_ingredients(week: Week = None, planner: MenuPlanner = Depends(get_planner)):
    menu = planner.get_weekly_plan(week)
    items = sorted(planner.get_unique_ingredients(menu.week_number))
    return {"week": menu.week_number, "count": len(items), "items": items}


@router.get("/pdf")
def plan_pdf(week: Week = None, planner: MenuPlanner = Depends(get_planner)):
    menu = planner.get_weekly_plan(week)
    pdf_bytes = generate_pdf_for_week(menu)
    filename = f"menu_semana_{menu.week_number:02d}.pdf"
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers={"Content-Disposition": f'inline; filename="{filename}"'})
