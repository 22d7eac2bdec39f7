from fastapi import APIRouter, Body, HTTPException
from typing import Any, Dict

from .. import schemas
from ..calculators.registry import get_calculator, list_calculators
from ..estimate_engine import EstimateEngine
from ..wall_groups import add_extra, compute_group, remove_extra, update_extra

router = APIRouter(tags=["estimate"])


@router.get("/calculators")
def get_categories():
    return {"categories": list_calculators()}


@router.post("/calculators/{category}", response_model=schemas.Row)
def run_calculator(category: str, fields: Dict[str, Any] = Body(...)):
    """Run one calculator on a raw fields dict."""
    try:
        calculator = get_calculator(category)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return calculator.calculate(fields)


@router.post("/wall-groups/compute", response_model=schemas.WallGroupOut)
def compute_wall_group(group: schemas.WallGroupIn):
    return compute_group(group.model_dump())


@router.post("/wall-groups/extras", response_model=schemas.WallGroupOut)
def change_extras(change: schemas.ExtraChangeIn):
    """Add / update / remove an extra, then recompute the group."""
    group = change.group.model_dump()
    try:
        if change.action == "add":
            if change.extra_type is None:
                raise ValueError("extra_type is required to add an extra")
            group = add_extra(
                group, change.extra_type,
                item=change.item.model_dump() if change.item else None,
                inputs=change.inputs, waste_pct=change.waste_pct,
            )
        elif change.action == "update":
            group = update_extra(group, change.extra_id, change.patch)
        else:
            group = remove_extra(group, change.extra_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return compute_group(group)


@router.post("/estimate", response_model=schemas.EstimateOut)
def build_estimate(project: schemas.ProjectIn):
    return EstimateEngine().build_estimate(project.model_dump())
