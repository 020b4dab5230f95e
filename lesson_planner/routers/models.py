"""
Models Router

Generation models a lesson plan request may name in PlanRequest.model_id.
The planner form lists them and preselects the one flagged is_default.
"""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from lesson_planner.services.llm.registry import list_models

router = APIRouter()


class PlannerModelResponse(BaseModel):
    id: str
    display_name: str
    tier: str
    description: str
    is_default: bool = False


@router.get("", response_model=list[PlannerModelResponse])
async def list_planner_models():
    return list_models()


@router.get("/{model_id}", response_model=PlannerModelResponse)
async def get_planner_model(model_id: str):
    """Look up one model so the form can check a saved choice before generating."""
    for model in list_models():
        if model["id"] == model_id:
            return model
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Unknown model: {model_id}",
    )
