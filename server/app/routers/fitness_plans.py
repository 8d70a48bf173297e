# app/routers/fitness_plans.py
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException

from app.models.fitness_plan import FitnessPlanCreate, FitnessPlanOut, FitnessPlanWithUser
from app.services.plan_service import UserNotFoundError, create_plan_for_user
from app.services.plan_store import PlanStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Fitness Plans"])

@router.post(
    "/fitness-plans",
    response_model=FitnessPlanOut,
    response_model_exclude_none=True,
    status_code=201,
)
def create_fitness_plan(payload: Optional[FitnessPlanCreate] = None):
    """Generate and save a plan for an existing user"""
    user_id = payload.userId if payload else None
    if not user_id:
        raise HTTPException(status_code=400, detail="User ID is required")

    try:
        return create_plan_for_user(user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except Exception as e:
        logger.error(f"Error creating fitness plan: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.get(
    "/users/{user_id}/fitness-plans",
    response_model=List[FitnessPlanOut],
    response_model_exclude_none=True,
)
def list_fitness_plans(user_id: str):
    """All plans generated for a user, newest first"""
    try:
        return PlanStore.list_plans_for_user(user_id)
    except Exception as e:
        logger.error(f"Error fetching fitness plans: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.get(
    "/fitness-plans/{plan_id}",
    response_model=FitnessPlanWithUser,
    response_model_exclude_none=True,
)
def get_fitness_plan(plan_id: str):
    try:
        plan = PlanStore.get_plan(plan_id)
        if plan is None:
            raise HTTPException(status_code=404, detail="Fitness plan not found")
        return plan
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching fitness plan: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
