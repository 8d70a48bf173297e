# app/routers/users.py
import logging

from fastapi import APIRouter, HTTPException

from app.models.user import UserCreate, UserOut
from app.services.plan_store import PlanStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])

@router.post("", response_model=UserOut, status_code=201)
def create_user(payload: UserCreate):
    """Store the submitted age, goals and intensity"""
    try:
        return PlanStore.create_user(payload)
    except Exception as e:
        logger.error(f"Error creating user: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
