from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

from app.models.user import UserOut

class ExerciseEntry(BaseModel):
    """One line of a plan; which fields are set depends on the goal and intensity"""
    model_config = ConfigDict(frozen=True)

    name: str
    sets: Optional[int] = None
    reps: Optional[str] = None
    duration: Optional[str] = None
    rest: Optional[str] = None
    intensity: Optional[str] = None
    exercises: Optional[str] = None  # free-text note for circuits

class FitnessPlanDraft(BaseModel):
    title: str
    description: str
    exercises: List[ExerciseEntry] = []
    duration: str
    frequency: str

class FitnessPlanCreate(BaseModel):
    userId: Optional[str] = None

class FitnessPlanOut(FitnessPlanDraft):
    id: str
    userId: str
    createdAt: datetime

class FitnessPlanWithUser(FitnessPlanOut):
    user: UserOut
