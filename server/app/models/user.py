# app/models/user.py
from datetime import datetime
from typing import List, Literal
from pydantic import BaseModel, Field

Goal = Literal[
    "strength & conditioning",
    "general health",
    "weight loss",
    "muscle building",
    "endurance",
    "flexibility",
]
Intensity = Literal["beginner", "intermediate", "advanced"]

class UserCreate(BaseModel):
    age: int = Field(ge=13, le=100)
    goals: List[Goal] = Field(min_length=1)
    intensity: Intensity

class UserOut(UserCreate):
    id: str
    createdAt: datetime
