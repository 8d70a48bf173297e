# app/services/plan_store.py
"""
Plan Store
MongoDB persistence for users and their generated fitness plans
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING

from app.database.connection import db
from app.models.fitness_plan import FitnessPlanDraft, FitnessPlanOut, FitnessPlanWithUser
from app.models.user import UserCreate, UserOut

logger = logging.getLogger(__name__)

class PlanStoreError(Exception):
    """Raised when the database is not reachable"""

def _oid(val: Any) -> Optional[ObjectId]:
    """Convert string to ObjectId; malformed ids map to None so callers treat them as not found"""
    if isinstance(val, ObjectId):
        return val
    try:
        return ObjectId(val)
    except (InvalidId, TypeError):
        return None

def _utcnow() -> datetime:
    """Current UTC time at the millisecond precision MongoDB stores"""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)

def _database():
    if db is None:
        raise PlanStoreError("Database connection not available")
    return db

def _user_from_doc(doc: Dict[str, Any]) -> UserOut:
    return UserOut(
        id=str(doc["_id"]),
        age=doc["age"],
        goals=doc.get("goals", []),
        intensity=doc["intensity"],
        createdAt=doc["created_at"],
    )

def _plan_fields(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": str(doc["_id"]),
        "userId": str(doc["user_id"]),
        "title": doc["title"],
        "description": doc["description"],
        "exercises": doc.get("exercises", []),
        "duration": doc["duration"],
        "frequency": doc["frequency"],
        "createdAt": doc["created_at"],
    }

class PlanStore:
    """Service for storing users and their fitness plans"""

    @staticmethod
    def ensure_indexes():
        # plans are listed per user, newest first
        _database().fitness_plans.create_index(
            [("user_id", ASCENDING), ("created_at", DESCENDING)],
            name="idx_user_created",
        )

    @staticmethod
    def create_user(payload: UserCreate) -> UserOut:
        doc = {
            "age": payload.age,
            "goals": list(payload.goals),
            "intensity": payload.intensity,
            "created_at": _utcnow(),
        }
        res = _database().users.insert_one(doc)
        doc["_id"] = res.inserted_id
        logger.info(f"Created user: {res.inserted_id}")
        return _user_from_doc(doc)

    @staticmethod
    def get_user(user_id: str) -> Optional[UserOut]:
        oid = _oid(user_id)
        if oid is None:
            return None
        doc = _database().users.find_one({"_id": oid})
        if not doc:
            return None
        return _user_from_doc(doc)

    @staticmethod
    def create_plan(user_id: str, draft: FitnessPlanDraft) -> FitnessPlanOut:
        doc = {
            "user_id": ObjectId(user_id),
            "title": draft.title,
            "description": draft.description,
            "exercises": [entry.model_dump(exclude_none=True) for entry in draft.exercises],
            "duration": draft.duration,
            "frequency": draft.frequency,
            "created_at": _utcnow(),
        }
        res = _database().fitness_plans.insert_one(doc)
        doc["_id"] = res.inserted_id
        logger.info(f"Created fitness plan {res.inserted_id} for user {user_id}")
        return FitnessPlanOut(**_plan_fields(doc))

    @staticmethod
    def list_plans_for_user(user_id: str) -> List[FitnessPlanOut]:
        oid = _oid(user_id)
        if oid is None:
            return []
        cursor = _database().fitness_plans.find({"user_id": oid}).sort("created_at", DESCENDING)
        return [FitnessPlanOut(**_plan_fields(doc)) for doc in cursor]

    @staticmethod
    def get_plan(plan_id: str) -> Optional[FitnessPlanWithUser]:
        """Fetch a plan together with the user it was generated for"""
        oid = _oid(plan_id)
        if oid is None:
            return None
        database = _database()
        doc = database.fitness_plans.find_one({"_id": oid})
        if not doc:
            return None
        user_doc = database.users.find_one({"_id": doc["user_id"]})
        if not user_doc:
            logger.warning(f"Fitness plan {plan_id} references missing user {doc['user_id']}")
            return None
        return FitnessPlanWithUser(**_plan_fields(doc), user=_user_from_doc(user_doc))
