import logging

from app.models.fitness_plan import FitnessPlanOut
from app.services.plan_generator import generate_fitness_plan
from app.services.plan_store import PlanStore

logger = logging.getLogger(__name__)

class UserNotFoundError(Exception):
    pass

def create_plan_for_user(user_id: str) -> FitnessPlanOut:
    """Generate a plan from the stored user's attributes and persist it"""
    user = PlanStore.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    draft = generate_fitness_plan(user.age, user.goals, user.intensity)
    logger.info(f"Generated '{draft.title}' with {len(draft.exercises)} exercises for user {user.id}")
    return PlanStore.create_plan(user.id, draft)
