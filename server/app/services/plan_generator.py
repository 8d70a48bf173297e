# app/services/plan_generator.py
"""
Fitness Plan Generator
Builds a plan from a static exercise table keyed by goal and intensity.
Generation is a pure lookup: no I/O and no state, so identical inputs give identical plans.
"""

from types import MappingProxyType
from typing import Iterable, List

from app.models.fitness_plan import ExerciseEntry, FitnessPlanDraft

EXERCISE_TABLE = MappingProxyType({
    "strength & conditioning": MappingProxyType({
        "beginner": (
            ExerciseEntry(name="Push-ups", sets=3, reps="8-12", rest="60s"),
            ExerciseEntry(name="Bodyweight Squats", sets=3, reps="12-15", rest="60s"),
            ExerciseEntry(name="Plank", sets=3, duration="30s", rest="45s"),
            ExerciseEntry(name="Modified Burpees", sets=2, reps="5-8", rest="90s"),
        ),
        "intermediate": (
            ExerciseEntry(name="Push-ups", sets=4, reps="12-16", rest="45s"),
            ExerciseEntry(name="Jump Squats", sets=4, reps="10-15", rest="60s"),
            ExerciseEntry(name="Mountain Climbers", sets=3, reps="20", rest="45s"),
            ExerciseEntry(name="Burpees", sets=3, reps="8-12", rest="90s"),
            ExerciseEntry(name="Lunges", sets=3, reps="12 each leg", rest="60s"),
        ),
        "advanced": (
            ExerciseEntry(name="Diamond Push-ups", sets=4, reps="10-15", rest="30s"),
            ExerciseEntry(name="Pistol Squats", sets=4, reps="6-10 each leg", rest="60s"),
            ExerciseEntry(name="Burpee Box Jumps", sets=4, reps="8-12", rest="90s"),
            ExerciseEntry(name="Handstand Push-ups", sets=3, reps="5-8", rest="120s"),
            ExerciseEntry(name="Single-leg Deadlifts", sets=3, reps="10 each leg", rest="60s"),
        ),
    }),
    "general health": MappingProxyType({
        "beginner": (
            ExerciseEntry(name="Walking", duration="20-30 minutes", intensity="moderate"),
            ExerciseEntry(name="Bodyweight Squats", sets=2, reps="8-12", rest="60s"),
            ExerciseEntry(name="Wall Push-ups", sets=2, reps="8-12", rest="60s"),
            ExerciseEntry(name="Standing Marches", sets=2, reps="20 each leg", rest="45s"),
        ),
        "intermediate": (
            ExerciseEntry(name="Brisk Walking/Light Jogging", duration="25-35 minutes"),
            ExerciseEntry(name="Push-ups", sets=3, reps="10-15", rest="45s"),
            ExerciseEntry(name="Squats", sets=3, reps="12-18", rest="45s"),
            ExerciseEntry(name="Plank", sets=3, duration="45s", rest="60s"),
            ExerciseEntry(name="Step-ups", sets=2, reps="10 each leg", rest="60s"),
        ),
        "advanced": (
            ExerciseEntry(name="Running", duration="30-45 minutes", intensity="moderate to high"),
            ExerciseEntry(name="Circuit Training", sets=4, exercises="Mixed compound movements", rest="30s between exercises"),
            ExerciseEntry(name="HIIT Cardio", duration="20 minutes", rest="High intensity intervals"),
        ),
    }),
    "weight loss": MappingProxyType({
        "beginner": (
            ExerciseEntry(name="Walking", duration="30 minutes", intensity="brisk pace"),
            ExerciseEntry(name="Bodyweight Squats", sets=3, reps="10-15", rest="45s"),
            ExerciseEntry(name="Modified Push-ups", sets=2, reps="8-12", rest="60s"),
            ExerciseEntry(name="Marching in Place", duration="5 minutes", intensity="moderate"),
        ),
        "intermediate": (
            ExerciseEntry(name="Jogging/Running", duration="25-30 minutes"),
            ExerciseEntry(name="Jump Squats", sets=3, reps="12-16", rest="45s"),
            ExerciseEntry(name="Burpees", sets=3, reps="6-10", rest="90s"),
            ExerciseEntry(name="High Knees", sets=3, duration="30s", rest="30s"),
            ExerciseEntry(name="Mountain Climbers", sets=3, reps="20", rest="45s"),
        ),
        "advanced": (
            ExerciseEntry(name="HIIT Running", duration="30 minutes", intensity="intervals"),
            ExerciseEntry(name="Burpee Variations", sets=4, reps="10-15", rest="60s"),
            ExerciseEntry(name="Tabata Protocol", duration="20 minutes", intensity="maximum effort"),
            ExerciseEntry(name="Circuit Training", sets=5, exercises="Full body compound movements"),
        ),
    }),
})

# Goals with table content, in the order their exercises appear in a plan.
# Other accepted goals ("muscle building", "endurance", "flexibility") contribute nothing.
GOAL_TITLES = (
    ("strength & conditioning", "Strength & Conditioning"),
    ("general health", "General Health"),
    ("weight loss", "Weight Loss"),
)

FREQUENCIES = MappingProxyType({
    "beginner": "3x per week",
    "intermediate": "4x per week",
    "advanced": "5x per week",
})

DESCRIPTIONS = MappingProxyType({
    "beginner": "A beginner-friendly plan focusing on building foundational fitness and proper form.",
    "intermediate": "An intermediate plan designed to challenge your current fitness level and promote progression.",
    "advanced": "An advanced plan for experienced individuals looking to push their limits and achieve peak performance.",
})

OLDER_BEGINNER_AGE = 50

def plan_duration(age: int, intensity: str) -> str:
    """Program length; beginners over 50 get two extra weeks"""
    if intensity == "beginner":
        return "6 weeks" if age > OLDER_BEGINNER_AGE else "4 weeks"
    if intensity == "intermediate":
        return "6 weeks"
    if intensity == "advanced":
        return "8 weeks"
    return ""

def plan_title(fragments: List[str], intensity: str) -> str:
    level = intensity[:1].upper() + intensity[1:]
    return " ".join(fragments).strip() + f" - {level} Plan"

def generate_fitness_plan(age: int, goals: Iterable[str], intensity: str) -> FitnessPlanDraft:
    """
    Generate a plan for the given age, goals and intensity.

    Exercises are concatenated in GOAL_TITLES order regardless of the order of `goals`.
    A goal without an entry for the intensity adds nothing; unknown intensities
    leave duration, frequency and description empty.
    """
    selected = set(goals)
    exercises: List[ExerciseEntry] = []
    fragments: List[str] = []

    for goal, fragment in GOAL_TITLES:
        if goal not in selected:
            continue
        exercises.extend(EXERCISE_TABLE[goal].get(intensity, ()))
        fragments.append(fragment)

    return FitnessPlanDraft(
        title=plan_title(fragments, intensity),
        description=DESCRIPTIONS.get(intensity, ""),
        exercises=exercises,
        duration=plan_duration(age, intensity),
        frequency=FREQUENCIES.get(intensity, ""),
    )
