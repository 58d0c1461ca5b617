"""
Workout recommendations: what should I do today?

Combines the user's preferences with the exercise catalog into one prompt
and asks the completion service for a plan. Exactly one completion per call.
"""

import logging

from workout_mcp.api.preferences import user_not_found
from workout_mcp.errors import UpstreamError
from workout_mcp.results import ErrorKind, ToolResult
from workout_mcp.sdk.completions import CompletionClient
from workout_mcp.sdk.store import FitnessStore
from workout_mcp.sdk.types import (
    DEFAULT_TIME_AVAILABLE,
    DEFAULT_WORKOUT_TYPE,
    RECOMMENDATION_EXERCISE_LIMIT,
)

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are an expert personal trainer with deep knowledge of exercise science. "
    "You design safe, effective and time-efficient workouts, adapt them to the "
    "athlete's experience and medical conditions, and only use the exercises "
    "you are given."
)

PROMPT_TEMPLATE = """You are a professional personal trainer. Create a personalized workout recommendation based on the following information:

User Profile:
- Experience Level: {experience_level}
- Primary Goal: {goal}
- Activity Level: {activity_level}
- Medical Conditions: {medical_conditions}

Workout Parameters:
- Type: {workout_type}
- Time Available: {time_available} minutes

Available Exercises:
{exercise_lines}

Please create a detailed workout plan that fits in the time available. Include a warm-up, the main exercises with sets, reps and rest periods, and a cool-down. Only use exercises from the list above, and add brief form cues and safety notes where relevant."""


def build_prompt(user: dict, exercises: list, workout_type: str, time_available: int) -> str:
    """Render the recommendation prompt from a user record and exercise records."""
    prefs = user.get("preferences")
    if not isinstance(prefs, dict):
        prefs = {}
    lines = [
        f"- {ex.get('name')} ({ex.get('muscle') or 'Unknown muscle'}, "
        f"Equipment: {ex.get('equipment') or 'Unknown'})"
        for ex in exercises
        if isinstance(ex, dict)
    ]
    return PROMPT_TEMPLATE.format(
        experience_level=prefs.get("experienceLevel") or "Not specified",
        goal=prefs.get("goal") or "Not specified",
        activity_level=prefs.get("activityLevel") or "Not specified",
        medical_conditions=prefs.get("medicalConditions") or "None specified",
        workout_type=workout_type,
        time_available=time_available,
        exercise_lines="\n".join(lines),
    )


async def generate_workout_recommendation(
    store: FitnessStore,
    completions: CompletionClient,
    user_id: str,
    workout_type: str = DEFAULT_WORKOUT_TYPE,
    time_available: int = DEFAULT_TIME_AVAILABLE,
) -> ToolResult:
    """Personalized workout plan for a user, written by the completion service."""
    try:
        user = await store.get_user(user_id)
        if user is None:
            return user_not_found(user_id)
        exercises = await store.list_exercises(RECOMMENDATION_EXERCISE_LIMIT)
        prompt = build_prompt(user, exercises, workout_type, time_available)
        plan = await completions.complete(SYSTEM_PROMPT, prompt)
    except UpstreamError as e:
        logger.error(f"Recommendation for {user_id} failed: {e}")
        return ToolResult.error(
            ErrorKind.UPSTREAM_FAILURE, f"Error generating workout recommendation: {e}"
        )
    return ToolResult.ok(f"Workout Recommendation for User {user_id}:\n\n{plan}")
