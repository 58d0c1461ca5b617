"""
Collection names, defaults and fixed sampling parameters.
"""

EXERCISES_COLLECTION = "exercises"
USERS_COLLECTION = "users"

DEFAULT_EXERCISE_LIMIT = 20
RECOMMENDATION_EXERCISE_LIMIT = 50

DEFAULT_WORKOUT_TYPE = "full body"
DEFAULT_TIME_AVAILABLE = 45

COMPLETION_MAX_TOKENS = 1500
COMPLETION_TEMPERATURE = 0.7
