"""Domain constants shared by deterministic checks."""

MAX_DAY_HOURS = 16.0
MAX_FLIGHTS_PER_DAY = 2
FLIGHT_DAY_MAX_ACTIVITIES = 3
BUDGET_OVERRUN_FACTOR = 2.0

# Meal-list positions; see checkers.sequence_checker.
BREAKFAST_LATEST_INDEX = 2
DINNER_TAIL_WINDOW = 3
FREE_DAY_MIN_ACTIVITIES = 2
SEQUENCE_MIN_ACTIVITIES = 2
