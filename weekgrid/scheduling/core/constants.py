"""
Shared constants for the scheduling system.
"""

# Canonical week order. Rotation always starts from the user's chosen day.
DAYS_OF_WEEK = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
DEFAULT_START_DAY = "Monday"

# Reserved activity contents
FREE_TIME = "Free Time"
SLEEP = "Sleep"

# Activity categories
CATEGORY_SLEEP = "Sleep"
CATEGORY_WORK = "Work"
CATEGORY_STUDY = "Study"
CATEGORY_MEALS = "Meals"
CATEGORY_PERSONAL = "Personal"
CATEGORY_EXERCISE = "Exercise"
CATEGORY_LEARNING = "Learning"
CATEGORY_LEISURE = "Leisure"
CATEGORY_CLASSES = "Classes"

KNOWN_CATEGORIES = [
    "Classes", "Study", "Assignments", "Work", "Exercise",
    "Meals", "Sleep", "Social", "Personal", "Commute",
    "Learning", "Leisure",
]

# Meal anchors by hour of day
MEAL_ANCHORS = {
    7: "Breakfast",
    8: "Breakfast",
    12: "Lunch",
    13: "Lunch",
    18: "Dinner",
    19: "Dinner",
}

# Defaults applied when user input is malformed
DEFAULT_SLEEP_HOURS = 8
MIN_SLEEP_HOURS = 4
MAX_SLEEP_HOURS = 12
DEFAULT_BED_TIME = "22:00"
DEFAULT_START_TIME = "08:00"

# Minimal grid returned when synthesis fails unexpectedly
FALLBACK_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
FALLBACK_TIMES = ["8:00 AM", "12:00 PM", "4:00 PM", "8:00 PM"]

SCHEDULE_VERSION = "1.0.0"
