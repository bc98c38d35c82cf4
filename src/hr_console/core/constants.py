"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Filter sentinel meaning "do not filter on this field".
ALL = "all"

MIN_RATING = 1
MAX_RATING = 5
DEFAULT_RATING = 3

# Display labels for performance rating metrics, in form order.
PERFORMANCE_METRICS = {
    "quality": "Quality of Work",
    "communication": "Communication",
    "punctuality": "Punctuality & Attendance",
    "teamwork": "Teamwork & Collaboration",
}

HOURS_INVALID = "Invalid"
HOURS_ABSENT = "-"
