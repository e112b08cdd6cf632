"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PUNCH_COOLDOWN_SECONDS = 5 * 60
DEFAULT_REPORT_DAYS = 7

STAFF_ATTENDANCE_KEY_PREFIX = "attendance_"
STUDENT_ATTENDANCE_KEY_PREFIX = "student_attendance_"
STAFF_DIRECTORY_KEY_PREFIX = "staff_"
STUDENT_DIRECTORY_KEY_PREFIX = "students_"

BADGE_PREFIX = "karma"

UNKNOWN_PERSON_LABEL = {
    "staff": "Unknown Staff",
    "students": "Unknown Student",
}
