"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOTAL_PERIODS = 7
HALF_DAY_PERIODS = 4
PART_ONE_LAST_DAY = 15

YEARS_OF_STUDY = (1, 2, 3)
SEMESTERS_PER_YEAR = 2
MIN_SEMESTER = 1
MAX_SEMESTER = 6

PASS_PERCENTAGE = 50
GOOD_PERCENTAGE = 75

MIN_PASSWORD_LENGTH = 6
MIN_FULL_NAME_LENGTH = 2

DEFAULT_ACADEMIC_YEAR = "2025-26"
DEFAULT_BRANCH_CODE = "CS"
DEFAULT_MARKS_TOTAL = 100
RECENT_STUDENTS_LIMIT = 5

SESSION_USER_KEY = "auth_user"
DEFAULT_SESSION_DAYS = 7
