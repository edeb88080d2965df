SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": "http://backend.test",
    "timeout": 1,
}

ACADEMIC_YEAR = "2025-26"

SESSION_DAYS = 7

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
