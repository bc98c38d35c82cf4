import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Start with the demo employees, leave requests and attendance rows.
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
