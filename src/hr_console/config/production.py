import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
