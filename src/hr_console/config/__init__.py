import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unrecognised means development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "hr_console.config.production"

    if env in {"test", "testing"}:
        return "hr_console.config.testing"

    return "hr_console.config.development"
