import os

DEFAULT_ENV = "development"


def get_settings_module() -> str:
    """Settings module for APP_ENV (development unless told otherwise)."""
    env = os.getenv("APP_ENV", DEFAULT_ENV).strip().lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    # Anything unrecognised falls back to development.
    return "config.development"
