"""FastAPI dependency injection."""

from debtcalc.config import Settings, settings


def get_settings() -> Settings:
    return settings
