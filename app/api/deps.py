# app/api/deps.py

from fastapi import Depends

from app.config import Settings, get_settings
from app.errors import ForbiddenInProduction


def require_non_production(settings: Settings = Depends(get_settings)) -> Settings:
    """
    Admin routes write to the database; only allow them outside production.
    """
    if settings.is_production:
        raise ForbiddenInProduction("admin operation")
    return settings
