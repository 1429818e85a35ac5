# app/db/engine.py

from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.config import Settings, get_settings


@lru_cache
def engine_for(url: str, echo: bool = False) -> Engine:
    # One pooled engine per URL for the life of the process
    return create_engine(url, echo=echo, future=True)


def get_engine(settings: Settings = Depends(get_settings)) -> Engine:
    return engine_for(settings.database_url, settings.echo_sql)
