from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from query_iterator.config.settings import Settings


def build_engine(settings: Settings) -> Engine:
    # синхронный движок SQLAlchemy: загрузка чанка блокирует вызывающего
    return create_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        engine,
        expire_on_commit=False,
    )


@contextmanager
def session_scope(settings: Settings) -> Iterator[Session]:
    """Read-only scope: the session is closed (never committed), the engine disposed."""
    engine = build_engine(settings)
    try:
        with build_session_factory(engine)() as session:
            yield session
    finally:
        engine.dispose()
