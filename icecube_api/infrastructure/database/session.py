# icecube_api/infrastructure/database/session.py

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from icecube_api.config.settings import settings

logger = logging.getLogger("icecube.database")

_engine: Engine | None = None

_SessionLocal = sessionmaker(
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
)


def init_engine(database_url: str | None = None) -> Engine:
    """
    (Re)cria o engine e associa o sessionmaker a ele.
    SQLite em memória usa StaticPool para que todas as sessões vejam o mesmo banco.
    """
    global _engine

    url = database_url or settings.database_url
    kwargs: dict = {"echo": settings.sql_echo, "pool_pre_ping": True}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    if _engine is not None:
        _engine.dispose()

    _engine = create_engine(url, **kwargs)
    _SessionLocal.configure(bind=_engine)

    logger.info("Database engine bound to %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        return init_engine()
    return _engine


@contextmanager
def db_session() -> Iterator[Session]:
    get_engine()
    session: Session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
