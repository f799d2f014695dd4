from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine
import os


def make_engine(dsn: str) -> Engine:
    if dsn.startswith("sqlite"):
        # file-backed SQLite needs its directory; in-memory must share one connection
        if dsn in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(dsn, echo=False, connect_args={"check_same_thread": False}, poolclass=StaticPool)
        path = dsn.split("///", 1)[-1]
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        return create_engine(dsn, echo=False, connect_args={"check_same_thread": False, "timeout": 30})
    return create_engine(dsn, echo=False, pool_pre_ping=True)


def init_db(engine: Engine):
    # import models so SQLModel registers the tables
    from oddstrack.db import models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def session_scope(engine: Engine) -> Session:
    return Session(engine, expire_on_commit=False)
