"""Owner-scoped persistence for observation histories.

``HistoryStore`` is the only component that touches the database. Every
method takes the owner explicitly and filters on it; nothing here can read
or write another owner's rows. Reads always order by ``recorded_at`` and then
by primary key, so rows inserted in one batch keep their insertion order even
though they share a timestamp.
"""
import logging
from datetime import datetime
from typing import Iterable

from sqlalchemy import delete, text
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from oddstrack.db.base import init_db, session_scope
from oddstrack.db.models import Observation, utcnow

logger = logging.getLogger(__name__)


def lock_owner(session: Session, owner: str) -> None:
    """Start the write transaction holding a lock that serializes writers of ``owner``.

    Must be the first statement of the session. SQLite has only a database
    lock, so writers take it up front with BEGIN IMMEDIATE instead of
    upgrading a stale read snapshot.
    """
    conn = session.connection()
    dialect = conn.dialect.name
    if dialect == "sqlite":
        conn.exec_driver_sql("BEGIN IMMEDIATE")
    elif dialect == "postgresql":
        conn.execute(text("SELECT pg_advisory_xact_lock(hashtext(:owner))"), {"owner": owner})
    else:
        session.exec(select(Observation.id).where(Observation.owner == owner).with_for_update()).all()


class HistoryStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    def init(self) -> None:
        init_db(self.engine)

    def _rows(self, owner: str, values: Iterable[str], source: str, ts: datetime) -> list[Observation]:
        return [Observation(owner=owner, value=v, recorded_at=ts, source=source) for v in values]

    def append(self, owner: str, values: list[str], source: str = "manual",
               recorded_at: datetime | None = None) -> list[Observation]:
        with session_scope(self.engine) as session:
            lock_owner(session, owner)
            # stamped under the lock so commit order and timestamp order agree
            rows = self._rows(owner, values, source, recorded_at or utcnow())
            session.add_all(rows)
            session.commit()
        return rows

    def replace(self, owner: str, values: list[str], source: str = "screenshot",
                recorded_at: datetime | None = None) -> list[Observation]:
        """Delete every row of ``owner`` and insert ``values`` in one transaction."""
        with session_scope(self.engine) as session:
            lock_owner(session, owner)
            rows = self._rows(owner, values, source, recorded_at or utcnow())
            removed = session.connection().execute(delete(Observation).where(Observation.owner == owner)).rowcount
            session.add_all(rows)
            session.commit()
        logger.info("replaced history of %s: removed %d, inserted %d", owner, removed, len(rows))
        return rows

    def fetch(self, owner: str) -> list[Observation]:
        with session_scope(self.engine) as session:
            stmt = (
                select(Observation)
                .where(Observation.owner == owner)
                .order_by(Observation.recorded_at, Observation.id)
            )
            return list(session.exec(stmt).all())

    def values(self, owner: str) -> list[float]:
        return [row.number for row in self.fetch(owner)]
