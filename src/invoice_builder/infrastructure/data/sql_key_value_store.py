from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Field, Session, SQLModel, create_engine


logger = logging.getLogger(__name__)


class KeyValueEntry(SQLModel, table=True):
    __tablename__ = "key_value_entry"

    key: str = Field(primary_key=True)
    value: str
    updated_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


def create_sqlite_engine(db_url: str) -> Engine:
    if db_url.startswith("sqlite:///"):
        db_path = Path(db_url[len("sqlite:///"):])
        if str(db_path) and str(db_path) != ":memory:":
            db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(db_url)


class SqlKeyValueStore:
    """Key-value store kept in a single SQL table.

    Database errors are logged and reported as a missing value or a failed
    write; they never reach the caller.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        SQLModel.metadata.create_all(engine, tables=[KeyValueEntry.__table__])

    @classmethod
    def from_url(cls, db_url: str) -> "SqlKeyValueStore":
        return cls(create_sqlite_engine(db_url))

    def get(self, key: str) -> Optional[str]:
        try:
            with Session(self.engine) as session:
                entry = session.get(KeyValueEntry, key)
                return entry.value if entry else None
        except SQLAlchemyError:
            logger.warning("store.read_failed key=%s", key, exc_info=True)
            return None

    def set(self, key: str, value: str) -> bool:
        try:
            with Session(self.engine) as session:
                entry = session.get(KeyValueEntry, key)
                if entry is None:
                    entry = KeyValueEntry(key=key, value=value)
                else:
                    entry.value = value
                    entry.updated_at = datetime.now(timezone.utc).isoformat()
                session.add(entry)
                session.commit()
        except SQLAlchemyError:
            logger.warning("store.write_failed key=%s", key, exc_info=True)
            return False
        return True
