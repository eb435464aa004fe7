# progress_log/repository.py

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from progress_log.errors import StorageError
from progress_log.models.log_entry import LogEntry

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; nothing outside this range can be stored
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class EntryRepository:
    """
    Mediates between the web handlers and the progress_logs table.

    Takes any SQLAlchemy session (Flask-SQLAlchemy's scoped ``db.session``
    in the app, a plain ``Session`` in tests). Every call is a single
    statement; write serialization is left to the database.
    """

    def __init__(self, session):
        self.session = session

    def ensure_schema(self):
        try:
            LogEntry.__table__.create(bind=self.session.get_bind(), checkfirst=True)
        except SQLAlchemyError as exc:
            raise StorageError(f"could not create {LogEntry.__tablename__}: {exc}") from exc

    def list(self) -> List[LogEntry]:
        try:
            return list(self.session.scalars(select(LogEntry).order_by(LogEntry.id)))
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(f"could not list entries: {exc}") from exc

    def add(self, text: str, created_at: str):
        entry = LogEntry(text=text, created_at=created_at)
        try:
            self.session.add(entry)
            self.session.commit()
            entry_id = entry.id
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(f"could not add entry: {exc}") from exc
        logger.info("Added progress log entry %s", entry_id)

    def delete(self, entry_id: int):
        if not MIN_ID <= entry_id <= MAX_ID:
            logger.debug("No progress log entry %s to delete", entry_id)
            return
        try:
            result = self.session.execute(delete(LogEntry).where(LogEntry.id == entry_id))
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(f"could not delete entry {entry_id}: {exc}") from exc
        if result.rowcount:
            logger.info("Deleted progress log entry %s", entry_id)
        else:
            logger.debug("No progress log entry %s to delete", entry_id)
