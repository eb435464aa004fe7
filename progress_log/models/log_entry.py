# progress_log/models/log_entry.py

from datetime import datetime
from progress_log import db

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_timestamp(now=None) -> str:
    """Current server-local time as stored in ``created_at``."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


class LogEntry(db.Model):
    __tablename__ = "progress_logs"
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.Text, nullable=False)

    def __repr__(self):
        return f"<LogEntry {self.id} {self.created_at}>"
