from .log_entry import LogEntry, local_timestamp, TIMESTAMP_FORMAT

__all__ = ["LogEntry", "local_timestamp", "TIMESTAMP_FORMAT"]
