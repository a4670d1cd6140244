"""Data Access Object for the key/value store."""

from datetime import UTC, datetime

from sqlmodel import Session

from poker_tracker.models import StorageEntry


def get_value(session: Session, key: str) -> str | None:
    """Get the raw value stored under a key, or None if absent."""
    entry = session.get(StorageEntry, key)
    return entry.value if entry else None


def set_value(session: Session, key: str, value: str) -> StorageEntry:
    """Insert or overwrite the value stored under a key."""
    entry = session.get(StorageEntry, key)
    if entry is None:
        entry = StorageEntry(key=key, value=value)
    else:
        entry.value = value
        entry.updated_at = datetime.now(UTC)
    session.add(entry)
    return entry


def delete_value(session: Session, key: str) -> bool:
    """Delete the value stored under a key. Returns False if it was absent."""
    entry = session.get(StorageEntry, key)
    if entry is None:
        return False
    session.delete(entry)
    return True
