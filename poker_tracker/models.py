"""SQLModel table backing the key/value store."""

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel  # type: ignore


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StorageEntry(SQLModel, table=True):
    """One serialized blob stored under a reserved key."""

    __tablename__ = "storage_entry"  # pyright: ignore[reportAssignmentType]

    key: str = Field(primary_key=True, description="e.g. 'poker-tracker-data'")
    value: str = Field(description="JSON text of the stored blob")
    updated_at: datetime = Field(default_factory=_utcnow)
