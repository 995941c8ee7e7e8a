from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite drops tzinfo on round-trip anyway."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Mark a stored naive timestamp as UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class URLItem(Base):
    __tablename__ = "urls"
    # Ids are never reused after a delete
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    short_code = Column(String(16), unique=True, index=True, nullable=False)
    # Unique so concurrent shorten requests for the same URL keep the first row
    original_url = Column(String(2048), unique=True, index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    click_count = Column(Integer, default=0, nullable=False)
    last_clicked_at = Column(DateTime, nullable=True)


@dataclass(frozen=True)
class URLRecord:
    """Immutable snapshot of a ``urls`` row handed out by the store.

    Timestamps are timezone-aware UTC so they serialize with an offset.
    """

    id: int
    short_code: str
    original_url: str
    created_at: datetime
    click_count: int
    last_clicked_at: Optional[datetime]

    @classmethod
    def from_item(cls, item: URLItem) -> "URLRecord":
        return cls(
            id=item.id,
            short_code=item.short_code,
            original_url=item.original_url,
            created_at=as_utc(item.created_at),
            click_count=item.click_count,
            last_clicked_at=as_utc(item.last_clicked_at),
        )
