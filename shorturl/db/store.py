import logging
import threading
from typing import List, Optional

from sqlalchemy import create_engine, func, select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from shorturl.core.errors import DuplicateShortCodeError, DuplicateUrlError, StoreClosedError
from shorturl.db.models import Base, URLItem, URLRecord, utcnow

logger = logging.getLogger(__name__)


class URLStore:
    """Owns the ``urls`` table and the engine used to reach it.

    The engine is created by ``open()`` and disposed by ``close()``; every
    operation in between reuses it. Operations are serialized with a lock so
    counter and timestamp updates are never observed half-applied.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = None
        self._sessionmaker = None
        self._lock = threading.RLock()

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> "URLStore":
        with self._lock:
            if self.is_open:
                return self
            self.engine = self._create_engine(self.database_url)
            Base.metadata.create_all(bind=self.engine)
            self._sessionmaker = sessionmaker(
                autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
            )
            logger.info("URL store opened: %s", self.engine.url.render_as_string(hide_password=True))
        return self

    def close(self):
        with self._lock:
            if not self.is_open:
                return
            self.engine.dispose()
            self.engine = None
            self._sessionmaker = None
            logger.info("URL store closed")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @staticmethod
    def _create_engine(database_url: str):
        if database_url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            # In-memory databases live and die with their single connection
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
            return create_engine(database_url, **kwargs)
        return create_engine(database_url, pool_pre_ping=True)

    def _session(self) -> Session:
        if not self.is_open:
            raise StoreClosedError()
        return self._sessionmaker()

    def create_url(self, short_code: str, original_url: str) -> URLRecord:
        with self._lock, self._session() as db:
            if db.scalar(select(URLItem.id).where(URLItem.short_code == short_code)) is not None:
                raise DuplicateShortCodeError(short_code)

            db_url = URLItem(
                short_code=short_code,
                original_url=original_url,
                created_at=utcnow(),
                click_count=0,
                last_clicked_at=None,
            )
            try:
                db.add(db_url)
                db.commit()
            except IntegrityError as e:
                db.rollback()
                logger.warning(
                    "IntegrityError creating URLItem short_code=%s original=%s: %s",
                    short_code, original_url[:50], e.orig,
                )
                if db.scalar(select(URLItem.id).where(URLItem.short_code == short_code)) is not None:
                    raise DuplicateShortCodeError(short_code)
                if db.scalar(select(URLItem.id).where(URLItem.original_url == original_url)) is not None:
                    raise DuplicateUrlError(original_url)
                raise
            return URLRecord.from_item(db_url)

    def get_url_by_short_code(self, short_code: str) -> Optional[URLRecord]:
        with self._lock, self._session() as db:
            item = db.scalar(select(URLItem).where(URLItem.short_code == short_code))
            return URLRecord.from_item(item) if item else None

    def get_url_by_original(self, original_url: str) -> Optional[URLRecord]:
        with self._lock, self._session() as db:
            item = db.scalar(select(URLItem).where(URLItem.original_url == original_url))
            return URLRecord.from_item(item) if item else None

    def increment_click_count(self, short_code: str) -> bool:
        """Add one click and stamp the access time. Unknown codes are ignored."""
        with self._lock, self._session() as db:
            result = db.execute(
                update(URLItem)
                .where(URLItem.short_code == short_code)
                .values(click_count=URLItem.click_count + 1, last_clicked_at=utcnow())
            )
            db.commit()
            return result.rowcount > 0

    def get_all_urls(self) -> List[URLRecord]:
        with self._lock, self._session() as db:
            items = db.scalars(
                select(URLItem).order_by(URLItem.created_at.desc(), URLItem.id.desc())
            ).all()
            return [URLRecord.from_item(item) for item in items]

    def delete_url(self, short_code: str) -> bool:
        with self._lock, self._session() as db:
            result = db.execute(delete(URLItem).where(URLItem.short_code == short_code))
            db.commit()
            return result.rowcount > 0

    def count(self) -> int:
        with self._lock, self._session() as db:
            return db.scalar(select(func.count(URLItem.id)))
