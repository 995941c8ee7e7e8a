import logging
from typing import List, Tuple

from shorturl.core.errors import (
    DuplicateShortCodeError,
    DuplicateUrlError,
    NotFoundError,
    ShortCodeExhaustedError,
)
from shorturl.db.models import URLRecord
from shorturl.db.store import URLStore
from shorturl.utils.encoding import SHORT_CODE_LENGTH, generate_short_code, is_valid_short_code
from shorturl.utils.validators import clean_url

logger = logging.getLogger(__name__)


class URLService:

    def __init__(self, store: URLStore, base_url: str,
                 code_length: int = SHORT_CODE_LENGTH, max_retries: int = 5):
        self.store = store
        self.base_url = base_url.rstrip("/")
        self.code_length = code_length
        self.max_retries = max_retries

    def short_url_for(self, short_code: str) -> str:
        return f"{self.base_url}/{short_code}"

    def create_short_url(self, raw_url) -> Tuple[URLRecord, bool]:
        """Return the record for ``raw_url`` and whether it was newly created.

        The same normalized URL always maps to the same short code.
        """
        original_url = clean_url(raw_url)

        existing = self.store.get_url_by_original(original_url)
        if existing:
            logger.info("short URL already existed : '%s' for URL: %s", existing.short_code, original_url[:50])
            return existing, False

        for attempt in range(self.max_retries):
            short_code = generate_short_code(self.code_length)
            try:
                record = self.store.create_url(short_code, original_url)
            except DuplicateShortCodeError:
                logger.info("Short code collision on attempt %d/%d", attempt + 1, self.max_retries)
                continue
            except DuplicateUrlError:
                # Another request stored this URL first
                winner = self.store.get_url_by_original(original_url)
                if winner:
                    return winner, False
                raise
            logger.info("Shortened %s... to %s", original_url[:50], record.short_code)
            return record, True

        logger.error("Gave up generating a short code for %s after %d attempts", original_url[:50], self.max_retries)
        raise ShortCodeExhaustedError(self.max_retries)

    def get_url_stats(self, short_code: str) -> URLRecord:
        record = None
        if is_valid_short_code(short_code):
            record = self.store.get_url_by_short_code(short_code)
        if record is None:
            logger.warning("Short code not found: %s", short_code)
            raise NotFoundError()
        return record

    def resolve(self, short_code: str) -> URLRecord:
        """Look up a code for redirecting and count the click."""
        record = self.get_url_stats(short_code)
        self.store.increment_click_count(short_code)
        return record

    def list_urls(self) -> List[URLRecord]:
        return self.store.get_all_urls()

    def delete_url(self, short_code: str):
        if not self.store.delete_url(short_code):
            logger.warning("Delete 404: Short code not found: %s", short_code)
            raise NotFoundError()
        logger.info("Deleted short code %s", short_code)
