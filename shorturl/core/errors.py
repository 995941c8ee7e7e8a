"""Error taxonomy shared by the store, the service layer and the HTTP boundary.

Each class carries the HTTP status it is reported with; the exception handlers
in ``shorturl.main`` rely on ``status_code`` and ``message`` only.
"""


class ShortenerError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ShortenerError):
    status_code = 400
    message = "Invalid request"


class MissingUrlError(ValidationError):
    message = "URL is required"


class InvalidUrlError(ValidationError):
    message = "Invalid URL format"


class NotFoundError(ShortenerError):
    status_code = 404
    message = "Short URL not found"


class DuplicateShortCodeError(ShortenerError):
    """Raised by the store when the short code is already taken."""

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(f"Short code already exists: {short_code}")


class DuplicateUrlError(ShortenerError):
    """Raised by the store when the original URL is already mapped."""

    def __init__(self, original_url: str):
        self.original_url = original_url
        super().__init__(f"URL already shortened: {original_url[:50]}")


class InternalError(ShortenerError):
    status_code = 500


class ShortCodeExhaustedError(InternalError):
    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Failed to generate unique short code after {attempts} attempts")


class StoreClosedError(InternalError):
    message = "URL store is closed"
