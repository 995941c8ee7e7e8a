"""URL normalization and validation for submitted long URLs."""
import ipaddress
import re
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from shorturl.core.errors import InvalidUrlError, MissingUrlError

DEFAULT_SCHEME = "https"
ALLOWED_SCHEMES = ("http", "https")
MAX_URL_LENGTH = 2048

# A scheme followed by a digit is really host:port, as in "example.com:8080"
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:(?!\d)")
_LABEL_RE = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$")
_TLD_RE = re.compile(r"^(?:[a-z]{2,63}|xn--[a-z0-9-]{1,59})$")


def normalize_url(raw: Optional[str]) -> str:
    """Trim the input, add the default scheme if none is given and lowercase
    the scheme and host.

    Inputs that already carry a scheme, with or without ``//``, keep it and
    are left for ``validate_url`` to accept or reject.

    Raises MissingUrlError for empty or whitespace-only input.
    """
    if raw is None or not raw.strip():
        raise MissingUrlError()

    url = raw.strip()
    defaulted = not _SCHEME_RE.match(url)
    if defaulted:
        url = f"{DEFAULT_SCHEME}://{url}"

    try:
        parts = urlsplit(url)
    except ValueError:
        raise InvalidUrlError()

    netloc = parts.netloc
    if "@" in netloc:
        # No credentials without an explicit scheme
        if defaulted:
            raise InvalidUrlError()
        userinfo, _, hostport = netloc.rpartition("@")
        netloc = f"{userinfo}@{hostport.lower()}"
    else:
        netloc = netloc.lower()

    return urlunsplit((parts.scheme.lower(), netloc, parts.path, parts.query, parts.fragment))


def _is_valid_host(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass

    labels = host.rstrip(".").split(".")
    if len(labels) < 2:
        return False
    if not all(_LABEL_RE.match(label) for label in labels):
        return False
    return bool(_TLD_RE.match(labels[-1]))


def validate_url(url: str) -> bool:
    if len(url) > MAX_URL_LENGTH:
        return False
    if any(ch.isspace() for ch in url):
        return False

    try:
        parts = urlsplit(url)
        # .port raises ValueError for non-numeric or out of range ports
        parts.port
    except ValueError:
        return False

    if parts.scheme not in ALLOWED_SCHEMES:
        return False
    if not parts.hostname:
        return False
    return _is_valid_host(parts.hostname)


def clean_url(raw: Optional[str]) -> str:
    """Normalize ``raw`` and return it if it is an acceptable http(s) URL."""
    url = normalize_url(raw)
    if not validate_url(url):
        raise InvalidUrlError()
    return url
