import pytest

from shorturl.core.errors import InvalidUrlError, MissingUrlError, ValidationError
from shorturl.utils.validators import clean_url, normalize_url, validate_url


@pytest.mark.parametrize("raw, expected", [
    ("example.com/page", "https://example.com/page"),
    ("  https://example.com/x  ", "https://example.com/x"),
    ("HTTP://Example.COM/Path?Q=1", "http://example.com/Path?Q=1"),
    ("http://localhost:3000/a", "http://localhost:3000/a"),
    ("example.com:8080/x", "https://example.com:8080/x"),
    ("localhost:3000", "https://localhost:3000"),
    ("mailto:user@example.com", "mailto:user@example.com"),
    ("https://user:Pw@Example.com/", "https://user:Pw@example.com/"),
])
def test_normalize_url(raw, expected):
    assert normalize_url(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_normalize_url_rejects_empty(raw):
    with pytest.raises(MissingUrlError):
        normalize_url(raw)


@pytest.mark.parametrize("url", [
    "https://example.com",
    "http://sub.example.co.uk/path?x=1#frag",
    "http://localhost:8080/",
    "http://127.0.0.1/admin",
    "http://[::1]:8000/",
])
def test_validate_url_accepts(url):
    assert validate_url(url)


@pytest.mark.parametrize("url", [
    "ftp://example.com",
    "http://",
    "https://not-a-url",
    "https://exa mple.com",
    "https://example.com:99999/",
    "https://example.com:abc/",
    "https://-bad-.com",
    "https://example.c0m",
    "https://example.com/" + "a" * 2100,
])
def test_validate_url_rejects(url):
    assert not validate_url(url)


def test_clean_url_normalizes_then_validates():
    assert clean_url("example.com/page") == "https://example.com/page"


@pytest.mark.parametrize("raw", [
    "not-a-url",
    "ftp://example.com",
    "javascript:alert(1)",
    "mailto:user@example.com",
    "tel:+1@example.com",
    "http:example.com",
    "user:secret@example.com",
    "user@example.com",
])
def test_clean_url_invalid(raw):
    with pytest.raises(InvalidUrlError):
        clean_url(raw)


def test_url_errors_are_validation_errors():
    assert issubclass(InvalidUrlError, ValidationError)
    assert issubclass(MissingUrlError, ValidationError)
    assert InvalidUrlError.status_code == 400
