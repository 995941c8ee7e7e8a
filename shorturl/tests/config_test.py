import pytest
from pydantic import ValidationError

from shorturl.core.config import Settings


def test_base_url_derived_from_port():
    assert Settings(PORT=8123, BASE_URL=None).BASE_URL == "http://localhost:8123"


def test_base_url_trailing_slash_stripped():
    assert Settings(BASE_URL="https://sho.rt/").BASE_URL == "https://sho.rt"


@pytest.mark.parametrize("overrides", [
    {"SHORT_CODE_LENGTH": 3},
    {"SHORT_CODE_LENGTH": 17},
    {"SHORT_CODE_MAX_RETRIES": 0},
])
def test_out_of_range_short_code_settings_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_short_code_defaults():
    settings = Settings()
    assert settings.SHORT_CODE_LENGTH == 7
    assert settings.SHORT_CODE_MAX_RETRIES == 5
