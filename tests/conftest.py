import pytest

from json_formatter.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch):
    for name in ("DEFAULT_TYPE", "DEFAULT_IS_MANDATORY", "SECTION_ID_LENGTH", "SERVER_PORT"):
        monkeypatch.delenv(f"JSON_FORMATTER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def input_records():
    return [
        {"line": "1", "name": "Fire extinguisher"},
        {"line": "2", "name": "Check valve"},
        {"line": "3", "name": "Emergency exit"},
    ]
