# tests/conftest.py
import os

import pytest

from dataverse_client.config import DataverseSettings, get_settings
from dataverse_client.constants import NATIVE_API_PREFIX
from dataverse_client.types import ApiFamily

BASE_URL = "https://dataverse.example.org"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keeps DATAVERSE_* variables of the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("DATAVERSE_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> DataverseSettings:
    """Settings pointing at a fake installation, with fast lock retries."""
    return DataverseSettings(
        _env_file=None,
        base_url=BASE_URL,
        api_token="test-token",
        locked_retry_times=3,
        locked_retry_interval=10,
    )


@pytest.fixture
def native_family(settings: DataverseSettings) -> ApiFamily:
    return ApiFamily(prefix=NATIVE_API_PREFIX, version=settings.api_version)
