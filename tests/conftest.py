import pytest

from rotating_csrf.adapters.env_salts import DEFAULT_SALTS_ENV_KEY
from rotating_csrf.adapters.static_salts import StaticSaltSource
from rotating_csrf.components.csrf import CsrfService


@pytest.fixture
def clean_env(monkeypatch):
    """Ensure the salts variable starts unset."""
    monkeypatch.delenv(DEFAULT_SALTS_ENV_KEY, raising=False)
    return monkeypatch


@pytest.fixture
def salts():
    return StaticSaltSource(["thesalt"])


@pytest.fixture
def service(salts):
    return CsrfService(salt_source=salts)
