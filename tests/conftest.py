import pytest


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch):
    """@brief Provide stable default env values for the test suite.

    @details
    Ensures local shell settings do not make tests flaky. Individual tests may
    still override these values with `monkeypatch.setenv(...)` when needed.
    """
    monkeypatch.setenv("COVID_API_BASE_URL", "https://api.covid19api.com")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "15")
    monkeypatch.setenv("FETCH_WORKERS", "1")
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
