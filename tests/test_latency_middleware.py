import logging

import pytest
from fastapi.testclient import TestClient

from coviddash.main import app
from coviddash.middleware.latency import _target_from_path
from coviddash.utils.client import get_covid_client
from coviddash.utils.error import RetrievalError

from factories import make_series


client = TestClient(app)


class _StubCovidClient:
    def fetch(self, country_code: str):
        if country_code == "zz":
            raise RetrievalError(country_code, "503 Service Unavailable")
        return make_series("Norway", country_code, [(1, 0), (2, 0)])


@pytest.fixture(autouse=True)
def _test_overrides():
    def _override_client():
        yield _StubCovidClient()

    app.dependency_overrides[get_covid_client] = _override_client
    yield
    app.dependency_overrides.pop(get_covid_client, None)


def test_target_from_path_maps_known_groups():
    assert _target_from_path("/country/no") == "country"
    assert _target_from_path("/countries") == "countries"
    assert _target_from_path("/healthcheck") is None


def test_latency_middleware_logs_dashboard_pages(caplog):
    with caplog.at_level(logging.INFO, logger="coviddash.middleware.latency"):
        client.get("/country/no")
        client.get("/countries", params={"countries": "no"})

    messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == "coviddash.middleware.latency"
    ]
    assert len(messages) == 2
    assert messages[0].startswith("GET /country/no -> 200 in ")
    assert messages[0].endswith("ms (country)")
    assert messages[1].startswith("GET /countries -> 200 in ")


def test_latency_middleware_logs_error_responses(caplog):
    with caplog.at_level(logging.INFO, logger="coviddash.middleware.latency"):
        response = client.get("/country/zz")

    assert response.status_code == 400
    assert any(
        record.getMessage().startswith("GET /country/zz -> 400 in ")
        for record in caplog.records
    )


def test_latency_middleware_ignores_other_routes(caplog):
    with caplog.at_level(logging.INFO, logger="coviddash.middleware.latency"):
        client.get("/healthcheck")

    assert not [
        record for record in caplog.records
        if record.name == "coviddash.middleware.latency"
    ]


def test_skipped_countries_are_logged_as_warnings(caplog):
    with caplog.at_level(logging.WARNING, logger="coviddash.services.dashboard"):
        response = client.get("/countries", params={"countries": "zz no"})

    assert response.status_code == 200
    warnings = [
        record.getMessage()
        for record in caplog.records
        if record.name == "coviddash.services.dashboard"
    ]
    assert warnings == [
        "Skipping zz: RetrievalError: Could not retrieve for country code zz "
        "(503 Service Unavailable)"
    ]
