import logging
import threading

import requests
from pydantic import TypeAdapter, ValidationError

from coviddash.schemas.country_series import CountrySeries
from coviddash.schemas.daily_record import DailyRecord
from coviddash.utils.env import get_covid_api_base_url, get_request_timeout
from coviddash.utils.error import ParsingError, RetrievalError

_LOGGER = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[DailyRecord])


class CovidApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """@brief Initialize the client of the day-one COVID-19 REST API.

        @param base_url API root. Defaults to `COVID_API_BASE_URL`.
        @param timeout Transport deadline in seconds. Defaults to
        `REQUEST_TIMEOUT_SECONDS`.
        @param session Optional `requests.Session` used by fetches made from
        the creating thread. Other threads lazily get a session of their own.
        """
        self.base_url = (base_url or get_covid_api_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self._local = threading.local()
        self._owned_sessions: list[requests.Session] = []
        self._lock = threading.Lock()
        if session is not None:
            self._local.session = session

    def url_for(self, country_code: str) -> str:
        """@brief Return the day-one endpoint for a (normalized) country code."""
        return f"{self.base_url}/total/dayone/country/{country_code}"

    def _thread_session(self) -> requests.Session:
        # requests.Session is not guaranteed to be thread-safe.
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            with self._lock:
                self._owned_sessions.append(session)
            self._local.session = session
        return session

    def close(self) -> None:
        """@brief Close every session this client opened."""
        with self._lock:
            sessions, self._owned_sessions = self._owned_sessions, []
        for session in sessions:
            session.close()

    def _get(self, url: str) -> requests.Response:
        return self._thread_session().get(url, timeout=self.timeout)

    def fetch(self, country_code: str) -> CountrySeries:
        """@brief Retrieve the day-one series of a country.

        @param country_code Non-empty, case-insensitive country code or slug.
        @return CountrySeries ordered by date; empty when upstream has no data.
        @throws RetrievalError On transport failures or non-200 responses.
        @throws ParsingError When the body is not the expected record array.
        """
        code = country_code.strip().lower()
        url = self.url_for(code)
        _LOGGER.debug("Fetching day-one series for %s from %s", code, url)

        try:
            response = self._get(url)
        except requests.RequestException as exc:
            raise RetrievalError(code, str(exc)) from exc

        if response.status_code != 200:
            raise RetrievalError(code, f"{response.status_code} {response.reason}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParsingError(code, f"{response.status_code} {response.reason}, {exc}") from exc

        if not isinstance(payload, list):
            raise ParsingError(
                code, f"expected a JSON array, got {type(payload).__name__}"
            )

        try:
            records = _RECORDS_ADAPTER.validate_python(payload)
            series = CountrySeries(country_code=code, records=records)
        except ValidationError as exc:
            raise ParsingError(
                code, f"{exc.error_count()} validation error(s): {exc.errors()[0]['msg']}"
            ) from exc

        _LOGGER.debug("Fetched %d records for %s", len(series.records), code)
        return series
