import os


def get_covid_api_base_url() -> str:
    """@brief Return base URL of the upstream COVID-19 REST API.

    @return Base URL from `COVID_API_BASE_URL` without trailing slash
    (default `https://api.covid19api.com`).
    """
    value = os.getenv("COVID_API_BASE_URL", "").strip()
    return (value or "https://api.covid19api.com").rstrip("/")


def get_request_timeout() -> float:
    """@brief Return the transport deadline applied to upstream requests.

    @return Timeout in seconds from `REQUEST_TIMEOUT_SECONDS` (default `15`).
    @throws ValueError If the configured timeout is not positive.
    """
    timeout = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "15"))
    if timeout <= 0:
        raise ValueError("REQUEST_TIMEOUT_SECONDS must be greater than 0.")
    return timeout


def get_fetch_workers() -> int:
    """@brief Return how many countries may be fetched concurrently.

    @return Worker count from `FETCH_WORKERS` (default `1`, sequential).
    @throws ValueError If the configured value is lower than 1.
    """
    workers = int(os.getenv("FETCH_WORKERS", "1"))
    if workers < 1:
        raise ValueError("FETCH_WORKERS must be greater than or equal to 1.")
    return workers


def get_port() -> int:
    """@brief Return the default listening port.

    @return Port from `PORT` (default `4040`).
    """
    return int(os.getenv("PORT", "4040"))


def get_log_level() -> str:
    """@brief Return the logging level name used by the CLI.

    @return Upper-cased level name from `LOG_LEVEL` (default `INFO`).
    """
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
