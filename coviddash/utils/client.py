from collections.abc import Iterator

from coviddash.services.covid_api import CovidApiClient


def get_covid_client() -> Iterator[CovidApiClient]:
    """@brief Yield an upstream API client for the request lifecycle.

    @description Sessions opened by the client, one per fetching thread, are
    closed once the request has been served.

    @return Generator that yields a configured CovidApiClient.
    """
    client = CovidApiClient()
    try:
        yield client
    finally:
        client.close()
