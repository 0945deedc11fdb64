import json
from typing import cast

from pydantic import ValidationError

RETRIEVAL_ERROR = "Could not retrieve for country code"
PARSING_ERROR = "Could not parse JSON for country code"


class DashboardError(Exception):
    """@brief Base class for errors surfaced by the dashboard service."""


class FetchError(DashboardError):
    """@brief Failure while loading the day-one series of a country.

    @param country_code Country code that was requested upstream.
    @param detail Transport, status or parse detail reported by the failure.
    """

    kind = "FetchError"
    reason = "Could not fetch country code"

    def __init__(self, country_code: str, detail: str) -> None:
        self.country_code = country_code
        self.detail = detail
        super().__init__(f"{self.kind}: {self.reason} {country_code} ({detail})")


class RetrievalError(FetchError):
    """@brief Upstream was unreachable or answered with a non-success status."""

    kind = "RetrievalError"
    reason = RETRIEVAL_ERROR


class ParsingError(FetchError):
    """@brief Upstream body does not match the expected record array."""

    kind = "ParsingError"
    reason = PARSING_ERROR


def validation_error_details(exc: ValidationError) -> list[dict[str, object]]:
    """@brief Build a JSON-safe 422 detail payload from a Pydantic ValidationError.

    @param exc Pydantic validation error raised while parsing request input.
    @return List-formatted validation details safe to include in HTTPException detail.
    """
    return cast(list[dict[str, object]], json.loads(exc.json()))
