import re
from typing import Annotated

from pydantic import BeforeValidator

_COUNTRY_CODE_PATTERN = re.compile(r"[a-z0-9][a-z0-9_-]*")


def _validate_country_code(country_code: object) -> str:
    """@brief Validate and normalize a country code or API slug.

    @details Codes are case-insensitive and normalized to lower case, e.g.
    `GB`, `gb` and `united-kingdom` are all accepted.
    """
    if isinstance(country_code, bool):
        raise ValueError("country code must be a string.")

    value = str(country_code).strip().lower()
    if not value:
        raise ValueError("country code must be a non-empty string.")

    if not _COUNTRY_CODE_PATTERN.fullmatch(value):
        raise ValueError(
            "country code must contain only letters, numbers, '_' or '-'."
        )

    return value


def _split_country_codes(countries: object) -> list[str]:
    """@brief Split a space (or comma) separated list into validated codes.

    @details Duplicates are kept only once, in order of first appearance.
    """
    if isinstance(countries, (list, tuple)):
        tokens = [token for item in countries for token in re.split(r"[\s,]+", str(item))]
    else:
        tokens = re.split(r"[\s,]+", str(countries or ""))

    codes: list[str] = []
    for token in tokens:
        if not token:
            continue
        code = _validate_country_code(token)
        if code not in codes:
            codes.append(code)
    return codes


CountryCode = Annotated[str, BeforeValidator(_validate_country_code)]
CountryCodeList = Annotated[list[str], BeforeValidator(_split_country_codes)]
