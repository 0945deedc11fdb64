from datetime import datetime, timedelta, timezone

from coviddash.schemas.country_series import CountrySeries
from coviddash.schemas.daily_record import DailyRecord

_DAY_ONE = datetime(2020, 1, 1, tzinfo=timezone.utc)


def upstream_payload(
    country: str, code: str, counts: list[tuple[int, int]]
) -> list[dict[str, object]]:
    """@brief Build a `total/dayone/country` JSON body from (confirmed, deaths) pairs."""
    return [
        {
            "Country": country,
            "CountryCode": code.upper(),
            "Province": "",
            "City": "",
            "CityCode": "",
            "Lat": "0",
            "Lon": "0",
            "Confirmed": confirmed,
            "Deaths": deaths,
            "Recovered": 0,
            "Active": confirmed - deaths,
            "Date": (_DAY_ONE + timedelta(days=index)).strftime("%Y-%m-%dT%H:%M:%SZ"),
        }
        for index, (confirmed, deaths) in enumerate(counts)
    ]


def make_series(
    country: str, code: str, counts: list[tuple[int, int]]
) -> CountrySeries:
    return CountrySeries(
        country_code=code,
        records=[
            DailyRecord.model_validate(item)
            for item in upstream_payload(country, code, counts)
        ],
    )
