from collections.abc import Sequence

from coviddash.schemas.country_series import CountrySeries
from coviddash.schemas.daily_record import DailyRecord
from coviddash.schemas.derived_metrics import DerivedMetrics


def daily_deltas(totals: Sequence[int]) -> list[int]:
    """@brief Convert cumulative totals into day-over-day differences.

    @param totals Cumulative counters ordered by date.
    @return One delta per total; the first one is relative to zero.
    """
    deltas: list[int] = []
    previous = 0
    for total in totals:
        deltas.append(total - previous)
        previous = total
    return deltas


def death_rate_percent(confirmed: int, deaths: int) -> int:
    """@brief Return cumulative deaths over confirmed cases as a truncated percent.

    @return `floor(deaths / confirmed * 100)` clamped to 100, or 0 when no
    case was confirmed.
    """
    if confirmed <= 0:
        return 0
    return min(100, (deaths * 100) // confirmed)


def days_to_first_death(records: Sequence[DailyRecord]) -> int:
    """@brief Return the index of the first record reporting a death, or 0."""
    for index, record in enumerate(records):
        if record.deaths > 0:
            return index
    return 0


def derive(series: CountrySeries) -> DerivedMetrics:
    """@brief Compute per-country metrics from a day-one series.

    @param series Non-empty series ordered by date.
    @return DerivedMetrics with aligned daily deltas and summary values.
    @throws ValueError When the series has no records.
    """
    if series.is_empty:
        raise ValueError(
            f"Cannot derive metrics for country code '{series.country_code}' "
            "without records."
        )

    records = series.records
    last = series.last

    return DerivedMetrics(
        death_rate_percent=death_rate_percent(last.confirmed, last.deaths),
        days_to_first_death=days_to_first_death(records),
        daily_delta_confirmed=daily_deltas([record.confirmed for record in records]),
        daily_delta_deaths=daily_deltas([record.deaths for record in records]),
        confirmed_total=last.confirmed,
        deaths_total=last.deaths,
    )
