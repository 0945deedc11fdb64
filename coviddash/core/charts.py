from collections.abc import Sequence

from coviddash.schemas.chart import (
    ChartDescription,
    ChartMode,
    ChartSeries,
    PieRing,
    PieSlice,
)
from coviddash.schemas.country_series import CountrySeries
from coviddash.schemas.derived_metrics import CountrySummary, DerivedMetrics

DATE_LABEL_FORMAT = "%b %d"


def _subtitle(metrics: DerivedMetrics) -> str:
    if metrics.deaths_total == 0:
        return f"Death rate: {metrics.death_rate_percent}%, no deaths reported"
    return (
        f"Death rate: {metrics.death_rate_percent}%, "
        f"first death on day {metrics.days_to_first_death}"
    )


def build_country_chart(
    series: CountrySeries,
    metrics: DerivedMetrics,
    mode: ChartMode = ChartMode.DAILY,
) -> ChartDescription:
    """@brief Build the line chart of a single country.

    @param series Non-empty day-one series of the country.
    @param metrics Metrics derived from the same series.
    @param mode `daily` plots new cases/deaths per day, `cumulative` plots
    the running totals reported upstream.
    @return Line ChartDescription with one x label per record.
    """
    x_labels = [record.date.strftime(DATE_LABEL_FORMAT) for record in series.records]

    if mode == ChartMode.CUMULATIVE:
        chart_series = [
            ChartSeries(
                name="Confirmed cases",
                values=[record.confirmed for record in series.records],
            ),
            ChartSeries(
                name="Deaths", values=[record.deaths for record in series.records]
            ),
        ]
    else:
        chart_series = [
            ChartSeries(name="New confirmed cases", values=metrics.daily_delta_confirmed),
            ChartSeries(name="New deaths", values=metrics.daily_delta_deaths),
        ]

    return ChartDescription(
        kind="line",
        title=f"COVID cases for {series.country_name.upper()}",
        subtitle=_subtitle(metrics),
        x_labels=x_labels,
        series=chart_series,
    )


def build_aggregate_charts(
    summaries: Sequence[CountrySummary],
) -> tuple[ChartDescription, ChartDescription]:
    """@brief Build the cross-country comparison charts.

    @param summaries Successfully processed countries in request order.
    @return Tuple of (scatter, pie) chart descriptions. Countries appear in
    the same order as `summaries`.
    """
    labels = [summary.country_code.upper() for summary in summaries]

    scatter = ChartDescription(
        kind="scatter",
        title="Death rate and days to first death per country",
        x_labels=labels,
        series=[
            ChartSeries(
                name="Death rate (%)",
                values=[summary.metrics.death_rate_percent for summary in summaries],
            ),
            ChartSeries(
                name="Days to first death",
                values=[summary.metrics.days_to_first_death for summary in summaries],
            ),
        ],
    )

    pie = ChartDescription(
        kind="pie",
        title="Confirmed cases and deaths per country",
        rings=[
            PieRing(
                name="Confirmed cases",
                slices=[
                    PieSlice(
                        label=label,
                        value=summary.metrics.confirmed_total,
                        description=summary.country,
                    )
                    for label, summary in zip(labels, summaries)
                ],
            ),
            PieRing(
                name="Deaths",
                slices=[
                    PieSlice(
                        label=label,
                        value=summary.metrics.deaths_total,
                        description=summary.country,
                    )
                    for label, summary in zip(labels, summaries)
                ],
            ),
        ],
    )

    return scatter, pie
