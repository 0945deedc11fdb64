import io
import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from coviddash.core.charts import build_aggregate_charts, build_country_chart
from coviddash.core.metrics import derive
from coviddash.schemas.chart import ChartDescription, ChartMode
from coviddash.schemas.country_series import CountrySeries
from coviddash.schemas.derived_metrics import CountrySummary
from coviddash.services.covid_api import CovidApiClient
from coviddash.services.render import ChartRenderer
from coviddash.utils.env import get_fetch_workers
from coviddash.utils.error import FetchError

_LOGGER = logging.getLogger(__name__)


class DashboardService:
    def __init__(
        self,
        client: CovidApiClient,
        renderer: ChartRenderer | None = None,
        workers: int | None = None,
    ) -> None:
        """@brief Initialize dashboard orchestration dependencies.

        @param client Upstream API client used to fetch day-one series.
        @param renderer Rendering sink. Defaults to `ChartRenderer`.
        @param workers Max concurrent fetches for multi-country pages.
        Defaults to `FETCH_WORKERS`; `1` keeps fetches sequential.
        """
        self.client = client
        self.renderer = renderer or ChartRenderer()
        self.workers = workers if workers is not None else get_fetch_workers()

    def _render(
        self,
        charts: Sequence[ChartDescription],
        title: str,
        notice: str | None = None,
    ) -> str:
        buffer = io.StringIO()
        self.renderer.render(charts, buffer, title=title, notice=notice)
        return buffer.getvalue()

    def render_country(self, country_code: str, mode: ChartMode = ChartMode.DAILY) -> str:
        """@brief Render the line chart page of a single country.

        @details When upstream has no records the page carries a notice and
        no chart.

        @param country_code Normalized country code.
        @param mode Plot daily deltas or cumulative totals.
        @return Full HTML document.
        @throws RetrievalError When the upstream request fails.
        @throws ParsingError When the upstream body is malformed.
        """
        series = self.client.fetch(country_code)
        if series.is_empty:
            _LOGGER.warning("No records returned for %s", country_code)
            notice = f"No records available for country code {country_code}"
            return self._render([], title=notice, notice=notice)

        chart = build_country_chart(series, derive(series), mode)
        return self._render([chart], title=chart.title)

    def _fetch_or_skip(self, country_code: str) -> CountrySeries | None:
        try:
            series = self.client.fetch(country_code)
        except FetchError as exc:
            _LOGGER.warning("Skipping %s: %s", country_code, exc)
            return None

        if series.is_empty:
            _LOGGER.warning("Skipping %s: no records returned", country_code)
            return None
        return series

    def fetch_all(self, country_codes: Sequence[str]) -> list[CountrySeries]:
        """@brief Fetch every country, dropping failures and empty series.

        @param country_codes Codes in request order.
        @return Non-empty series in the same order as `country_codes`.
        """
        if self.workers > 1 and len(country_codes) > 1:
            with ThreadPoolExecutor(
                max_workers=min(self.workers, len(country_codes))
            ) as pool:
                results = list(pool.map(self._fetch_or_skip, country_codes))
        else:
            results = [self._fetch_or_skip(code) for code in country_codes]

        return [series for series in results if series is not None]

    def build_dashboard(
        self, country_codes: Sequence[str], mode: ChartMode = ChartMode.DAILY
    ) -> list[ChartDescription]:
        """@brief Build per-country charts followed by the aggregate charts.

        @return Chart descriptions; empty when no country could be loaded.
        """
        charts: list[ChartDescription] = []
        summaries: list[CountrySummary] = []

        for series in self.fetch_all(country_codes):
            metrics = derive(series)
            charts.append(build_country_chart(series, metrics, mode))
            summaries.append(
                CountrySummary(
                    country_code=series.country_code,
                    country=series.country_name,
                    metrics=metrics,
                )
            )

        if summaries:
            charts.extend(build_aggregate_charts(summaries))

        _LOGGER.info(
            "Built dashboard for %d of %d countries", len(summaries), len(country_codes)
        )
        return charts

    def render_countries(
        self, country_codes: Sequence[str], mode: ChartMode = ChartMode.DAILY
    ) -> str:
        """@brief Render the combined multi-country dashboard page.

        @details Countries that fail or return no data are logged and left
        out; an empty page is returned when none succeed.
        """
        charts = self.build_dashboard(country_codes, mode)
        return self._render(charts, title="COVID-19 country comparison")
