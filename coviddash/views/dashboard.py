from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.responses import HTMLResponse
from pydantic import TypeAdapter, ValidationError

from coviddash.schemas.chart import ChartMode
from coviddash.schemas.country_code import CountryCode, CountryCodeList
from coviddash.services.covid_api import CovidApiClient
from coviddash.services.dashboard import DashboardService
from coviddash.utils.client import get_covid_client
from coviddash.utils.error import validation_error_details

router = APIRouter(tags=["View"])

_COUNTRY_LIST_ADAPTER = TypeAdapter(CountryCodeList)


@router.get("/country/{code}", response_class=HTMLResponse)
def country_dashboard(code: Annotated[CountryCode, Path()],
                      mode: Annotated[ChartMode, Query()] = ChartMode.DAILY,
                      client: CovidApiClient = Depends(get_covid_client)) -> HTMLResponse:
    """@brief Render the line chart page of one country.

    @param code Case-insensitive country code or API slug.
    @param mode `daily` (default) or `cumulative` values.
    @param client Upstream API client resolved per request.
    @return HTMLResponse containing the rendered Plotly page.
    """
    service = DashboardService(client=client)
    return HTMLResponse(content=service.render_country(code, mode))


@router.get("/countries", response_class=HTMLResponse)
def countries_dashboard(countries: Annotated[str, Query(description="Space separated country codes.")] = "",
                        mode: Annotated[ChartMode, Query()] = ChartMode.DAILY,
                        client: CovidApiClient = Depends(get_covid_client)) -> HTMLResponse:
    """@brief Render per-country charts plus cross-country comparisons.

    @param countries Space (or comma) separated country codes.
    @param mode `daily` (default) or `cumulative` values on country charts.
    @param client Upstream API client resolved per request.
    @return HTMLResponse with every chart that could be built.
    @throws HTTPException HTTP 422 when a country code is malformed.
    """
    try:
        codes = _COUNTRY_LIST_ADAPTER.validate_python(countries)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=validation_error_details(exc),
        ) from exc

    service = DashboardService(client=client)
    return HTMLResponse(content=service.render_countries(codes, mode))
