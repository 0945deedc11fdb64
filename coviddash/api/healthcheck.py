from fastapi import APIRouter

from coviddash.schemas.health_check_response import HealthCheckResponse
from coviddash.utils.env import get_covid_api_base_url

router = APIRouter(tags=["Health Check"])


@router.get("/healthcheck", response_model=HealthCheckResponse)
def healthcheck() -> HealthCheckResponse:
    """@brief Report that the process is serving requests.

    @return HealthCheckResponse with the configured upstream API root.
    """
    return HealthCheckResponse(status="ok", upstream=get_covid_api_base_url())
