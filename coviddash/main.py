import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from coviddash.api.healthcheck import router as healthcheck_router
from coviddash.middleware.latency import track_request_latency
from coviddash.utils.error import FetchError
from coviddash.views.dashboard import router as dashboard_router

_LOGGER = logging.getLogger(__name__)

app = FastAPI(title="COVID-19 Dashboard")
app.middleware("http")(track_request_latency)
app.include_router(dashboard_router)
app.include_router(healthcheck_router)


@app.exception_handler(FetchError)
async def handle_fetch_error(_request: Request, exc: FetchError) -> PlainTextResponse:
    """@brief Surface upstream retrieval/parsing failures as a client error.

    @param _request Incoming request associated with the failure.
    @param exc RetrievalError or ParsingError raised by the API client.
    @return PlainTextResponse with HTTP 400 and the error message.
    """
    _LOGGER.warning("%s", exc)
    return PlainTextResponse(status_code=status.HTTP_400_BAD_REQUEST, content=str(exc))

