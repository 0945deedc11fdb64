import logging
import time

from fastapi import Request

_LOGGER = logging.getLogger(__name__)


def _target_from_path(path: str) -> str | None:
    """@brief Map an HTTP path to the dashboard view it serves.

    @param path Request path (e.g., `/country/gb` or `/countries`).
    @return `country` for single-country pages, `countries` for the
    comparison page, otherwise `None`.
    """
    if path.startswith("/country/"):
        return "country"
    if path == "/countries" or path.startswith("/countries/"):
        return "countries"
    return None


async def track_request_latency(request: Request, call_next):
    """@brief FastAPI middleware that logs latency of dashboard pages.

    @param request Incoming FastAPI request object.
    @param call_next FastAPI middleware callback used to continue request handling.
    @return Response produced by downstream handlers.

    @details
    Page latency is dominated by sequential upstream fetches, so it is logged
    for every dashboard response, successful or not.
    """
    start_time = time.perf_counter()
    response = await call_next(request)

    target = _target_from_path(request.url.path)
    if target is not None:
        elapsed_ms = (time.perf_counter() - start_time) * 1000.0
        _LOGGER.info(
            "%s %s -> %d in %.1f ms (%s)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            target,
        )

    return response
