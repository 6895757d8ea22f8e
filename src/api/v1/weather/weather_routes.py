import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.auth import verify_token
from src.models.search import ErrorKind, SearchRequest, SearchState
from src.services.search_session import SearchSession

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["Weather"])

ERROR_STATUS_CODES = {
    ErrorKind.EMPTY_QUERY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MISSING_CREDENTIAL: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.CITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_CREDENTIAL: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.HTTP_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.NETWORK_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.UNKNOWN_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post("/search", summary="Search Current Weather", response_model=SearchState)
async def search_weather(request: SearchRequest, authenticated: bool = Depends(verify_token)):
    """
    Resolve a city name and return its current weather.

    The body of both successful and failed searches is the search state:
    a summary on success, or a classified error with a user-facing message.

    Args:
        request: Payload with the free-text city name.
        authenticated: Dependency that enforces optional token verification.

    Returns:
        SearchState. HTTP 200 on success, otherwise a status matching the
        error kind (400, 404, 429, 500, 502 or 503).
    """
    logger.info("API request: Search weather", city=request.city, authenticated=authenticated)

    session = SearchSession()
    state = await session.submit(request.city)

    if state.error is None:
        return state

    return JSONResponse(
        status_code=ERROR_STATUS_CODES[state.error.kind],
        content=state.model_dump(mode="json"),
    )
