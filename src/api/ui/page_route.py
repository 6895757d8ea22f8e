from typing import Optional

import structlog
from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from src.api.ui.page_renderer import render_page
from src.models.search import SearchState
from src.services.search_session import SearchSession

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Page"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def search_page(
    city: Optional[str] = Query(default=None, description="City name submitted from the form"),
):
    """
    Serve the weather search form.

    Without a city parameter the empty form is shown. With one (blank
    included) a search is run and its summary or error message is rendered
    below the form.
    """
    if city is None:
        return HTMLResponse(render_page(SearchState()))

    logger.info("Page request: Search weather", city=city)
    session = SearchSession()
    state = await session.submit(city)
    return HTMLResponse(render_page(state))
