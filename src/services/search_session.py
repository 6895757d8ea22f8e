from typing import Optional

import structlog

from src.exceptions.search import SearchInProgressError
from src.models.search import SearchState, SearchStatus
from src.services.error_classifier import classify_error
from src.services.search_service import SearchService, search_service

logger = structlog.get_logger(__name__)


class SearchSession:
    """
    State of one interactive search form.

    Holds a single result-or-error slot and moves through
    idle -> searching -> success | failed. A new search may start from any
    state except searching.
    """

    def __init__(self, service: Optional[SearchService] = None):
        self.service = service or search_service
        self.state = SearchState()

    @property
    def is_searching(self) -> bool:
        return self.state.status == SearchStatus.SEARCHING

    def reset(self) -> SearchState:
        """Return to idle with both the result and the error cleared."""
        if self.is_searching:
            raise SearchInProgressError("Cannot reset while a search is in progress")
        self.state = SearchState()
        return self.state

    async def submit(self, city: str) -> SearchState:
        """
        Run a search and store its outcome.

        Args:
            city: User-supplied city name

        Returns:
            The resulting SearchState (success or failed)

        Raises:
            SearchInProgressError: If a search is already in flight
        """
        if self.is_searching:
            logger.warning("Search rejected, another search is in progress", city=city)
            raise SearchInProgressError("A search is already in progress")

        self.state = SearchState(status=SearchStatus.SEARCHING, query=city)

        try:
            summary = await self.service.search(city)
        except Exception as e:
            # classify_error logs the failure
            self.state = SearchState(status=SearchStatus.FAILED, query=city, error=classify_error(e))
        else:
            self.state = SearchState(status=SearchStatus.SUCCESS, query=city, summary=summary)

        return self.state
