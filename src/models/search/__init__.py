from src.models.search.error_kind import ErrorKind
from src.models.search.search_request import SearchRequest
from src.models.search.search_state import SearchError, SearchState, SearchStatus

__all__ = ["ErrorKind", "SearchError", "SearchRequest", "SearchState", "SearchStatus"]
