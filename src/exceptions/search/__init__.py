from src.exceptions.search.search_in_progress_error import SearchInProgressError

__all__ = ["SearchInProgressError"]
