from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from src.models.search.error_kind import ErrorKind
from src.models.weather.weather import WeatherSummary


class SearchStatus(str, Enum):
    """Lifecycle of a single search: idle -> searching -> success | failed."""

    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    FAILED = "failed"


class SearchError(BaseModel):
    """A classified, user-facing search failure."""

    kind: ErrorKind = Field(..., description="Failure category")
    message: str = Field(..., description="Message shown to the user")
    status_code: Optional[int] = Field(None, description="Provider HTTP status, when one was received")


class SearchState(BaseModel):
    """Result-or-error slot of a search session. At most one of summary/error is set."""

    status: SearchStatus = Field(default=SearchStatus.IDLE, description="Current lifecycle state")
    query: str = Field(default="", description="Last submitted query text")
    summary: Optional[WeatherSummary] = Field(None, description="Weather summary of a successful search")
    error: Optional[SearchError] = Field(None, description="Error of a failed search")
