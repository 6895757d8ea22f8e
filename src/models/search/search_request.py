from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    city: str = Field(default="", description="Free-text city name to look up")
