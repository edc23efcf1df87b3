from __future__ import annotations

from pydantic import BaseModel, Field


class CafeQuery(BaseModel):
    city: str = Field(..., min_length=1, description="Registry key, matched exactly")
    count: int | None = Field(
        default=None,
        ge=0,
        description="Maximum number of cafés to return; None means no limit",
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive substring filter on café names",
    )


class CityOut(BaseModel):
    name: str
    cafe_count: int


class CitiesResponse(BaseModel):
    cities: list[CityOut]
