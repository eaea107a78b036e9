"""Wire models for the remote geocode and muhurat endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class CityCandidate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city_name: str = Field(alias="cityName")
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class GeocodeResponse(BaseModel):
    suggestions: List[CityCandidate] = Field(default_factory=list)


class LordRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None


class Period(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None


class TithiPeriod(Period):
    paksha: Optional[str] = None


class NakshatraPeriod(Period):
    lord: Optional[LordRef] = None


class MuhuratResult(BaseModel):
    """Day data as returned by the muhurat endpoint, kept verbatim."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    moonrise: Optional[str] = None
    moonset: Optional[str] = None
    vaara: Optional[str] = None
    tithi: List[TithiPeriod] = Field(default_factory=list)
    nakshatra: List[NakshatraPeriod] = Field(default_factory=list)
    karana: List[Period] = Field(default_factory=list)
    yoga: List[Period] = Field(default_factory=list)
    city_name: Optional[str] = Field(default=None, alias="cityName")
    display_tz: Optional[str] = None

    @field_validator("tithi", "nakshatra", "karana", "yoga", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value
