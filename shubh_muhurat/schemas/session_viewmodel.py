"""Session viewmodel schemas used by the session API endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from .muhurat import CityCandidate


class TimingVM(BaseModel):
    key: str
    label: str
    value: str


class PeriodVM(BaseModel):
    name: str
    paksha: Optional[str] = None
    lord: Optional[str] = None
    start: str
    end: str


class SectionVM(BaseModel):
    key: str
    title: str
    items: List[PeriodVM]


class ResultVM(BaseModel):
    heading: str
    city_name: str
    tz: str
    vaara_label: str
    vaara: str
    timings: List[TimingVM]
    sections: List[SectionVM]
    labels: Dict[str, str]


class SessionViewModel(BaseModel):
    session_id: str
    lang: str
    state: str
    date: Optional[str] = None
    city_text: str = ""
    selected_city: Optional[CityCandidate] = None
    suggestions: List[CityCandidate] = Field(default_factory=list)
    loading: bool = False
    submit_label: str
    chrome: Dict[str, str]
    result: Optional[ResultVM] = None


class CreateSessionRequest(BaseModel):
    lang: Optional[str] = None


class DateUpdate(BaseModel):
    date: Optional[str] = None


class CityTextUpdate(BaseModel):
    text: str = ""


class CitySelection(BaseModel):
    index: int = Field(ge=0)


class LanguageUpdate(BaseModel):
    lang: str
