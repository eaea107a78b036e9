"""State machine behind one muhurat form session.

The controller owns everything the form shows: date, city text, suggestions,
the selected city, the loading flag and the last fetched result. Endpoints run
on a thread pool, so all fields are guarded by a lock and network calls are
made outside it.

Suggestion replies can land out of order. Every keystroke takes a new
sequence number and only the reply for the latest number may write the
suggestion list; selecting a city or resetting the form also retires any
in-flight lookup.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Union

from ..i18n.locale_table import clamp_lang
from ..schemas.muhurat import CityCandidate, MuhuratResult
from .geocode_client import GeocodeClient
from .muhurat_client import MuhuratClient, MuhuratFetchError
from .util.place_defaults import display_tz


logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    TYPING = "typing"
    CITY_SELECTED = "city_selected"
    SUBMITTING = "submitting"
    DISPLAYING = "displaying"


class SessionValidationError(ValueError):
    """Raised when a submission is rejected before any network call."""

    prompt_key: str


class CityNotSelectedError(SessionValidationError):
    prompt_key = "selectCityAlert"


class DateRequiredError(SessionValidationError):
    prompt_key = "dateRequired"


class SubmissionInProgressError(RuntimeError):
    prompt_key = "submitInProgress"


@dataclass(frozen=True)
class SessionSnapshot:
    lang: str
    state: SessionState
    date: Optional[date]
    city_text: str
    selected_city: Optional[CityCandidate]
    suggestions: List[CityCandidate] = field(default_factory=list)
    loading: bool = False
    result: Optional[MuhuratResult] = None


def _coerce_date(value: Union[str, date, None]) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    return date.fromisoformat(text)


class SessionController:
    def __init__(
        self,
        geocode: Optional[GeocodeClient] = None,
        muhurat: Optional[MuhuratClient] = None,
        lang: Optional[str] = None,
    ) -> None:
        self._geocode = geocode or GeocodeClient()
        self._muhurat = muhurat or MuhuratClient()
        self._lock = threading.Lock()
        self._lang = clamp_lang(lang)
        self._suggest_seq = 0
        self._generation = 0
        self._clear()

    def _clear(self) -> None:
        self._date: Optional[date] = None
        self._city_text = ""
        self._selected: Optional[CityCandidate] = None
        self._suggestions: List[CityCandidate] = []
        self._submitting = False
        self._result: Optional[MuhuratResult] = None

    # State -------------------------------------------------------------

    def _state(self) -> SessionState:
        if self._submitting:
            return SessionState.SUBMITTING
        if self._result is not None:
            return SessionState.DISPLAYING
        if self._selected is not None:
            return SessionState.CITY_SELECTED
        if self._city_text or self._date is not None:
            return SessionState.TYPING
        return SessionState.IDLE

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state()

    @property
    def lang(self) -> str:
        with self._lock:
            return self._lang

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                lang=self._lang,
                state=self._state(),
                date=self._date,
                city_text=self._city_text,
                selected_city=self._selected,
                suggestions=list(self._suggestions),
                loading=self._submitting,
                result=self._result,
            )

    # User actions ------------------------------------------------------

    def set_language(self, lang: Optional[str]) -> str:
        with self._lock:
            self._lang = clamp_lang(lang)
            return self._lang

    def set_date(self, value: Union[str, date, None]) -> Optional[date]:
        parsed = _coerce_date(value)
        with self._lock:
            self._date = parsed
        return parsed

    def update_city_text(self, text: str) -> List[CityCandidate]:
        """Store new city text and refresh suggestions for it.

        Returns the suggestions this call wrote, or the current list when a
        newer keystroke has already superseded it.
        """

        text = text or ""
        with self._lock:
            self._city_text = text
            self._selected = None
            self._suggest_seq += 1
            seq = self._suggest_seq

        candidates = self._geocode.suggest(text)

        with self._lock:
            if seq != self._suggest_seq:
                logger.debug("Discarding stale suggestions for %r (seq %s < %s)", text, seq, self._suggest_seq)
                return list(self._suggestions)
            self._suggestions = list(candidates)
            return list(self._suggestions)

    def select_city(self, index: int) -> CityCandidate:
        with self._lock:
            if index < 0 or index >= len(self._suggestions):
                raise LookupError(f"No suggestion at index {index}")
            chosen = self._suggestions[index]
            self._selected = chosen
            self._city_text = chosen.city_name
            self._suggestions = []
            self._suggest_seq += 1
            return chosen

    def submit(self) -> Optional[MuhuratResult]:
        with self._lock:
            if self._submitting:
                raise SubmissionInProgressError("A submission is already in flight")
            if self._selected is None:
                raise CityNotSelectedError("Select a city from the suggestions first")
            if self._date is None:
                raise DateRequiredError("Choose a date first")
            city = self._selected
            day = self._date
            generation = self._generation
            self._submitting = True

        try:
            try:
                fetched = self._muhurat.fetch(day, city.lat, city.lon)
            except MuhuratFetchError:
                with self._lock:
                    if generation != self._generation:
                        logger.info("Ignoring failed muhurat fetch for %s; session was reset", city.city_name)
                        return None
                raise
            result = fetched.model_copy(
                update={"city_name": city.city_name, "display_tz": display_tz(city.lat, city.lon)}
            )
            with self._lock:
                if generation == self._generation:
                    self._result = result
                else:
                    logger.info("Dropping muhurat result for %s; session was reset", city.city_name)
            return result
        finally:
            with self._lock:
                if generation == self._generation:
                    self._submitting = False

    def reset(self) -> None:
        with self._lock:
            self._generation += 1
            self._suggest_seq += 1
            self._clear()
