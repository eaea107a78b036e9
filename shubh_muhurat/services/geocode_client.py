"""City autosuggest backed by the remote geocode endpoint."""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from ..schemas.muhurat import CityCandidate, GeocodeResponse
from .util.remote_defaults import geocode_url, request_timeout


logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


class GeocodeClient:
    """Turn partial city names into ranked city candidates.

    Failures never reach the caller: a broken lookup is logged and reported as
    "no suggestions".
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url or geocode_url()
        self.timeout = timeout if timeout is not None else request_timeout()
        self._http = session or requests.Session()

    def close(self) -> None:
        self._http.close()

    def suggest(self, partial_name: str) -> List[CityCandidate]:
        if len(partial_name or "") < MIN_QUERY_LENGTH:
            return []
        try:
            r = self._http.get(self.url, params={"city": partial_name}, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
            if not isinstance(payload, dict):
                raise ValueError("geocode response is not a JSON object")
            return list(GeocodeResponse.model_validate(payload).suggestions)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("City suggestion lookup failed for %r: %s", partial_name, exc)
            return []
