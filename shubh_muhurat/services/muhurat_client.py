"""Client for the remote muhurat (day panchang) endpoint."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import requests

from ..schemas.muhurat import MuhuratResult
from .util.remote_defaults import muhurat_url, request_timeout


logger = logging.getLogger(__name__)


class MuhuratFetchError(RuntimeError):
    """Raised when the muhurat data for a day could not be fetched."""


class MuhuratClient:
    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url or muhurat_url()
        self.timeout = timeout if timeout is not None else request_timeout()
        self._http = session or requests.Session()

    def close(self) -> None:
        self._http.close()

    def fetch(self, day: date, latitude: float, longitude: float) -> MuhuratResult:
        """Fetch the day's time windows for a location.

        The ``data`` object of the response is adopted as-is; any transport,
        status or body problem is raised as :class:`MuhuratFetchError`.
        """

        params = {"date": day.isoformat(), "lat": latitude, "lon": longitude}
        try:
            r = self._http.get(self.url, params=params, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
            data = payload["data"]
            if not isinstance(data, dict):
                raise ValueError("muhurat response has no data object")
            return MuhuratResult.model_validate(data)
        except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
            logger.exception("Muhurat fetch failed for %s at (%s, %s)", params["date"], latitude, longitude)
            raise MuhuratFetchError(f"Muhurat fetch failed: {exc}") from exc
