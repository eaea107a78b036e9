from datetime import date

import pytest
import requests

from shubh_muhurat.services.muhurat_client import MuhuratClient, MuhuratFetchError


DAY = {
    "sunrise": "2024-05-01T00:33:00Z",
    "sunset": "2024-05-01T13:41:00Z",
    "moonrise": "2024-04-30T19:58:00Z",
    "moonset": "2024-05-01T08:05:00Z",
    "vaara": "Wednesday",
    "tithi": [
        {"id": 8, "name": "Ashtami", "paksha": "Krishna Paksha", "start": "2024-04-30T22:00:00Z", "end": "2024-05-01T23:54:00Z"}
    ],
    "nakshatra": [
        {"id": 21, "name": "Uttara Ashadha", "lord": {"name": "Sun"}, "start": "2024-04-30T10:44:00Z", "end": "2024-05-01T13:32:00Z"}
    ],
    "karana": [{"name": "Kaulava", "start": "2024-04-30T22:00:00Z", "end": "2024-05-01T10:56:00Z"}],
    "yoga": [{"name": "Shukla", "start": "2024-04-30T17:21:00Z", "end": "2024-05-01T16:03:00Z"}],
    "masa": "Chaitra",
}


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeHTTP:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


def _client(http):
    return MuhuratClient(url="https://muhurat.test/api/muhurat", timeout=5, session=http)


def test_fetch_sends_iso_date_and_coordinates():
    http = FakeHTTP(FakeResponse({"data": DAY}))
    _client(http).fetch(date(2024, 5, 1), 23.02, 72.57)
    assert http.calls == [
        {
            "url": "https://muhurat.test/api/muhurat",
            "params": {"date": "2024-05-01", "lat": 23.02, "lon": 72.57},
            "timeout": 5,
        }
    ]


def test_fetch_adopts_body_verbatim():
    result = _client(FakeHTTP(FakeResponse({"data": DAY}))).fetch(date(2024, 5, 1), 23.02, 72.57)
    assert result.sunrise == DAY["sunrise"]
    assert result.vaara == "Wednesday"
    assert result.tithi[0].paksha == "Krishna Paksha"
    assert result.nakshatra[0].lord.name == "Sun"
    assert result.karana[0].name == "Kaulava"
    assert result.yoga[0].end == DAY["yoga"][0]["end"]
    dumped = result.model_dump(by_alias=True)
    assert dumped["masa"] == "Chaitra"
    assert dumped["tithi"][0]["id"] == 8
    assert result.city_name is None


def test_missing_lists_are_empty():
    result = _client(FakeHTTP(FakeResponse({"data": {"sunrise": DAY["sunrise"], "tithi": None}}))).fetch(
        date(2024, 5, 1), 23.02, 72.57
    )
    assert result.tithi == []
    assert result.nakshatra == []
    assert result.moonrise is None


@pytest.mark.parametrize(
    "http",
    [
        FakeHTTP(exc=requests.Timeout("slow")),
        FakeHTTP(FakeResponse({"error": "down"}, status_code=500)),
        FakeHTTP(FakeResponse(ValueError("not json"))),
        FakeHTTP(FakeResponse({"status": "ok"})),
        FakeHTTP(FakeResponse({"data": ["not", "an", "object"]})),
        FakeHTTP(FakeResponse(["data"])),
        FakeHTTP(FakeResponse({"data": {"tithi": "Ashtami"}})),
    ],
)
def test_failures_raise_fetch_error(http):
    with pytest.raises(MuhuratFetchError):
        _client(http).fetch(date(2024, 5, 1), 23.02, 72.57)
    assert len(http.calls) == 1
