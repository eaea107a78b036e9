from shubh_muhurat.services import session_store
from shubh_muhurat.services.geocode_client import GeocodeClient
from shubh_muhurat.services.muhurat_client import MuhuratClient
from shubh_muhurat.services.session_store import SessionStore, close_shared_clients, shared_clients


class ClosingHTTP:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_sessions_share_one_pair_of_clients():
    close_shared_clients()
    store = SessionStore()
    sids = [store.create() for _ in range(50)]
    geocoders = {id(store.get(sid)._geocode) for sid in sids}
    fetchers = {id(store.get(sid)._muhurat) for sid in sids}
    assert len(geocoders) == 1
    assert len(fetchers) == 1
    geocode, muhurat = shared_clients()
    assert store.get(sids[0])._geocode is geocode
    assert store.get(sids[0])._muhurat is muhurat
    close_shared_clients()


def test_dropping_a_session_leaves_shared_clients_usable():
    close_shared_clients()
    store = SessionStore()
    first = store.create()
    second = store.create()
    assert store.drop(first)
    assert store.get(first) is None
    assert store.get(second)._geocode is shared_clients()[0]
    close_shared_clients()


def test_close_shared_clients_closes_http_sessions(monkeypatch):
    close_shared_clients()
    geo_http, muhurat_http = ClosingHTTP(), ClosingHTTP()
    monkeypatch.setattr(session_store, "GeocodeClient", lambda: GeocodeClient(url="http://geo.test", session=geo_http))
    monkeypatch.setattr(session_store, "MuhuratClient", lambda: MuhuratClient(url="http://muhurat.test", session=muhurat_http))
    SessionStore().create()
    close_shared_clients()
    assert geo_http.closed is True
    assert muhurat_http.closed is True
    # Nothing cached any more, so a second close is a no-op.
    close_shared_clients()


def test_client_close_closes_http_session():
    http = ClosingHTTP()
    GeocodeClient(url="http://geo.test", session=http).close()
    assert http.closed is True
    http = ClosingHTTP()
    MuhuratClient(url="http://muhurat.test", session=http).close()
    assert http.closed is True
