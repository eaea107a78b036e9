"""In-memory store for form sessions.

Sessions live only as long as the process, matching the form's lack of any
persistence. The store is protected by a threading lock for concurrent access
from the API thread pool.
"""

import threading
import uuid
from functools import lru_cache
from typing import Callable, Dict, Optional, Tuple

from .geocode_client import GeocodeClient
from .muhurat_client import MuhuratClient
from .session_controller import SessionController

ControllerFactory = Callable[[Optional[str]], SessionController]


@lru_cache(maxsize=1)
def shared_clients() -> Tuple[GeocodeClient, MuhuratClient]:
    """Remote clients shared by every session; one connection pool each."""

    return GeocodeClient(), MuhuratClient()


def close_shared_clients() -> None:
    if shared_clients.cache_info().currsize:
        geocode, muhurat = shared_clients()
        geocode.close()
        muhurat.close()
    shared_clients.cache_clear()


def _default_factory(lang: Optional[str]) -> SessionController:
    geocode, muhurat = shared_clients()
    return SessionController(geocode=geocode, muhurat=muhurat, lang=lang)


class SessionStore:
    def __init__(self, factory: Optional[ControllerFactory] = None) -> None:
        self._sessions: Dict[str, SessionController] = {}
        self._lock = threading.Lock()
        self._factory = factory or _default_factory

    def create(self, lang: Optional[str] = None) -> str:
        sid = "ses_" + uuid.uuid4().hex[:18]
        controller = self._factory(lang)
        with self._lock:
            self._sessions[sid] = controller
        return sid

    def get(self, sid: str) -> Optional[SessionController]:
        with self._lock:
            return self._sessions.get(sid)

    def drop(self, sid: str) -> bool:
        with self._lock:
            return self._sessions.pop(sid, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()


# Global singleton store used by the API.
STORE = SessionStore()
