"""Session collaborator: who is signed in, and who wants to hear about it."""
import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

logger = logging.getLogger("newsletter-titles.session")

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"

AuthCallback = Callable[[str, Optional["Session"]], None]


@dataclass(frozen=True)
class Session:
    access_token: str
    user_id: Optional[str] = None


class Subscription:
    """Handle for one auth listener; unsubscribe() may be called any number of times."""

    def __init__(self, release: Callable[[], None]):
        self._release = release
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self.active = False
            self._release()


class SessionProvider(Protocol):
    def get_session(self) -> Optional[Session]: ...

    def on_auth_state_change(self, callback: AuthCallback) -> Subscription: ...


class SessionStore:
    """In-process SessionProvider."""

    def __init__(self, session: Optional[Session] = None):
        self._session = session
        self._listeners: Dict[int, AuthCallback] = {}
        self._ids = itertools.count()

    def get_session(self) -> Optional[Session]:
        return self._session

    def on_auth_state_change(self, callback: AuthCallback) -> Subscription:
        key = next(self._ids)
        self._listeners[key] = callback
        return Subscription(lambda: self._listeners.pop(key, None))

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def sign_in(self, session: Session) -> None:
        self._session = session
        self._emit(SIGNED_IN)

    def sign_out(self) -> None:
        self._session = None
        self._emit(SIGNED_OUT)

    def _emit(self, event: str) -> None:
        logger.debug("auth event %s -> %d listener(s)", event, len(self._listeners))
        for callback in list(self._listeners.values()):
            callback(event, self._session)
