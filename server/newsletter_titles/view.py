# server/newsletter_titles/view.py
"""
Generator form/list, independent of any UI toolkit.

The view talks to three collaborators: a TitleClient for the remote call,
a SessionProvider that gates access, and two callbacks supplied by whatever
renders it (navigate for redirects, notify for toasts).
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from newsletter_titles.clipboard import system_clipboard
from newsletter_titles.errors import QuotaExceededError
from newsletter_titles.session import SessionProvider, Subscription

logger = logging.getLogger("newsletter-titles.view")

LOGIN_ROUTE = "/login"


class ViewState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Toast:
    title: str
    description: str
    variant: str = "default"  # or "destructive"


class GeneratorView:
    def __init__(
        self,
        client,
        sessions: SessionProvider,
        navigate: Callable[[str], None],
        notify: Callable[[Toast], None],
        clipboard: Optional[Callable[[str], None]] = None,
    ):
        self.client = client
        self.sessions = sessions
        self.navigate = navigate
        self.notify = notify
        self.clipboard = clipboard or system_clipboard

        self.context = ""
        self.titles: List[str] = []
        self.state = ViewState.IDLE
        self.authenticated = False
        self._subscription: Optional[Subscription] = None

    # ---------------------------
    # Lifecycle
    # ---------------------------
    def mount(self) -> None:
        self.authenticated = self.sessions.get_session() is not None
        if not self.authenticated:
            self.navigate(LOGIN_ROUTE)
        self._subscription = self.sessions.on_auth_state_change(self._on_auth_change)

    def unmount(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def __enter__(self):
        self.mount()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.unmount()
        return False

    def _on_auth_change(self, event, session) -> None:
        self.authenticated = session is not None
        if not self.authenticated:
            self.navigate(LOGIN_ROUTE)

    # ---------------------------
    # Form
    # ---------------------------
    @property
    def submit_disabled(self) -> bool:
        return self.state is ViewState.SUBMITTING

    @property
    def rows(self) -> List[Tuple[int, str]]:
        return list(enumerate(self.titles))

    def submit(self, context: Optional[str] = None) -> bool:
        """Run one generation round trip. Returns True when titles were received."""
        if context is not None:
            self.context = context
        if self.submit_disabled:
            return False
        if not self.authenticated:
            self.navigate(LOGIN_ROUTE)
            return False
        if not self.context.strip():
            self.notify(Toast("Error", "Please enter some context about your newsletter", "destructive"))
            return False

        self.state = ViewState.SUBMITTING
        try:
            return self._generate()
        finally:
            if self.state is ViewState.SUBMITTING:
                self.state = ViewState.IDLE

    def _generate(self) -> bool:
        try:
            titles = self.client.generate_titles(self.context)
        except QuotaExceededError:
            self.state = ViewState.ERROR
            self.notify(Toast(
                "OpenAI API Limit Reached",
                "The OpenAI API quota has been exceeded. Please try again later.",
                "destructive",
            ))
            return False
        except Exception as e:
            logger.error("Error generating titles: %s", e)
            self.state = ViewState.ERROR
            self.notify(Toast("Error", str(e) or "Failed to generate titles. Please try again.", "destructive"))
            return False

        self.titles = titles
        self.state = ViewState.SUCCESS
        self.notify(Toast("Success", f"Generated {len(titles)} newsletter titles for you!"))
        return True

    def copy_to_clipboard(self, title: str) -> None:
        try:
            self.clipboard(title)
        except Exception as e:
            logger.error("Clipboard write failed: %s", e)
            self.notify(Toast("Error", "Could not copy title to clipboard", "destructive"))
            return
        self.notify(Toast("Copied!", "Title copied to clipboard"))
