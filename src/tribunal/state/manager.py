"""
Session lifecycle for one tracked persona.

Owns the current SessionState and is the only place that talks to the
store. A store that is missing or unreadable never reaches the systems:
reads fall back to an empty state, writes are skipped with a warning.
"""

import logging

from .schema import SessionState
from .store import SessionStore

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Holds the session state the condition systems operate on.

    Systems receive the manager, mutate ``manager.current`` and call
    ``save()``; they never touch the store directly.
    """

    def __init__(self, store: SessionStore | None, session_id: str):
        self.store = store
        self.session_id = session_id
        self._current: SessionState | None = None
        self._load_failed = False

    @property
    def current(self) -> SessionState:
        """The session state, loaded lazily on first access."""
        if self._current is None:
            self._current = self.load()
        return self._current

    @property
    def load_failed(self) -> bool:
        """True while the stored copy is unreadable and saves are held back."""
        return self._load_failed

    def load(self) -> SessionState:
        """Load from the store, degrading to an empty state on failure."""
        if self.store is None:
            logger.warning("No session store configured; starting from empty state")
            return SessionState(id=self.session_id)

        # ValueError covers JSON decode, unicode decode and pydantic validation
        try:
            state = self.store.load(self.session_id)
        except (OSError, ValueError) as e:
            logger.warning(f"Session {self.session_id} unreadable, treating as empty: {e}")
            self._load_failed = True
            return SessionState(id=self.session_id)

        self._load_failed = False

        if state is None:
            return SessionState(id=self.session_id)
        return state

    def reload(self) -> SessionState:
        """Drop the cached state and read it again. Re-enables saving on success."""
        self._current = None
        return self.current

    def save(self) -> bool:
        """Persist current state. Returns False if the write was skipped."""
        if self._current is None:
            return False
        if self.store is None:
            logger.warning(f"No session store; skipping save for {self.session_id}")
            return False
        if self._load_failed:
            logger.warning(
                f"Session {self.session_id} failed to load; skipping save "
                f"so the stored copy is kept until a successful reload()"
            )
            return False

        try:
            self.store.save(self._current)
        except OSError as e:
            logger.warning(f"Session store unavailable, skipping save for {self.session_id}: {e}")
            return False
        return True
