"""
Session storage abstraction.

Separates persistence from the condition systems for testability.
"""

import json
import shutil
from pathlib import Path
from typing import Protocol, runtime_checkable

from .schema import SessionState


@runtime_checkable
class SessionStore(Protocol):
    """
    Storage interface for session state.

    Implementations:
    - JsonSessionStore: File-based persistence (production)
    - MemorySessionStore: In-memory storage (testing)

    load() may raise OSError or a validation error when the backing
    store is unreadable; SessionManager turns that into an empty state.
    """

    def save(self, state: SessionState) -> None:
        """Persist a session."""
        ...

    def load(self, session_id: str) -> SessionState | None:
        """Load a session by ID. Returns None if not found."""
        ...

    def delete(self, session_id: str) -> bool:
        """Delete a session. Returns True if deleted."""
        ...

    def exists(self, session_id: str) -> bool:
        """Check if a session exists."""
        ...


class JsonSessionStore:
    """
    File-based session storage using JSON.

    One file per session, with a .bak copy of the previous save.
    Keys are written by alias so the host sees its own field names.
    """

    def __init__(self, sessions_dir: Path | str = "sessions"):
        self.sessions_dir = Path(sessions_dir)
        self.sessions_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, session_id: str) -> Path:
        return self.sessions_dir / f"{session_id}.json"

    def save(self, state: SessionState) -> None:
        """Save session to JSON file with backup."""
        state.touch()
        session_file = self._path(state.id)

        if session_file.exists():
            shutil.copy2(session_file, session_file.with_suffix(".json.bak"))

        session_file.write_text(
            state.model_dump_json(indent=2, by_alias=True),
            encoding="utf-8",
        )

    def load(self, session_id: str) -> SessionState | None:
        """Load session by ID. Decode and validation errors propagate."""
        session_file = self._path(session_id)
        if not session_file.exists():
            return None

        data = json.loads(session_file.read_text(encoding="utf-8"))
        return SessionState.model_validate(data)

    def delete(self, session_id: str) -> bool:
        session_file = self._path(session_id)
        if session_file.exists():
            session_file.unlink()
            return True
        return False

    def exists(self, session_id: str) -> bool:
        return self._path(session_id).exists()


class MemorySessionStore:
    """
    In-memory session storage for testing.

    No file I/O - all data lives in memory.
    """

    def __init__(self):
        self.sessions: dict[str, SessionState] = {}
        self.save_count = 0

    def save(self, state: SessionState) -> None:
        state.touch()
        self.sessions[state.id] = state
        self.save_count += 1

    def load(self, session_id: str) -> SessionState | None:
        return self.sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def exists(self, session_id: str) -> bool:
        return session_id in self.sessions

    def clear(self) -> None:
        """Clear all sessions (test utility)."""
        self.sessions.clear()
