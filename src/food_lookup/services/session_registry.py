"""In-memory registry of active search sessions."""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from food_lookup.services.search_session import FoodSearcher, SearchSession

_logger = logging.getLogger(__name__)


@dataclass
class SearchSessionRegistry:
    """Creates and tracks search sessions for the lifetime of the app."""

    searcher: FoodSearcher
    max_sessions: int | None = None
    _sessions: OrderedDict[UUID, SearchSession] = field(
        default_factory=OrderedDict, init=False, repr=False
    )

    def create(self) -> tuple[UUID, SearchSession]:
        """Create a new idle session, evicting the least recently used when full."""
        if self.max_sessions is not None:
            while self._sessions and len(self._sessions) >= self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                _logger.info("Evicted search session %s", evicted_id)
        session_id = uuid4()
        session = SearchSession(searcher=self.searcher)
        self._sessions[session_id] = session
        return session_id, session

    def get(self, session_id: UUID) -> SearchSession | None:
        """Return a session by id, marking it most recently used."""
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def discard(self, session_id: UUID) -> bool:
        """Forget a session; returns whether it existed."""
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
