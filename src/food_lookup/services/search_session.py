"""Paginated search session state machine."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from food_lookup.domain.foods import SearchResult

_logger = logging.getLogger(__name__)


class FoodSearcher(Protocol):
    """Interface for fetching one page of food search results."""

    async def search(self, query: str, page: int = 1) -> list[SearchResult]:
        """Return a page of results for the query."""


class SearchState(StrEnum):
    """Coarse state of a search session."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class SearchSnapshot:
    """Point-in-time view of a session for presentation."""

    query: str
    current_page: int
    state: SearchState
    results: tuple[SearchResult, ...]
    is_loading: bool
    error_message: str | None
    can_load_more: bool


@dataclass
class SearchSession:
    """Tracks one search interaction across pages.

    Callers set ``query`` and drive the session with ``perform_search`` and
    ``load_more``. Neither command raises: failures land in
    ``error_message``.

    Every request is tagged with the session generation at the time it was
    issued. A new search or a reset bumps the generation, and completions
    from an older generation are dropped without touching state.
    """

    searcher: FoodSearcher
    query: str = ""
    _results: list[SearchResult] = field(default_factory=list, init=False, repr=False)
    _current_page: int = field(default=1, init=False, repr=False)
    _is_loading: bool = field(default=False, init=False, repr=False)
    _error_message: str | None = field(default=None, init=False, repr=False)
    _can_load_more: bool = field(default=False, init=False, repr=False)
    _generation: int = field(default=0, init=False, repr=False)

    @property
    def results(self) -> list[SearchResult]:
        return list(self._results)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def can_load_more(self) -> bool:
        return self._can_load_more

    @property
    def state(self) -> SearchState:
        if self._is_loading:
            return SearchState.LOADING
        if self._error_message is not None:
            return SearchState.ERROR
        if self._results:
            return SearchState.LOADED
        return SearchState.IDLE

    def snapshot(self) -> SearchSnapshot:
        """Return an immutable copy of the observable state."""
        return SearchSnapshot(
            query=self.query,
            current_page=self._current_page,
            state=self.state,
            results=tuple(self._results),
            is_loading=self._is_loading,
            error_message=self._error_message,
            can_load_more=self._can_load_more,
        )

    async def perform_search(self) -> None:
        """Start a fresh search for the current query, replacing results."""
        trimmed = self.query.strip()
        if not trimmed:
            self._reset()
            return

        self._generation += 1
        generation = self._generation
        self._current_page = 1
        self._is_loading = True
        self._can_load_more = False
        self._error_message = None

        try:
            page = await self.searcher.search(trimmed, 1)
        except Exception as exc:
            if generation == self._generation:
                _logger.warning("Food search failed: query=%s error=%s", trimmed, exc)
                self._results = []
                self._can_load_more = False
                self._error_message = _describe(exc)
        else:
            if generation == self._generation:
                self._results = list(page)
                self._can_load_more = bool(page)
        finally:
            if generation == self._generation:
                self._is_loading = False

    async def load_more(self) -> None:
        """Fetch the next page and append it to the current results."""
        if not self._can_load_more or self._is_loading:
            return

        trimmed = self.query.strip()
        if not trimmed:
            self._reset()
            return

        generation = self._generation
        next_page = self._current_page + 1
        self._is_loading = True
        self._can_load_more = False
        self._error_message = None

        try:
            page = await self.searcher.search(trimmed, next_page)
        except asyncio.CancelledError:
            # Page never arrived; it stays loadable.
            if generation == self._generation:
                self._can_load_more = True
            raise
        except Exception as exc:
            if generation == self._generation:
                _logger.warning(
                    "Food search load more failed: query=%s page=%s error=%s",
                    trimmed,
                    next_page,
                    exc,
                )
                self._can_load_more = False
                self._error_message = _describe(exc)
        else:
            if generation == self._generation:
                self._current_page = next_page
                self._results.extend(page)
                self._can_load_more = bool(page)
        finally:
            if generation == self._generation:
                self._is_loading = False

    def _reset(self) -> None:
        self._generation += 1
        self._results = []
        self._current_page = 1
        self._is_loading = False
        self._error_message = None
        self._can_load_more = False


def _describe(exc: Exception) -> str:
    """Return a user-facing message for a failed lookup."""
    return str(exc).strip() or type(exc).__name__
