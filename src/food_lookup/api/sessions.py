"""Search session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, Response, status

from food_lookup.api.models import SessionSearchRequest, SessionStateResponse

if TYPE_CHECKING:
    from food_lookup.containers import AppContainer
    from food_lookup.services.search_session import SearchSession

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_session(request: Request, session_id: UUID) -> SearchSession:
    container: AppContainer = request.app.state.container
    session = container.session_registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return session


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(request: Request) -> SessionStateResponse:
    """Create an idle search session."""
    container: AppContainer = request.app.state.container
    session_id, session = container.session_registry.create()
    return SessionStateResponse.from_snapshot(session_id, session.snapshot())


@router.get("/{session_id}")
async def get_session(session_id: UUID, request: Request) -> SessionStateResponse:
    """Return the current state of a session."""
    session = _get_session(request, session_id)
    return SessionStateResponse.from_snapshot(session_id, session.snapshot())


@router.post("/{session_id}/search")
async def search(
    session_id: UUID, body: SessionSearchRequest, request: Request
) -> SessionStateResponse:
    """Set the session query and run a fresh search."""
    session = _get_session(request, session_id)
    session.query = body.query
    await session.perform_search()
    return SessionStateResponse.from_snapshot(session_id, session.snapshot())


@router.post("/{session_id}/load-more")
async def load_more(session_id: UUID, request: Request) -> SessionStateResponse:
    """Append the next page of results, if more are available."""
    session = _get_session(request, session_id)
    await session.load_more()
    return SessionStateResponse.from_snapshot(session_id, session.snapshot())


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: UUID, request: Request) -> Response:
    """Discard a session."""
    container: AppContainer = request.app.state.container
    if not container.session_registry.discard(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
