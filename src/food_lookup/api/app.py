"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request, status

from food_lookup.api.models import FoodSearchResponse, SearchResultModel
from food_lookup.api.sessions import router as sessions_router
from food_lookup.app_logging import configure_logging
from food_lookup.containers import AppContainer
from food_lookup.domain.errors import ProviderError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(sessions_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/search")
    async def search_foods(
        request: Request,
        q: str = "",
        page: int = Query(default=1, ge=1),
    ) -> FoodSearchResponse:
        """Search foods with primary-then-fallback provider lookup."""
        state_container: AppContainer = request.app.state.container
        try:
            results = await state_container.food_search_service.search(q, page)
        except ProviderError as exc:
            logger.warning(
                "Food search failed on all providers",
                extra={"query": q, "page": page, "provider": exc.provider},
            )
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=_format_provider_error(state_container, exc),
            ) from exc
        return FoodSearchResponse(
            query=q.strip(),
            page=page,
            results=[SearchResultModel.from_result(result) for result in results],
        )

    return app


def _format_provider_error(state_container: AppContainer, exc: ProviderError) -> str:
    """Return a client-facing error with local debug info."""
    fallback = "Food search is temporarily unavailable."
    if state_container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        return f"{fallback} (debug: {detail})"
    return fallback
