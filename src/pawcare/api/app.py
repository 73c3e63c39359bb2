"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pawcare.api.breeds import router as breeds_router
from pawcare.app_logging import configure_logging
from pawcare.containers import AppContainer
from pawcare.domain.breeds import BreedNotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(breeds_router)

    @app.exception_handler(BreedNotFoundError)
    async def breed_not_found(
        request: Request, exc: BreedNotFoundError
    ) -> JSONResponse:
        logger.info("Breed lookup failed for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Breed information unavailable"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
