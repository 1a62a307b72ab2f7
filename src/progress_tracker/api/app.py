"""FastAPI application factory."""

from fastapi import FastAPI

from progress_tracker.api.progress import router as progress_router
from progress_tracker.app_logging import configure_logging
from progress_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    app = FastAPI()
    app.state.container = container

    app.include_router(progress_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
