"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from meal_plan_insights.api.plans import router as plans_router
from meal_plan_insights.app_logging import configure_logging
from meal_plan_insights.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Meal Plan Insights")
    app.state.container = container

    app.include_router(plans_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Meal plan insights API ready (environment=%s)",
        container.settings.environment,
    )
    return app
