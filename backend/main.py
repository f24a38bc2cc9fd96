import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from core.config import Settings, settings
from core.error_handlers import register_error_handlers
from core.observability import setup_logging
from db.database import Database
from routers.drinks import router as drinks_router
from routers.ingredients import router as ingredients_router

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings, database: Optional[Database] = None) -> FastAPI:
    """Build the API around one storage handle.

    The handle is connected when the app starts and closed when it stops.
    """
    database = database or Database(app_settings.mongo_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(app_settings.log_level, app_settings.log_format)
        await database.connect()
        logger.info("Drinks API started")
        try:
            yield
        finally:
            database.close()
            logger.info("Drinks API shut down")

    app = FastAPI(
        title="drinks.wiki api docs",
        description=app_settings.api_description,
        version=app_settings.api_version,
        docs_url="/docs",
        redoc_url=None,
        openapi_tags=[
            {
                "name": "drinks",
                "description": "Cocktails and their recipes",
                "externalDocs": {"url": app_settings.api_homepage, "description": "Find more info here"},
            },
            {
                "name": "ingredients",
                "description": "Ingredients used by drinks",
                "externalDocs": {"url": app_settings.api_homepage, "description": "Find more info here"},
            },
        ],
        lifespan=lifespan,
    )
    app.state.db = database
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(drinks_router, prefix="/drinks", tags=["drinks"])
    # No prefix: list is /ingredients, detail is the singular /ingredient/{id}
    app.include_router(ingredients_router, tags=["ingredients"])

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port)
