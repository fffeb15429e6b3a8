import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.errors import register_error_handlers
from app.routers import posts
from app.settings import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    docs = app_settings.docs_enabled
    app = FastAPI(
        title=app_settings.APP_TITLE,
        description="Blog posts as typed content blocks",
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(posts.router, prefix=app_settings.API_PREFIX)

    @app.get("/")
    async def root():
        return {"message": "Rei Algo API is running"}

    logger.info(
        f"{app_settings.APP_TITLE} configured for {app_settings.ENVIRONMENT}; "
        f"CORS origins: {app_settings.CORS_ALLOWED_ORIGINS}"
    )
    return app


app = create_app()
