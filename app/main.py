import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from app.api.rest_routes.modules import router as modules_router
from app.api.rest_routes.selection import router as selection_router
from app.core.config import Settings, settings
from app.services.gemini_gateway import build_gateway
from app.services.module_controller import AdvisoryGateway, ControllerRegistry
from app.services.module_selector import ModuleSelector

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    gateway: Optional[AdvisoryGateway] = None,
) -> FastAPI:
    app_settings = app_settings or settings
    logging.basicConfig(
        level=app_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.gateway = gateway or build_gateway(app_settings)
        app.state.registry = ControllerRegistry(app.state.gateway)
        app.state.selector = ModuleSelector()
        logger.info("AgroConecta advisory modules ready: %d", len(app.state.registry.controllers))
        yield

    app = FastAPI(title="AgroConecta Perú AI", lifespan=lifespan)
    app.include_router(modules_router)
    app.include_router(selection_router)

    @app.get("/")
    async def root():
        return {"message": "Bienvenido a AgroConecta Perú AI!"}

    return app


app = create_app()
