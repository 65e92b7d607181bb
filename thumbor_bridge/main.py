from typing import Optional
from fastapi import FastAPI
from thumbor_bridge.api.urls import router
from thumbor_bridge.core.logger import configure_logging
from thumbor_bridge.core.settings import get_settings
from thumbor_bridge.services.thumbor_service import ThumborService


def create_app(service: Optional[ThumborService] = None) -> FastAPI:
    if service is None:
        service = ThumborService(get_settings())
    configure_logging(service.settings.log_level)

    app = FastAPI(title="thumbor-bridge")
    app.state.thumbor = service
    app.include_router(router)
    return app
