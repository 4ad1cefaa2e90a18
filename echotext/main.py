# echotext/main.py

from typing import Optional

from fastapi import FastAPI

from echotext.config import Settings, get_settings
from echotext.middleware.error_handler import ErrorHandlerMiddleware, setup_exception_handlers
from echotext.observability.logger import configure_logging
from echotext.routers.health import VERSION, router as health_router
from echotext.routers.share import router as share_router
from echotext.utils.logger import log_info


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API. The settings instance is owned by the app for its lifetime."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="EchoText Share API",
        description="Encode text effect configurations into shareable URL tokens and back",
        version=VERSION,
    )
    app.state.settings = settings
    # Routes resolve settings through Depends(get_settings); point it at ours
    app.dependency_overrides[get_settings] = lambda: settings

    # Error handler should be outermost to catch all errors
    app.add_middleware(ErrorHandlerMiddleware, debug=settings.DEBUG)
    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(share_router, prefix="/api")

    log_info(f"app created origin={settings.PUBLIC_ORIGIN}")
    return app


def run(settings: Optional[Settings] = None) -> None:
    import uvicorn

    settings = settings or get_settings()
    app = create_app(settings)
    log_info(f"Server starting at http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
