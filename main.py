import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from push_dispatch.config import get_settings
from push_dispatch.infrastructure.database import engine, initialize_database
from push_dispatch.interfaces.api.routes import register_routes
from push_dispatch.runtime import PushRuntime, build_runtime


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(runtime: PushRuntime | None = None) -> FastAPI:
    """Create and configure the push dispatch application.

    When ``runtime`` is omitted the lifespan builds one from the settings,
    creates the tables and disposes of the engine on shutdown.
    """

    settings = get_settings()
    _configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_runtime = runtime is None
        if owns_runtime:
            initialize_database()
        app.state.runtime = runtime or build_runtime(settings)
        app.state.runtime.start()
        try:
            yield
        finally:
            app.state.runtime.shutdown()
            if owns_runtime:
                engine.dispose()

    app = FastAPI(title="Push Dispatch", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
