from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.infrastructure.database import engine, initialize_database
from app.infrastructure.delivery import shutdown_delivery_dispatcher
from app.infrastructure.scheduler import start_scheduler, stop_scheduler
from app.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database and reminder scheduler, then release them on shutdown."""

    initialize_database()
    start_scheduler()
    yield
    stop_scheduler()
    shutdown_delivery_dispatcher()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Study Group Reminders API", lifespan=lifespan)

    # Web client served by the Vite dev server.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
