from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import get_settings
from app.db.session import dispose_engine
from app.api.routers import upload as upload_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        debug=settings.debug,
        title="Typebot Builder API",
        lifespan=lifespan,
    )

    app.include_router(upload_router.router)

    return app


app = create_app()
