import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from foyer.core.config import settings
from foyer.core.logging_config import setup_logging
from foyer.db.base import Base
from foyer.db.session import engine
from foyer.exceptions import ApplicationError
from foyer.routers import university
from foyer.schemas.response import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.db_auto_create:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured")
    yield


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.from_error(exc).model_dump(),
        )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(university.router, prefix=f"{settings.api_prefix}/university", tags=["university"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("foyer.main:app", host=settings.host, port=settings.port)
