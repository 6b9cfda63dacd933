import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from .core.config import settings
from .core.cors import setup_cors
from .core.logging import setup_logging
from .api.v1.routers import quizzes as quizzes_router
from .api.v1.routers import dispatch as dispatch_router
from .repositories.quiz_repository import QuizRepository, load_repository
from .services.webhook import WebhookDispatcher

logger = logging.getLogger(__name__)


def create_app(
    repository: QuizRepository | None = None,
    dispatcher: WebhookDispatcher | None = None,
) -> FastAPI:
    """
    Builds the application around an explicitly supplied quiz store.

    When ``repository`` is omitted the dataset at ``settings.QUIZ_DATA_PATH``
    is loaded on startup; a missing, malformed or empty dataset aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "quiz_repository", None) is None:
            app.state.quiz_repository = load_repository(settings.QUIZ_DATA_PATH)
        logger.info("%s ready with %d quiz entries", settings.APP_NAME, len(app.state.quiz_repository))
        yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.quiz_repository = repository
    app.state.webhook_dispatcher = dispatcher or WebhookDispatcher()
    setup_cors(app)

    app.include_router(quizzes_router.router, prefix=settings.API_V1_PREFIX)
    app.include_router(dispatch_router.router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root():
        return {"message": "Hello, World."}

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


setup_logging(settings.LOG_LEVEL)
app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.BACKEND_HOST, port=settings.BACKEND_PORT)
