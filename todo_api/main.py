"""FastAPI application entry point"""
import logging
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from todo_api.infrastructure.config.settings import settings
from todo_api.infrastructure.repositories.todo_repository_impl import TodoRepositoryImpl
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.presentation.api.v1.routers import todos


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    print(f"🚀 Initializing {settings.APP_NAME}...")
    print(f"✅ Server started on port {settings.PORT}")

    try:
        yield
    finally:
        # In-memory todos are discarded with the repository
        print(f"👋 Shutting down application, dropping {app.state.todo_repository.count()} todos...")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render HTTP errors as a bare status line"""
    return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))


def create_app(repository: Optional[TodoRepository] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        repository: Todo store to serve; a fresh in-memory one when omitted

    Returns:
        Configured application
    """
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    application.state.todo_repository = repository if repository is not None else TodoRepositoryImpl()

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Include routers
    application.include_router(todos.router, prefix=settings.API_PREFIX)

    return application


# Create FastAPI app
app = create_app()


def logging_level(log_level: str) -> str:
    """Map a uvicorn log level name to a stdlib logging level name"""
    level = log_level.upper()
    # uvicorn's "trace" sits below DEBUG and is unknown to logging
    return "DEBUG" if level == "TRACE" else level


def run() -> None:
    """Serve the application with uvicorn"""
    logging.basicConfig(level=logging_level(settings.LOG_LEVEL))
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
