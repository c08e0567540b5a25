"""FastAPI application exposing a README generation session over HTTP."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import RepoDocConfig, load_config
from ..github import GitHubClient
from ..logging import get_logger
from ..workflow import InvalidTransition, WorkflowController, WorkflowState


class SubmitRequest(BaseModel):
    identifier: str


class SessionResponse(BaseModel):
    phase: str
    submitted: Optional[str] = None
    identifier: Optional[str] = None
    repository: Optional[Dict[str, Any]] = None
    document: Optional[str] = None
    error: Optional[str] = None
    notice: Optional[str] = None
    generation: int = 0


class HealthResponse(BaseModel):
    status: str


def _default_controller(config: RepoDocConfig | None = None) -> WorkflowController:
    config = config or load_config()
    return WorkflowController(
        GitHubClient.from_config(config.github),
        pacing_delay=config.workflow.pacing_delay,
    )


def _project(state: WorkflowState) -> SessionResponse:
    return SessionResponse(**state.to_dict())


def create_app(
    controller_factory: Callable[[], WorkflowController] = _default_controller,
) -> FastAPI:
    """Create the FastAPI application backing a single generation session."""

    app = FastAPI(title="repodoc", version="1.0.0")
    controller = controller_factory()
    app.state.controller = controller
    logger = get_logger("service")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/session", response_model=SessionResponse)
    async def session() -> SessionResponse:
        return _project(controller.state)

    @app.post("/session/submit", response_model=SessionResponse)
    async def submit(payload: SubmitRequest) -> SessionResponse:
        logger.info("Submit requested for %r", payload.identifier)
        return _project(await controller.submit(payload.identifier))

    @app.post("/session/retry", response_model=SessionResponse)
    async def retry() -> SessionResponse:
        return _project(await controller.retry())

    @app.post("/session/regenerate", response_model=SessionResponse)
    async def regenerate() -> SessionResponse:
        return _project(await controller.regenerate())

    @app.post("/session/start-over", response_model=SessionResponse)
    async def start_over() -> SessionResponse:
        return _project(controller.start_over())

    @app.exception_handler(InvalidTransition)
    async def invalid_transition_handler(_: Any, exc: InvalidTransition) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={"detail": str(exc), "phase": controller.state.phase.value},
        )

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, *, config: RepoDocConfig | None = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(lambda: _default_controller(config))
    uvicorn.run(app, host=host, port=port)


__all__ = ["create_app", "run_service"]
