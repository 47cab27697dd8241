"""FastAPI application exposing the lint engine over HTTP."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..commit import DEFAULT_COMMENT_CHAR, CommitMessage
from ..engine import exit_code_for, lint_async
from ..lints import Lint, Lints, UnknownLintsError
from ..logging import configure_logging, get_logger
from ..models import Problem

_LOGGER = get_logger("service")


class LintRequest(BaseModel):
    message: str
    lints: Optional[List[str]] = None
    comment_char: str = DEFAULT_COMMENT_CHAR


class AnnotationModel(BaseModel):
    label: str
    offset: int
    length: int
    line: int


class ProblemModel(BaseModel):
    title: str
    description: str
    code: str
    exit_code: int
    annotations: List[AnnotationModel]
    help_url: Optional[str] = None


class LintResponse(BaseModel):
    problems: List[ProblemModel]
    exit_code: int


class LintInfo(BaseModel):
    name: str
    config_key: str
    enabled_by_default: bool


class LintsResponse(BaseModel):
    lints: List[LintInfo]


class HealthResponse(BaseModel):
    status: str


def create_app(default_lints: Callable[[], Lints] = Lints.defaults) -> FastAPI:
    """Create the FastAPI application.

    ``default_lints`` supplies the selection used when a request does not
    name its own lints.
    """

    app = FastAPI(title="mit-lint", version="3.4.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/lints", response_model=LintsResponse)
    async def list_lints() -> LintsResponse:
        return LintsResponse(
            lints=[
                LintInfo(
                    name=lint.value,
                    config_key=lint.config_key,
                    enabled_by_default=lint.enabled_by_default,
                )
                for lint in Lint
            ]
        )

    @app.post("/lint", response_model=LintResponse)
    async def lint_message(payload: LintRequest) -> LintResponse:
        if payload.lints is None:
            selection = default_lints()
        else:
            selection, _ = Lints.from_names(payload.lints, strict=True)
        message = CommitMessage.from_text(payload.message, comment_char=payload.comment_char)
        problems = await lint_async(message, selection)
        _LOGGER.debug("Service lint run found %d problems", len(problems))
        return LintResponse(
            problems=[_problem_model(problem) for problem in problems],
            exit_code=exit_code_for(problems),
        )

    @app.exception_handler(UnknownLintsError)
    async def unknown_lints_handler(_: Any, exc: UnknownLintsError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "unknown": [error.name for error in exc.errors]},
        )

    return app


def _problem_model(problem: Problem) -> ProblemModel:
    return ProblemModel(**problem.to_dict())


def run_service(host: str = "127.0.0.1", port: int = 8000, *, verbose: bool = False) -> None:
    """Serve the API with uvicorn; ``verbose`` turns on per-request debug logging."""
    try:
        import uvicorn
    except ModuleNotFoundError as exc:
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install mit-lint[service]`."
        ) from exc

    configure_logging(verbose=verbose)
    _LOGGER.info("Serving mit-lint on http://%s:%d", host, port)
    uvicorn.run(create_app(), host=host, port=port, log_level="debug" if verbose else "warning")
