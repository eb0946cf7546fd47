from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, Response
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from api.bootstrap import AppDependencies, build_dependencies
from api.config import get_settings
from api.routes.model_routes import model_routes
from api.routes.plan_routes import plan_routes
from api.schemas.plan_schemas import HealthResponse
from api.services.plan_service import MissingFieldsError, PlanNotFoundError, PlanService
from api.utils.common import iso_format, utc_now
from api.utils.logger import clear_request_id, configure_logging, set_request_id

SERVER_NAME = "study-plan-generator"
VERSION = "1.0.0"

logger = configure_logging()


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error, **extra})


def create_app(deps: Optional[AppDependencies] = None) -> FastAPI:
    """
    Build the app. When `deps` is None the providers and store are built from
    settings at startup; tests pass their own.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "plan_service", None) is None:
            built = build_dependencies(get_settings())
            app.state.plan_service = PlanService(built.llms, built.store, built.min_plan_chars)
        yield

    app = FastAPI(title="Study Plan Generator", version=VERSION, lifespan=lifespan)
    if deps is not None:
        app.state.plan_service = PlanService(deps.llms, deps.store, deps.min_plan_chars)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logger(request: Request, call_next):
        rid = set_request_id(request.headers.get("x-request-id"))
        try:
            logger.info("request start method=%s path=%s client=%s", request.method, request.url.path, request.client)
            response: Response = await call_next(request)
            logger.info("request end status=%s method=%s path=%s", response.status_code, request.method, request.url.path)
            response.headers["x-request-id"] = rid
            return response
        except Exception:
            logger.exception("request error method=%s path=%s", request.method, request.url.path)
            raise
        finally:
            clear_request_id()

    @app.exception_handler(MissingFieldsError)
    async def missing_fields_handler(request: Request, exc: MissingFieldsError) -> JSONResponse:
        logger.warning("validation error path=%s missing=%s", request.url.path, exc.fields)
        return _error(HTTP_400_BAD_REQUEST, str(exc), missing=exc.fields)

    @app.exception_handler(PlanNotFoundError)
    async def plan_not_found_handler(request: Request, exc: PlanNotFoundError) -> JSONResponse:
        logger.info("plan not found id=%s", exc.plan_id)
        return _error(HTTP_404_NOT_FOUND, "Not found")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unmatched routes land here as 404s; a known path with the wrong method is a 404 too.
        if exc.status_code >= 500:
            logger.error("http error status=%s method=%s path=%s detail=%s", exc.status_code, request.method, request.url.path, exc.detail)
        else:
            logger.warning("http error status=%s method=%s path=%s detail=%s", exc.status_code, request.method, request.url.path, exc.detail)
        if exc.status_code in (HTTP_404_NOT_FOUND, HTTP_405_METHOD_NOT_ALLOWED):
            return _error(HTTP_404_NOT_FOUND, "Not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("validation error method=%s path=%s errors=\n%s", request.method, request.url.path, exc.errors())
        return _error(422, "Invalid request body", detail=jsonable_encoder(exc.errors()))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # Never leak internal exception details to clients.
        logger.exception("unhandled error method=%s path=%s", request.method, request.url.path)
        return _error(HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(server=SERVER_NAME, version=VERSION, timestamp=iso_format(utc_now()))

    app.include_router(plan_routes)
    app.include_router(model_routes)
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
