import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workshophub.api.v1 import attendance, auth, certificates, feedback, materials, registrations, users, workshops
from workshophub.core import messages
from workshophub.core.config import settings
from workshophub.core.exceptions import WorkshopHubError
from workshophub.core.logging import configure_logging
from workshophub.middleware.logging import LoggingMiddleware


logger = logging.getLogger("workshophub.main")


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        field = ".".join(str(p) for p in error.get("loc", ())[1:])
        parts.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(WorkshopHubError)
    async def _domain_error_handler(request: Request, exc: WorkshopHubError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": messages.INTERNAL_ERROR},
        )


def create_app() -> FastAPI:
    configure_logging(debug=settings.DEBUG)

    app = FastAPI(
        title="WorkshopHub API",
        version="0.1.0",
    )

    # CORS middleware - must be added before other middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Middleware
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    # API routes
    prefix = settings.API_V1_PREFIX
    app.include_router(auth.router, prefix=prefix)
    app.include_router(users.router, prefix=prefix)
    app.include_router(workshops.router, prefix=prefix)
    app.include_router(registrations.router, prefix=prefix)
    app.include_router(attendance.router, prefix=prefix)
    app.include_router(feedback.router, prefix=prefix)
    app.include_router(materials.router, prefix=prefix)
    app.include_router(certificates.router, prefix=prefix)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "ok", "environment": settings.ENVIRONMENT}

    return app


app = create_app()


if __name__ == "__main__":
    import os
    import uvicorn

    uvicorn.run(
        "workshophub.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=settings.DEBUG,
    )
