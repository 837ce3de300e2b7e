import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1.routes.analytics import router as analytics_router
from app.api.v1.routes.flights import router as flights_router
from app.api.v1.routes.health import router as health_router
from app.api.v1.routes.predictions import router as predictions_router
from app.api.v1.routes.reference import router as reference_router
from app.api.v1.routes.reports import router as reports_router
from app.core.config import settings
from app.core.logging import configure_logging_if_needed

configure_logging_if_needed()
logger = logging.getLogger(__name__)

app = FastAPI(title="Aviation Reliability Tracker API")

# Defaults to allow-all so the dashboard frontend can call the API directly.
# Set CORS_ALLOW_ORIGINS to tighten this.
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/v1")
app.include_router(predictions_router)
app.include_router(flights_router)
app.include_router(reference_router)
app.include_router(analytics_router)
app.include_router(reports_router)


@app.exception_handler(SQLAlchemyError)
async def db_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=503,
        content={
            "error": "Database unavailable",
            "detail": str(exc),
            "status_code": 503,
        },
    )
