"""
REST API main application.
Entry point for the FastAPI REST server.
"""

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rest_api.core import configure_cors, lifespan
from rest_api.routers.admin import router as admin_router
from rest_api.routers.attendance import router as attendance_router
from rest_api.routers.security import router as security_router
from shared.config.settings import settings
from shared.infrastructure.correlation import CorrelationIdMiddleware
from shared.infrastructure.db import get_db
from shared.utils.schemas import HealthOutput


app = FastAPI(
    title="RBAC Admin REST API",
    description="Role based access control and attendance administration API",
    version="0.1.0",
    lifespan=lifespan,
)

configure_cors(app)
app.add_middleware(CorrelationIdMiddleware)


# =============================================================================
# Health Check
# =============================================================================


@app.get("/api/health", response_model=HealthOutput)
def health_check() -> HealthOutput:
    """Basic health check endpoint."""
    return HealthOutput(
        status="healthy",
        service="rest-api",
        environment=settings.environment,
    )


@app.get("/api/health/detailed")
def detailed_health_check(db: Session = Depends(get_db)):
    """
    Health check that verifies the database selected for this request
    (X-DB-Provider header, or the configured default) answers.
    """
    checks = {
        "service": "rest-api",
        "environment": settings.environment,
        "dependencies": {},
    }

    try:
        db.execute(text("SELECT 1"))
        checks["dependencies"]["database"] = {"status": "healthy"}
    except SQLAlchemyError as e:
        checks["dependencies"]["database"] = {"status": "unhealthy", "error": str(e)}
        checks["status"] = "degraded"
        return JSONResponse(content=checks, status_code=503)

    checks["status"] = "healthy"
    return checks


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(security_router)
app.include_router(attendance_router)
app.include_router(admin_router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rest_api.main:app",
        host="0.0.0.0",
        port=settings.rest_api_port,
        reload=True,
    )
