from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

load_dotenv()

# IMPORT ROUTERS
from rfp_scoring.config import settings
from rfp_scoring.core.exceptions import ScoringException
from rfp_scoring.core.logging import configure_logging
from rfp_scoring.routers.errors import scoring_exception_handler, validation_exception_handler
from rfp_scoring.routers.health import router as health_router
from rfp_scoring.routers.prequalification import router as prequalification_router
from rfp_scoring.routers.scoring import router as scoring_router

configure_logging(settings)


# SWAGGER UI — tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Scoring"},
    {"name": "Prequalification"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ScoringException, scoring_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)           # Health
app.include_router(scoring_router)          # Rubric validation / submission summary / consensus
app.include_router(prequalification_router) # Prequalification


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "rfp_scoring.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
