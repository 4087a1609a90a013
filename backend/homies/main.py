"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from homies.config import settings
from homies.database import Base, SessionLocal, engine
from homies.errors import HomiesError, ValidationError
from homies.services.seed import default_event_type_names, seed_event_types

# Import routers
from homies.routers import events, event_types

# Import all models so Base.metadata knows about them
from homies.models.user import User                          # noqa: F401
from homies.models.event_type import EventType               # noqa: F401
from homies.models.event import Event                        # noqa: F401
from homies.models.event_participant import EventParticipant  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Homies",
    description="Event coordination — browse, join and organise events",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(event_types.router, prefix="/api/types", tags=["Types"])


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    """Send the field messages back together with the submitted form."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "errors": exc.errors,
            "form": exc.form.model_dump() if exc.form is not None else None,
        },
    )


@app.exception_handler(HomiesError)
async def handle_homies_error(request: Request, exc: HomiesError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.on_event("startup")
def on_startup():
    """Create tables and seed event types on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
        logger.info("Ensured tables exist on %s", engine.url.render_as_string(hide_password=True))
        db = SessionLocal()
        try:
            seed_event_types(db, default_event_type_names())
        finally:
            db.close()


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
