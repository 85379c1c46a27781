"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from group_api.config import settings
from group_api.database import Base, engine
from group_api.errors import register_exception_handlers

# Import routers
from group_api.routers import auth, groups, events

# Import all models so Base.metadata knows about them
from group_api.models.user import User              # noqa: F401
from group_api.models.event import Event            # noqa: F401
from group_api.models.group import Group, GroupEvent  # noqa: F401

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(
    title="Group API",
    description="Groups with owner-only mutation, behind bearer-token authentication",
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

register_exception_handlers(app)

# Register routers
app.include_router(auth.router, tags=["Auth"])
app.include_router(groups.router, prefix="/groups", tags=["Groups"])
app.include_router(events.router, prefix="/events", tags=["Events"])


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/health")
def health_check():
    return {"status": "ok"}
