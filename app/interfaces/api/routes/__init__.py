from fastapi import FastAPI

from .auth import router as auth_router
from .bookings import router as bookings_router
from .churches import router as churches_router
from .complaints import router as complaints_router
from .events import router as events_router
from .health import router as health_router
from .notifications import router as notifications_router
from .services import router as services_router
from .transactions import router as transactions_router
from .users import router as users_router


def register_routes(app: FastAPI, *, prefix: str = "") -> None:
    """Register every API router under ``prefix``."""

    app.include_router(health_router, prefix=prefix)
    app.include_router(auth_router, prefix=prefix)
    app.include_router(churches_router, prefix=prefix)
    app.include_router(users_router, prefix=prefix)
    app.include_router(notifications_router, prefix=prefix)
    app.include_router(services_router, prefix=prefix)
    app.include_router(bookings_router, prefix=prefix)
    app.include_router(transactions_router, prefix=prefix)
    app.include_router(events_router, prefix=prefix)
    app.include_router(complaints_router, prefix=prefix)
