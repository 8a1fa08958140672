import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from transport_booking.core.config import settings
from transport_booking.core.db import Base, engine, SessionLocal
from transport_booking.core.errors import register_error_handlers
from transport_booking.core.log import configure_logging, log_unhandled_task_errors
from transport_booking.routers.auth import router as auth_router
from transport_booking.routers.bookings import router as bookings_router
from transport_booking.routers.drivers import router as drivers_router
from transport_booking.routers.users import router as users_router
from transport_booking.routers.vehicles import router as vehicles_router
from transport_booking.services.seed import seed_demo_data
from transport_booking.web.router import STATIC_DIR, router as web_router

# Import models so SQLAlchemy registers them before create_all()
import transport_booking.models.user  # noqa: F401
import transport_booking.models.driver  # noqa: F401
import transport_booking.models.vehicle  # noqa: F401
import transport_booking.models.booking  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    try:
        Base.metadata.create_all(bind=engine)
        if settings.SEED_DEMO_DATA:
            with SessionLocal() as db:
                seed_demo_data(db, settings.DEMO_ACCOUNTS)
    except SQLAlchemyError as e:
        # keep serving: login still works against the demo accounts
        logger.error("Database connection failed: %s", e)
        return
    logger.info("Database connected successfully")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    asyncio.get_running_loop().set_exception_handler(log_unhandled_task_errors)
    init_db()
    logger.info("Server running on http://localhost:%s", settings.PORT)
    logger.info("Navigate to: http://localhost:%s/login.html", settings.PORT)

    yield

    engine.dispose()


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(auth_router)
app.include_router(bookings_router)
app.include_router(vehicles_router)
app.include_router(users_router)
app.include_router(drivers_router)
app.include_router(web_router)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/health")
def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    # uvicorn exits non-zero if the port is already taken
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
