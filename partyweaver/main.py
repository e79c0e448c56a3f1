import asyncio
import logging
from contextlib import asynccontextmanager

import sentry_sdk
from alembic import command
from alembic.config import Config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from partyweaver.auth.routers import router as auth_router
from partyweaver.config.logging import setup_logging
from partyweaver.config.settings import settings
from partyweaver.events.routers import router as events_router
from partyweaver.invitations.router import router as invitations_router
from partyweaver.routers.healthz.router import router as healthz_router
from partyweaver.rsvp.routers import router as rsvp_router

setup_logging()
logger = logging.getLogger(__name__)


async def run_migrations():
    alembic_cfg = Config("alembic.ini")
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        logger.info("Running database migrations")
        await run_migrations()
    yield


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Party Weaver API",
    description="API for hosting events, inviting guests and collecting RSVPs",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=settings.cors_allow_headers,
)

# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(auth_router, tags=["Auth"])
app.include_router(events_router, tags=["Events"])
app.include_router(rsvp_router, tags=["RSVP"])
app.include_router(invitations_router, tags=["Invitations"])


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Party Weaver API"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("partyweaver.main:app", host=settings.app_host, port=settings.app_port)
