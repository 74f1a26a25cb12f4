"""
ModCatalog Backend - FastAPI Application

A catalog of user-submitted game mods and the accounts that author or favorite them.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorDatabase

from modcatalog.config import get_settings
from modcatalog.core.logging import get_logger, setup_logging
from modcatalog.database.connections import mongo_session
from modcatalog.database.registry import create_indexes
from modcatalog.routers import accounts, catalog, health, mods
from modcatalog.stores.account_store import AccountStore
from modcatalog.stores.mod_store import ModStore

logger = get_logger("main")


async def seed_dummy_data(db: AsyncIOMotorDatabase, num_mods: int) -> None:
    """Insert fixture accounts and mods into an empty catalog."""
    await AccountStore(db).insert_dummy_accounts()
    mod_store = ModStore(db)
    await mod_store.insert_default()
    await mod_store.insert_dummy_mods(num_mods)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Create indexes
    - Insert fixture data when enabled
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting up ModCatalog Backend...")

    try:
        async with mongo_session() as db:
            await create_indexes(db)
            if settings.seed_dummy_data:
                await seed_dummy_data(db, settings.dummy_mod_count)
        logger.info("Indexes created")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")

    yield

    logger.info("Shutting down ModCatalog Backend...")


app = FastAPI(
    title="ModCatalog API",
    description="""
## Game Mod Catalog API

Upload, browse and rate mods for supported games.

### Features
- **Mods**: Upload, replace, delete and search mods (exact or regex filters)
- **Engagement**: Views, likes, comments and tag editing
- **Accounts**: Signup, password change and favorite mods
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # Development frontend
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(mods.router)
app.include_router(accounts.router)
app.include_router(catalog.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "ModCatalog API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
