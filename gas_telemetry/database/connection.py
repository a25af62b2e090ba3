from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from gas_telemetry.config import get_config
from gas_telemetry.logger import CustomLogger

console = CustomLogger(name="database_logs")

Base = declarative_base()

# One engine (and its connection pool) per process, built on first use.
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def get_engine() -> AsyncEngine:
    global _engine, _session_factory
    if _engine is None:
        settings = get_config().database
        _engine = create_async_engine(
            settings["url"],
            echo=settings["echo"],
            pool_size=settings["pool_size"],
            max_overflow=settings["max_overflow"],
            pool_timeout=settings["pool_timeout"],
            pool_recycle=settings["pool_recycle"],
            pool_pre_ping=True,
        )
        _session_factory = async_sessionmaker(bind=_engine, class_=AsyncSession, expire_on_commit=False)
        console.log(
            "Database engine created",
            host=_engine.url.host,
            database=_engine.url.database,
            pool_size=settings["pool_size"],
        )
    return _engine


def get_session_factory() -> async_sessionmaker:
    get_engine()
    return _session_factory


async def init_db():
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine():
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        console.log("Database engine disposed")
    _engine = None
    _session_factory = None


# --- Dependency for FastAPI ---
async def get_db_async() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        yield session
