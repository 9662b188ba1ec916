"""Database engine and session factory for the course catalog."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fairwayfinder.config import settings

engine = create_async_engine(settings.database_url, echo=False)

# Sessions are opened per catalog lookup, both in requests and in background jobs
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)
