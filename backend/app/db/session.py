"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support for MySQL.
"""

import ssl
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from backend.app.core.config import settings


def build_connect_args(url, use_ssl: bool, verify: bool) -> dict:
    """
    Driver connect arguments for the configured database.

    The hosted MySQL instance requires TLS but presents a certificate that
    does not verify, so verification is off unless DB_SSL_VERIFY is set.
    """
    if not use_ssl or make_url(url).get_backend_name() != "mysql":
        return {}

    context = ssl.create_default_context()
    if not verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return {"ssl": context}


# Create async engine (pooled; one session per request)
engine = create_async_engine(
    settings.sqlalchemy_url,
    echo=settings.db_echo,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=True,
    connect_args=build_connect_args(
        settings.sqlalchemy_url, settings.db_ssl, settings.db_ssl_verify
    ),
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()


async def get_db():
    """
    FastAPI dependency for database sessions.

    Yields an async database session. The connection goes back to the pool
    on every exit path; uncommitted work is rolled back on close.
    """
    async with AsyncSessionLocal() as session:
        yield session
