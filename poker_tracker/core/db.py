from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

from poker_tracker.core.config import DATABASE_URL

# Render-style URLs come as postgres://, but SQLAlchemy needs postgresql://
# Also ensure we're using the psycopg driver (not psycopg2)
database_url = DATABASE_URL
if database_url.startswith("postgres://"):
    database_url = database_url.replace("postgres://", "postgresql+psycopg://", 1)
elif database_url.startswith("postgresql://") and "+psycopg" not in database_url:
    database_url = database_url.replace("postgresql://", "postgresql+psycopg://", 1)

logger.info(f"Initializing storage engine with URL: {database_url.split('@')[-1]}")
if database_url.startswith("sqlite"):
    engine = create_engine(database_url, connect_args={"check_same_thread": False})
else:
    engine = create_engine(database_url)


def create_db_and_tables(bind: Engine | None = None) -> None:
    """Create storage tables from SQLModel metadata."""
    logger.info("Creating storage tables from SQLModel metadata...")
    SQLModel.metadata.create_all(bind or engine)
    logger.success("Storage tables created successfully")
