# salon/db.py

import logging
import os

from sqlmodel import SQLModel, create_engine, Session

from .repository import SalonStore

logger = logging.getLogger(__name__)

# SQLite database (file-based)
DATABASE_URL = os.getenv("SALON_DATABASE_URL", "sqlite:///./salon.db")

# Engine = connection to the database
engine = create_engine(
    DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},  # required for SQLite + FastAPI
)


def init_db(bind=None):
    """Create the tables and load the seed staff/shifts into an empty database."""
    bind = bind or engine
    SQLModel.metadata.create_all(bind)
    with Session(bind) as session:
        SalonStore(session).seed()
    logger.info("Database ready at %s", bind.url)


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session
