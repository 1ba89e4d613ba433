from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from taskapi.app.config import get_settings


DATABASE_URL = get_settings().database_url

# SQLite requires check_same_thread=False for usage across threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None) -> None:
    """Create the tasks table if it does not exist yet."""

    from taskapi.app import models  # noqa: F401  (registers tables on Base)

    Base.metadata.create_all(bind=bind or engine)
