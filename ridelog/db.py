from typing import Optional
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session
from pathlib import Path

from .config import Settings
from .errors import StorageError


def build_engine(url: Optional[str] = None, settings: Optional[Settings] = None) -> Engine:
    settings = settings or Settings.from_env()
    url = (url or settings.database_url or "").strip()
    if url:
        return create_engine(url)

    # Fallback: SQLite file, relative to the working directory unless absolute
    db_path = Path(settings.db_path).expanduser()
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"cannot create database directory {db_path.parent}: {e}") from e
    return create_engine(f"sqlite:///{db_path}")


def init_db(engine: Engine) -> None:
    from .models import RideRecord  # noqa: F401  registers the table
    SQLModel.metadata.create_all(engine)


def get_session(engine: Engine) -> Session:
    return Session(engine)
