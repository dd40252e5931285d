from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker


def _normalize_database_url(raw_url: str) -> str:
    url = (raw_url or "").strip()
    if not url:
        raise ValueError("DATABASE_URL is empty")
    if "://" not in url:
        # bare filesystem path
        url = f"sqlite:///{Path(url).expanduser()}"
    return url


def _ensure_sqlite_parent(url: str) -> None:
    database = make_url(url).database
    if not database or database == ":memory:" or database.startswith("file:"):
        return
    Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


def create_store_engine(raw_url: str, echo: bool = False) -> Engine:
    url = _normalize_database_url(raw_url)
    if not url.startswith("sqlite"):
        raise ValueError(f"Only sqlite databases are supported, got {url!r}")

    _ensure_sqlite_parent(url)
    engine = create_engine(url, future=True, echo=echo, connect_args={"check_same_thread": False})
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True, expire_on_commit=False)
