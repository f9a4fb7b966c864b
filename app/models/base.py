# studio_kasse/app/models/base.py
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import settings as app_settings

Base = declarative_base()


def _normalize_url(url: str) -> str:
    # Hosting-Anbieter liefern oft noch "postgres://"
    if url.startswith("postgres://"):
        return "postgresql+psycopg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    return url


def build_engine(url: str | None = None) -> Engine:
    url = _normalize_url(url or app_settings.DATABASE_URL)
    timeout = app_settings.DB_TIMEOUT_SECONDS

    # SQLite: Pfad absolut machen und Ordner sicherstellen
    if url.startswith("sqlite:///"):
        rel = url[len("sqlite:///"):]  # z. B. ./db/studio.db
        db_file = Path(rel)
        if not db_file.is_absolute():
            db_file = Path.cwd() / db_file
        db_file.parent.mkdir(parents=True, exist_ok=True)
        abs_url = f"sqlite:///{db_file.as_posix()}"
        return create_engine(
            abs_url,
            connect_args={"check_same_thread": False, "timeout": timeout},  # nur für SQLite
            future=True,
            pool_pre_ping=True,
        )

    # Postgres: Verbindungs- und Statement-Timeout begrenzen
    connect_args: dict[str, Any] = {
        "connect_timeout": timeout,
        "options": f"-c statement_timeout={timeout * 1000}",
    }
    if app_settings.is_production():
        connect_args["sslmode"] = "require"
    return create_engine(
        url,
        connect_args=connect_args,
        future=True,
        pool_pre_ping=True,
        pool_timeout=timeout,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Alles oder nichts: commit bei Erfolg, rollback bei jedem Fehler."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def as_dict(obj: Any) -> dict:
    """Spalten einer ORM-Zeile als dict (fuer JSON-Antworten)."""
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns}
