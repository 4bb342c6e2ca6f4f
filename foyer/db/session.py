from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from foyer.core.config import settings


def build_engine(url: str | None = None, echo: bool | None = None):
    url = url or settings.database_url
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=settings.db_echo if echo is None else echo,
        )
    return create_engine(
        url,
        echo=settings.db_echo if echo is None else echo,
        pool_pre_ping=True,  # MySQL drops idle connections
        pool_recycle=3600,
    )


engine = build_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
