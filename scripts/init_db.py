import logging

from foyer.core.logging_config import setup_logging
from foyer.db.base import Base
from foyer.db.session import engine
from foyer.models import University  # noqa: F401

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created: %s", ", ".join(Base.metadata.tables))


if __name__ == "__main__":
    main()
