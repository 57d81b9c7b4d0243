
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sitetrack.core.config import settings

engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    connect_args={"check_same_thread": False} if settings.USE_SQLITE else {}
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    # Import every model module so create_all sees the full metadata
    import sitetrack.db.models.user  # noqa: F401
    import sitetrack.db.models.client  # noqa: F401
    import sitetrack.db.models.project  # noqa: F401
    import sitetrack.db.models.visit  # noqa: F401
    import sitetrack.db.models.photo  # noqa: F401
    import sitetrack.db.models.assignment  # noqa: F401
    import sitetrack.db.models.storage  # noqa: F401
    from sitetrack.db.base import Base

    Base.metadata.create_all(bind=bind or engine)
