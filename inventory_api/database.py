# inventory_api/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from inventory_api.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

if "sqlite" in SQLALCHEMY_DATABASE_URL:
    connect_args = {"check_same_thread": False}  # SQLite only
else:
    connect_args = {}

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def init_db():
    # Models must be imported so their tables are registered on the metadata
    import inventory_api.models.product  # noqa: F401
    import inventory_api.models.stock  # noqa: F401
    import inventory_api.models.users  # noqa: F401

    Base.metadata.create_all(bind=engine)
