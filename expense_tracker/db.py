from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from expense_tracker.core.settings import settings
from expense_tracker.models import Base


def make_engine(url: str):
    # SQLite connections are shared with the threadpool FastAPI runs sync work in
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    # pool_pre_ping/pool_recycle guard against dropped/stale connections causing OperationalError
    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,
        pool_recycle=300,
    )


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Alembic owns the schema outside development
def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)
