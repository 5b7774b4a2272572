from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from schooladmin.config import DATABASE_URL

Base = declarative_base()

if DATABASE_URL.startswith("sqlite"):
    # requests are served from a thread pool
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
