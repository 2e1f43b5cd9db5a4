from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from lightbnb.core.config import settings

db_url = settings.DATABASE_URL

# Pool único para todo o processo, criado no import
engine = create_engine(
    db_url,
    # "check_same_thread" só existe no SQLite
    connect_args={"check_same_thread": False} if db_url.startswith("sqlite") else {},
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def as_record(obj) -> dict:
    """Converte um objeto ORM num dict simples com as colunas da tabela"""
    return {column.key: getattr(obj, column.key) for column in obj.__table__.columns}
