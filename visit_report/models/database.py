"""
Conexión a la base de datos y sesión de SQLAlchemy
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from ..config import settings

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependencia de FastAPI que entrega una sesión por request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Crear las tablas que no existan (solo para entornos sin migraciones)"""
    # Importar modelos para registrarlos en el metadata
    from . import customer, visit, configuration, user, audit_log  # noqa: F401
    Base.metadata.create_all(bind=engine)
