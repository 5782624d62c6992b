from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from vyeya.core.config import settings
import logging

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    # SQLite solo admite su conexión en el hilo que la creó por defecto
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None):
    """
    Inicializa la base de datos creando todas las tablas registradas
    (users, stores, products, orders, order_items).
    """
    # Registrar los modelos en Base.metadata antes de crear las tablas
    from vyeya.models import user, store, product, order  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Tablas de base de datos creadas")
