from sqlalchemy import inspect

from projecthub.database.base import Base
from projecthub.database.session import engine
from projecthub.utils.logger import get_logger
import projecthub.models  # noqa: F401  registers the tables on Base.metadata

logger = get_logger(__name__)

def init_db():
    """
    Creates missing tables and logs which ones are present.
    """
    Base.metadata.create_all(bind=engine)
    tables = inspect(engine).get_table_names()
    logger.info(f"Database ready with tables: {', '.join(sorted(tables))}")
    return tables
