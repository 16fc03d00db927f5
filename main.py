"""
main.py
-------
Demo entry point for the manufacturer data access layer.

Responsibilities:
    - Load settings and open the database connection pool.
    - Look up the manufacturer repository by its contract.
    - Walk through create, read, update and soft-delete, logging each step.
"""

from config import load_settings
from db.connection import ConnectionSource
from models.manufacturer import Manufacturer
from repositories.base import Dao
from repositories.registry import build_registry
from utils.logger import get_logger, set_level

logger = get_logger(__name__)


def run_demo(dao: Dao) -> None:
    """Exercise every CRUD operation of ``dao`` once."""
    ford = dao.create(Manufacturer("Ford", "USA"))
    logger.info(f"---> {ford} was added to DB")
    bmw = dao.create(Manufacturer("BMW", "Germany"))
    logger.info(f"---> {bmw} was added to DB")

    ford_from_db = dao.get(ford.id)
    logger.info(f"---> Get by id from DB: {ford_from_db}")
    logger.info(f"---> Get by id from DB: {dao.get(bmw.id)}")

    ford.name = "Updated Ford"
    ford.country = "UK"
    updated_ford = dao.update(ford)
    if updated_ford is None:
        logger.warning(f"---> {ford} is no longer in DB, nothing updated")
        return
    logger.info(f"---> {ford_from_db} was updated to {updated_ford}")
    logger.info(f"---> Get updated manufacturer from DB: {dao.get(ford.id)}")

    logger.info(f"---> Get all from DB: {dao.get_all()}")

    if dao.delete(updated_ford.id):
        logger.info(f"---> {updated_ford} was deleted from DB")

    logger.info(f"---> Get all from DB: {dao.get_all()}")


def main() -> None:
    """Start the demo against the configured database."""
    settings = load_settings()
    set_level(settings.log_level)

    source = ConnectionSource.from_settings(settings)
    try:
        registry = build_registry(source, settings.schema)
        run_demo(registry.get(Dao))
    finally:
        source.close()


if __name__ == "__main__":
    main()
