"""
Store factory for the ship routes.

This module builds the configured ship store and keeps the process-wide
instance the routes resolve through ``get_ship_store``.
"""

from typing import Optional
import logging

from shipapi.config import settings
from shipapi.services.ship.base import Ship

logger = logging.getLogger(__name__)

# Global store instance
_store: Optional[Ship] = None


def create_ship_store(store_type: str) -> Ship:
    """
    Create a ship store instance based on the specified type.

    Args:
        store_type: The type of store to create ("memory" or "database")

    Returns:
        A Ship instance

    Raises:
        ValueError: If the store type is not supported
    """
    if store_type == "memory":
        from shipapi.services.ship.memory import InMemoryShip
        return InMemoryShip()
    elif store_type == "database":
        from shipapi.services.ship.database import DatabaseShip
        return DatabaseShip(settings.database_url, echo=settings.debug)
    else:
        raise ValueError(
            f"Unknown ship store type: {store_type}. "
            f"Supported types: memory, database"
        )


def get_ship_store() -> Ship:
    """
    Get the global ship store instance.

    Returns:
        The global Ship instance

    Raises:
        RuntimeError: If the store has not been initialized
    """
    if _store is None:
        raise RuntimeError(
            "Ship store not initialized. "
            "Call initialize_ship_store() first."
        )
    return _store


async def initialize_ship_store(store_type: str) -> Ship:
    """
    Initialize and set the global ship store.

    Args:
        store_type: The type of store to create

    Returns:
        The initialized Ship instance
    """
    global _store
    store = create_ship_store(store_type)
    await store.initialize()
    _store = store
    logger.info(f"Ship store initialized: {store_type}")
    return store


async def close_ship_store() -> None:
    """Close the global ship store."""
    global _store
    if _store is not None:
        await _store.close()
        _store = None
        logger.info("Ship store closed")
