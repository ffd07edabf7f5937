"""
Ship service module.

This module provides the Ship store interface, its in-memory and database
implementations, and the factory the application uses to pick one.
"""

from shipapi.services.ship.base import Ship, ShipAlreadyExistsError
from shipapi.services.ship.memory import InMemoryShip
from shipapi.services.ship.database import DatabaseShip
from shipapi.services.ship.factory import (
    create_ship_store,
    get_ship_store,
    initialize_ship_store,
    close_ship_store,
)

__all__ = [
    "Ship",
    "ShipAlreadyExistsError",
    "InMemoryShip",
    "DatabaseShip",
    "create_ship_store",
    "get_ship_store",
    "initialize_ship_store",
    "close_ship_store",
]
