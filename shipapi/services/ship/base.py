"""
Abstract base class for ship stores.

This module defines the interface the ship routes depend on. Concrete stores
(in-memory, database) implement it, and tests substitute their own doubles.
"""

from abc import ABC, abstractmethod
from typing import Optional

from shipapi.models import ShipModel


class ShipAlreadyExistsError(Exception):
    """Raised by ``Ship.add`` when a ship with the same ID is already stored."""

    def __init__(self, ship_id: str):
        self.ship_id = ship_id
        super().__init__(f"Ship {ship_id} already exists")


class Ship(ABC):
    """
    Data-access interface for ships.

    Lookups return ``None`` when the ship is not known; absence is not an
    error at this level.
    """

    async def initialize(self) -> None:
        """Prepare the store for use."""

    async def close(self) -> None:
        """Release any resources held by the store."""

    @abstractmethod
    async def find(self, ship_id: str) -> Optional[ShipModel]:
        """
        Look up a ship by ID.

        Args:
            ship_id: The ship ID

        Returns:
            The stored ShipModel, or None if no such ship exists
        """
        pass

    @abstractmethod
    async def find_x(self, ship_id: str) -> Optional[int]:
        """
        Look up a ship's X coordinate.

        Args:
            ship_id: The ship ID

        Returns:
            The X coordinate, or None if no such ship exists
        """
        pass

    @abstractmethod
    async def add(self, ship: ShipModel) -> ShipModel:
        """
        Store a new ship.

        Args:
            ship: The ship to store

        Returns:
            The stored ShipModel

        Raises:
            ShipAlreadyExistsError: If a ship with the same ID is already stored
        """
        pass
