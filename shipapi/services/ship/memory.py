"""In-memory ship store."""

import asyncio
import logging
from typing import Dict, Optional

from shipapi.models import ShipModel
from shipapi.services.ship.base import Ship, ShipAlreadyExistsError

logger = logging.getLogger(__name__)


class InMemoryShip(Ship):
    """Keeps ships in a dict. Contents are lost when the process exits."""

    def __init__(self):
        self._ships: Dict[str, ShipModel] = {}
        self._lock = asyncio.Lock()

    async def find(self, ship_id: str) -> Optional[ShipModel]:
        return self._ships.get(ship_id)

    async def find_x(self, ship_id: str) -> Optional[int]:
        ship = self._ships.get(ship_id)
        if ship is None:
            return None
        return ship.x_coordinate

    async def add(self, ship: ShipModel) -> ShipModel:
        async with self._lock:
            if ship.id in self._ships:
                raise ShipAlreadyExistsError(ship.id)
            self._ships[ship.id] = ship
        logger.info(f"Added ship {ship.id} ({ship.name})")
        return ship

    async def close(self) -> None:
        self._ships.clear()
