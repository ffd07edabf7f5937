"""Ship store persisted through SQLModel."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, select

from shipapi.models import ShipModel, ShipRecord
from shipapi.services.ship.base import Ship, ShipAlreadyExistsError

logger = logging.getLogger(__name__)


class DatabaseShip(Ship):
    """Stores ships as ``ShipRecord`` rows in the configured database."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None

    async def initialize(self) -> None:
        """Create the engine and the ships table"""
        kwargs = {}
        if self.database_url.startswith("sqlite"):
            # SQLite specific settings
            kwargs = {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        self.engine = create_async_engine(
            self.database_url, echo=self.echo, future=True, **kwargs
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Ship database initialized")

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None

    def get_session(self) -> AsyncSession:
        """Get database session"""
        if not self.engine:
            raise RuntimeError("Database not initialized")

        return AsyncSession(self.engine, expire_on_commit=False)

    async def find(self, ship_id: str) -> Optional[ShipModel]:
        session = self.get_session()
        try:
            statement = select(ShipRecord).where(ShipRecord.id == ship_id)
            result = await session.execute(statement)
            record = result.scalar_one_or_none()
            return record.to_model() if record else None
        finally:
            await session.close()

    async def find_x(self, ship_id: str) -> Optional[int]:
        session = self.get_session()
        try:
            statement = select(ShipRecord.x_coordinate).where(ShipRecord.id == ship_id)
            result = await session.execute(statement)
            return result.scalar_one_or_none()
        finally:
            await session.close()

    async def add(self, ship: ShipModel) -> ShipModel:
        session = self.get_session()
        try:
            if await session.get(ShipRecord, ship.id) is not None:
                raise ShipAlreadyExistsError(ship.id)

            record = ShipRecord.from_model(ship)
            session.add(record)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ShipAlreadyExistsError(ship.id) from e
            await session.refresh(record)
            logger.info(f"Added ship {ship.id} ({ship.name})")
            return record.to_model()
        finally:
            await session.close()
