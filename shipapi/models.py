import sqlmodel
from sqlmodel import SQLModel, Column, DateTime
from sqlalchemy import JSON
from pydantic import BaseModel, ConfigDict, Field, StrictInt
from typing import List
from datetime import datetime, timezone


# API Models
class ShipModel(BaseModel):
    """A ship's identity and position. Serialised with camelCase names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Ship ID")
    name: str = Field(..., description="Ship name")
    x_coordinate: StrictInt = Field(..., alias="xCoordinate", description="X coordinate")
    y_coordinate: StrictInt = Field(..., alias="yCoordinate", description="Y coordinate")
    visited_places: tuple[StrictInt, ...] = Field(
        default=(), alias="visitedPlaces", description="IDs of places visited, in order"
    )


class ErrorResponse(BaseModel):
    detail: str


# Database Models
class ShipRecordBase(SQLModel):
    id: str = sqlmodel.Field(primary_key=True)
    name: str = sqlmodel.Field(description="Ship name")
    x_coordinate: int = sqlmodel.Field(description="X coordinate")
    y_coordinate: int = sqlmodel.Field(description="Y coordinate")
    visited_places: List[int] = sqlmodel.Field(
        default_factory=list,
        sa_column=Column(JSON),
        description="IDs of places visited, in order",
    )
    created_at: datetime = sqlmodel.Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True)),
    )


class ShipRecord(ShipRecordBase, table=True):
    __tablename__ = "ships"  # type: ignore

    @classmethod
    def from_model(cls, model: ShipModel) -> "ShipRecord":
        return cls(
            id=model.id,
            name=model.name,
            x_coordinate=model.x_coordinate,
            y_coordinate=model.y_coordinate,
            visited_places=list(model.visited_places),
        )

    def to_model(self) -> ShipModel:
        return ShipModel(
            id=self.id,
            name=self.name,
            x_coordinate=self.x_coordinate,
            y_coordinate=self.y_coordinate,
            visited_places=tuple(self.visited_places or ()),
        )
