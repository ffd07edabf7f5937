import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse, Response
from shipapi.models import ShipModel, ErrorResponse
from shipapi.services.ship import Ship, ShipAlreadyExistsError, get_ship_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ship")


@router.get(
    "/{ship_id}/position",
    response_model=int,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Ship not found"}},
)
async def get_ship_position(ship_id: str, ship: Ship = Depends(get_ship_store)):
    """Get the ship's X coordinate"""
    x_coordinate = await ship.find_x(ship_id)
    if x_coordinate is None:
        logger.debug(f"Position lookup for unknown ship {ship_id}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return JSONResponse(content=x_coordinate)


@router.get(
    "/{ship_id}",
    response_model=ShipModel,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Ship not found"}},
)
async def get_ship(ship_id: str, ship: Ship = Depends(get_ship_store)):
    """Get ship information"""
    found = await ship.find(ship_id)
    if found is None:
        logger.debug(f"Lookup for unknown ship {ship_id}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return found


@router.post(
    "/",
    response_model=ShipModel,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
async def create_ship(request: ShipModel, ship: Ship = Depends(get_ship_store)):
    """Add a new ship"""
    try:
        return await ship.add(request)
    except ShipAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to add ship {request.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
