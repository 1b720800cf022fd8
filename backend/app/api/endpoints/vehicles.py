"""
Vehicle API Endpoints.

Drivers manage their own vehicles; every query is scoped to the verified caller.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.core.dependencies import get_current_driver
from backend.app.core.exceptions import ResourceNotFoundError
from backend.app.core.guards import ownership_guard
from backend.app.db.session import get_db
from backend.app.db.statements import build_delete, build_insert, build_update
from backend.app.models.enums import ResourceType
from backend.app.models.vehicle import Vehicle
from backend.app.schemas.driver import DriverIdentity
from backend.app.schemas.vehicle import VehicleResponse, VehicleWrite
from backend.app.services.drivers import ensure_driver

router = APIRouter(prefix="/vehicles", tags=["Vehicles"])
logger = logging.getLogger(__name__)


async def _load_vehicle(db: AsyncSession, vehicle_id: int, driver_id: str) -> Vehicle:
    result = await db.execute(
        select(Vehicle)
        .where(Vehicle.id == vehicle_id, Vehicle.driver_id == driver_id)
        .execution_options(populate_existing=True)
    )
    vehicle = result.scalar_one_or_none()
    if vehicle is None:
        raise ResourceNotFoundError("Vehicle", vehicle_id)
    return vehicle


@router.get("", response_model=List[VehicleResponse])
async def list_vehicles(
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """
    List the caller's vehicles.

    The first call for a new driver also registers the driver row.
    """
    await ensure_driver(db, driver)
    await db.commit()

    result = await db.execute(
        select(Vehicle).where(Vehicle.driver_id == driver.uid).order_by(Vehicle.id)
    )
    return [VehicleResponse.model_validate(v) for v in result.scalars().all()]


@router.get("/{vehicle_id}", response_model=VehicleResponse)
async def get_vehicle(
    vehicle_id: int = Path(..., description="Vehicle ID"),
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """Get one of the caller's vehicles."""
    return VehicleResponse.model_validate(await _load_vehicle(db, vehicle_id, driver.uid))


@router.post("", response_model=VehicleResponse, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    vehicle_data: VehicleWrite,
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """
    Register a vehicle for the caller.

    Blank numeric fields are stored as null.
    """
    await ensure_driver(db, driver)

    record = vehicle_data.to_record()
    record["driver_id"] = driver.uid
    result = await db.execute(build_insert(Vehicle, record))
    await db.commit()

    vehicle_id = result.inserted_primary_key[0]
    logger.info("Vehicle %s created by driver %s", vehicle_id, driver.uid)
    return VehicleResponse.model_validate(await _load_vehicle(db, vehicle_id, driver.uid))


@router.put("/{vehicle_id}", response_model=VehicleResponse)
async def update_vehicle(
    vehicle_id: int = Path(..., description="Vehicle ID"),
    vehicle_data: VehicleWrite = ...,
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """
    Update one of the caller's vehicles.

    Only the fields present in the body change. Another driver's vehicle
    answers 404.
    """
    await ownership_guard.enforce(db, ResourceType.VEHICLE, vehicle_id, driver.uid)

    record = vehicle_data.to_record()
    if record:
        await db.execute(build_update(Vehicle, record, vehicle_id, driver.uid))
        await db.commit()

    return VehicleResponse.model_validate(await _load_vehicle(db, vehicle_id, driver.uid))


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(
    vehicle_id: int = Path(..., description="Vehicle ID"),
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """
    Delete one of the caller's vehicles and its daily logs.

    Another driver's vehicle answers 404, exactly like update.
    """
    await ownership_guard.enforce(db, ResourceType.VEHICLE, vehicle_id, driver.uid)

    await db.execute(build_delete(Vehicle, vehicle_id, driver.uid))
    await db.commit()

    logger.info("Vehicle %s deleted by driver %s", vehicle_id, driver.uid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
