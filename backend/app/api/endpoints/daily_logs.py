"""
Daily Log API Endpoints.

Logs are read and upserted per vehicle; the vehicle must belong to the caller.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.core.dependencies import get_current_driver
from backend.app.core.guards import ownership_guard
from backend.app.db.session import get_db
from backend.app.db.statements import build_upsert, dialect_name
from backend.app.models.daily_log import DailyLog
from backend.app.models.enums import ResourceType
from backend.app.models.vehicle import Vehicle
from backend.app.schemas.daily_log import DailyLogCreate, DailyLogResponse, DailyLogUpsert
from backend.app.schemas.driver import DriverIdentity

router = APIRouter(prefix="/logs", tags=["Daily Logs"])
logger = logging.getLogger(__name__)

LOG_KEY_COLUMNS = ("vehicle_id", "date")


async def _upsert_log(db: AsyncSession, vehicle_id: int, log_data: DailyLogUpsert, driver_id: str) -> DailyLog:
    """
    Insert the day's log, or overwrite every non-key column of the existing one.

    The whole body is written (omitted fields become null) so the stored row
    always equals the latest submission.
    """
    await ownership_guard.enforce(db, ResourceType.VEHICLE, vehicle_id, driver_id)

    record = log_data.model_dump(exclude={"vehicle_id"})
    record["vehicle_id"] = vehicle_id
    await db.execute(build_upsert(DailyLog, record, LOG_KEY_COLUMNS, dialect_name(db)))
    await db.commit()

    logger.info("Daily log %s for vehicle %s saved by driver %s", record["date"], vehicle_id, driver_id)
    result = await db.execute(
        select(DailyLog)
        .where(DailyLog.vehicle_id == vehicle_id, DailyLog.date == record["date"])
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()


@router.get("", response_model=List[DailyLogResponse])
async def list_logs(
    vehicle_id: Optional[int] = Query(None, description="Only logs of this vehicle"),
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """List the daily logs of all the caller's vehicles, oldest first."""
    query = (
        select(DailyLog)
        .join(Vehicle, Vehicle.id == DailyLog.vehicle_id)
        .where(Vehicle.driver_id == driver.uid)
    )
    if vehicle_id is not None:
        query = query.where(DailyLog.vehicle_id == vehicle_id)

    result = await db.execute(query.order_by(DailyLog.date, DailyLog.vehicle_id))
    return [DailyLogResponse.model_validate(log) for log in result.scalars().all()]


@router.get("/{vehicle_id}", response_model=List[DailyLogResponse])
async def list_vehicle_logs(
    vehicle_id: int = Path(..., description="Vehicle ID"),
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """List the daily logs of one of the caller's vehicles; 404 for anyone else's."""
    await ownership_guard.enforce(db, ResourceType.VEHICLE, vehicle_id, driver.uid)

    result = await db.execute(
        select(DailyLog).where(DailyLog.vehicle_id == vehicle_id).order_by(DailyLog.date)
    )
    return [DailyLogResponse.model_validate(log) for log in result.scalars().all()]


@router.post("", response_model=DailyLogResponse, status_code=status.HTTP_201_CREATED)
async def save_log(
    log_data: DailyLogCreate,
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """Upsert a daily log; the vehicle is named in the body."""
    log = await _upsert_log(db, log_data.vehicle_id, log_data, driver.uid)
    return DailyLogResponse.model_validate(log)


@router.post("/{vehicle_id}", response_model=DailyLogResponse, status_code=status.HTTP_201_CREATED)
async def save_vehicle_log(
    vehicle_id: int = Path(..., description="Vehicle ID"),
    log_data: DailyLogUpsert = ...,
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """Upsert the daily log of one of the caller's vehicles for the body's date."""
    log = await _upsert_log(db, vehicle_id, log_data, driver.uid)
    return DailyLogResponse.model_validate(log)
