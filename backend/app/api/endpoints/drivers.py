"""
Driver API Endpoints.

Mounted at /motoristas and /drivers.
"""

from typing import Optional
from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.core.dependencies import get_current_driver
from backend.app.core.exceptions import ResourceNotFoundError
from backend.app.db.session import get_db
from backend.app.schemas.driver import DriverIdentity, DriverResponse, DriverUpsert
from backend.app.services.drivers import get_driver, upsert_driver

router = APIRouter(tags=["Drivers"])


@router.post("", response_model=DriverResponse)
async def register_driver(
    driver_data: Optional[DriverUpsert] = Body(None),
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """
    Register the caller as a driver, or refresh their name and email.

    The id always comes from the verified token, never from the body.
    """
    return DriverResponse.model_validate(await upsert_driver(db, driver, driver_data))


@router.get("/me", response_model=DriverResponse)
async def get_me(
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """Get the caller's driver record."""
    record = await get_driver(db, driver.uid)
    if record is None:
        raise ResourceNotFoundError("Driver", driver.uid)
    return DriverResponse.model_validate(record)
