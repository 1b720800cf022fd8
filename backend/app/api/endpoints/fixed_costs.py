"""
Fixed Cost API Endpoints.

Mounted at /costs and, for older clients, at /custofixo.
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
from backend.app.models.fixed_cost import FixedCost
from backend.app.schemas.driver import DriverIdentity
from backend.app.schemas.fixed_cost import FixedCostCreate, FixedCostResponse, FixedCostUpdate
from backend.app.services.drivers import ensure_driver

router = APIRouter(tags=["Fixed Costs"])
logger = logging.getLogger(__name__)


async def _load_cost(db: AsyncSession, cost_id: int, driver_id: str) -> FixedCost:
    result = await db.execute(
        select(FixedCost)
        .where(FixedCost.id == cost_id, FixedCost.driver_id == driver_id)
        .execution_options(populate_existing=True)
    )
    cost = result.scalar_one_or_none()
    if cost is None:
        raise ResourceNotFoundError("Fixed cost", cost_id)
    return cost


@router.get("", response_model=List[FixedCostResponse])
async def list_costs(
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """List the caller's fixed costs, soonest due first."""
    result = await db.execute(
        select(FixedCost)
        .where(FixedCost.driver_id == driver.uid)
        .order_by(FixedCost.due_date, FixedCost.id)
    )
    return [FixedCostResponse.model_validate(c) for c in result.scalars().all()]


@router.post("", response_model=FixedCostResponse, status_code=status.HTTP_201_CREATED)
async def create_cost(
    cost_data: FixedCostCreate,
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """Register a fixed cost for the caller."""
    await ensure_driver(db, driver)

    record = cost_data.to_record()
    record["driver_id"] = driver.uid
    result = await db.execute(build_insert(FixedCost, record))
    await db.commit()

    return FixedCostResponse.model_validate(
        await _load_cost(db, result.inserted_primary_key[0], driver.uid)
    )


@router.put("/{cost_id}", response_model=FixedCostResponse)
async def update_cost(
    cost_id: int = Path(..., description="Fixed cost ID"),
    cost_data: FixedCostUpdate = ...,
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """Update one of the caller's fixed costs; 404 for anyone else's."""
    await ownership_guard.enforce(db, ResourceType.FIXED_COST, cost_id, driver.uid)

    record = cost_data.to_record()
    if record:
        await db.execute(build_update(FixedCost, record, cost_id, driver.uid))
        await db.commit()

    return FixedCostResponse.model_validate(await _load_cost(db, cost_id, driver.uid))


@router.delete("/{cost_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cost(
    cost_id: int = Path(..., description="Fixed cost ID"),
    driver: DriverIdentity = Depends(get_current_driver),
    db: AsyncSession = Depends(get_db)
):
    """Delete one of the caller's fixed costs; 404 for anyone else's."""
    await ownership_guard.enforce(db, ResourceType.FIXED_COST, cost_id, driver.uid)

    await db.execute(build_delete(FixedCost, cost_id, driver.uid))
    await db.commit()

    logger.info("Fixed cost %s deleted by driver %s", cost_id, driver.uid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
