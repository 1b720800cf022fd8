"""
Ownership guard for driver-scoped resources.

A single predicate decides whether a caller owns a row; it runs before
every read of a single row, every update and every delete.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.core.exceptions import ResourceNotFoundError
from backend.app.models.enums import ResourceType
from backend.app.models.fixed_cost import FixedCost
from backend.app.models.vehicle import Vehicle

# Resource type -> (model, display name)
OWNED_RESOURCES = {
    ResourceType.VEHICLE: (Vehicle, "Vehicle"),
    ResourceType.FIXED_COST: (FixedCost, "Fixed cost"),
}


class OwnershipGuard:
    """
    Class-based ownership guard.

    Usage:
        ownership_guard = OwnershipGuard()

        @router.delete("/vehicles/{vehicle_id}")
        async def delete_vehicle(vehicle_id: int, driver = Depends(get_current_driver),
                                 db: AsyncSession = Depends(get_db)):
            await ownership_guard.enforce(db, ResourceType.VEHICLE, vehicle_id, driver.uid)
            ...
    """

    async def owns(
        self,
        db: AsyncSession,
        resource_type: ResourceType,
        resource_id: int,
        driver_id: str
    ) -> bool:
        """
        Check that the row exists and belongs to driver_id.

        Returns:
            True if the caller owns the resource, False otherwise
        """
        model, _ = OWNED_RESOURCES[resource_type]
        result = await db.execute(
            select(model.id).where(model.id == resource_id, model.driver_id == driver_id)
        )
        return result.scalar_one_or_none() is not None

    async def enforce(
        self,
        db: AsyncSession,
        resource_type: ResourceType,
        resource_id: int,
        driver_id: str
    ):
        """
        Enforce ownership, raise 404 if the row is missing or owned by someone else.

        Both cases answer the same way so a caller cannot probe for other
        drivers' ids.

        Raises:
            ResourceNotFoundError
        """
        if not await self.owns(db, resource_type, resource_id, driver_id):
            _, name = OWNED_RESOURCES[resource_type]
            raise ResourceNotFoundError(name, resource_id)


ownership_guard = OwnershipGuard()
