"""
API Router.

Aggregates all endpoints mounted under the API prefix. Every route here
requires a verified bearer token.
"""

from fastapi import APIRouter, Depends
from backend.app.api.endpoints import daily_logs, drivers, fixed_costs, vehicles
from backend.app.core.dependencies import get_current_driver

# Router-level dependency: authentication runs before any endpoint dependency
router = APIRouter(dependencies=[Depends(get_current_driver)])

router.include_router(vehicles.router)
router.include_router(daily_logs.router)

router.include_router(fixed_costs.router, prefix="/costs")
router.include_router(fixed_costs.router, prefix="/custofixo", include_in_schema=False)

router.include_router(drivers.router, prefix="/motoristas")
router.include_router(drivers.router, prefix="/drivers", include_in_schema=False)
