"""
Driver registration service.

Driver rows are keyed by the identity provider's uid. They are created
implicitly the first time a driver touches data, or upserted explicitly.
"""

import logging
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.db.statements import build_insert_ignore, build_upsert, dialect_name
from backend.app.models.driver import Driver
from backend.app.schemas.driver import DriverIdentity, DriverUpsert

logger = logging.getLogger(__name__)


async def ensure_driver(db: AsyncSession, identity: DriverIdentity) -> None:
    """
    Insert the caller's driver row if it does not exist yet.

    An existing row is left untouched. The caller commits.
    """
    result = await db.execute(
        build_insert_ignore(
            Driver,
            {"id": identity.uid, "email": identity.email, "name": identity.name},
            dialect_name(db),
        )
    )
    if result.rowcount:
        logger.info("Registered driver %s", identity.uid)


async def upsert_driver(
    db: AsyncSession,
    identity: DriverIdentity,
    payload: Optional[DriverUpsert] = None
) -> Driver:
    """
    Insert the caller's driver row, or update its name and email.

    Values in the payload win over the ones carried by the token. Claims
    the token does not carry never overwrite stored values; fields the
    payload sends explicitly (null included) always do.
    """
    record = {"id": identity.uid}
    for column in ("name", "email"):
        claim = getattr(identity, column)
        if claim is not None:
            record[column] = claim
    if payload is not None:
        record.update(payload.to_record())

    update_columns = [c for c in ("name", "email") if c in record]
    await db.execute(
        build_upsert(Driver, record, key_columns=["id"], dialect=dialect_name(db),
                     update_columns=update_columns)
    )
    await db.commit()
    return await get_driver(db, identity.uid)


async def get_driver(db: AsyncSession, driver_id: str) -> Optional[Driver]:
    result = await db.execute(
        select(Driver).where(Driver.id == driver_id).execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()
