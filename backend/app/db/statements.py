"""
Statement builders for single-row writes.

Records are column -> value mappings that have already passed a request
schema; column_record() checks them once more against the table so no
caller-supplied key ever reaches statement text unless it names a real,
writable column. Values are always bound as parameters.
"""

from typing import Any, Dict, Iterable, Mapping, Sequence

from sqlalchemy import func, insert, update, delete
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.exceptions import UnknownFieldError

# Columns maintained by the database, never taken from a record
SERVER_MANAGED_COLUMNS = frozenset({"created_at", "updated_at"})

_DIALECT_INSERTS = {
    "mysql": mysql.insert,
    "mariadb": mysql.insert,
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def dialect_name(db: AsyncSession) -> str:
    """Name of the SQL dialect the session is bound to (mysql, sqlite...)."""
    return db.get_bind().dialect.name


def writable_columns(model) -> frozenset:
    """Column names a record may set: all but generated ids and timestamps."""
    return frozenset(
        c.name for c in model.__table__.columns
        if not (c.primary_key and c.autoincrement is True)
        and c.name not in SERVER_MANAGED_COLUMNS
    )


def column_record(model, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate a record against the model's writable columns.

    Raises:
        UnknownFieldError: if any key is not a writable column
    """
    allowed = writable_columns(model)
    unknown = [key for key in data if key not in allowed]
    if unknown:
        raise UnknownFieldError(model.__tablename__, unknown)
    return dict(data)


def _dialect_insert(name: str):
    try:
        return _DIALECT_INSERTS[name]
    except KeyError:
        raise ValueError(f"Upserts are not supported for the '{name}' dialect")


def build_insert(model, record: Mapping[str, Any]):
    """INSERT INTO <table> (<record keys>) VALUES (<bound values>)."""
    return insert(model).values(**column_record(model, record))


def build_insert_ignore(model, record: Mapping[str, Any], dialect: str):
    """INSERT that leaves an existing row with the same key untouched."""
    stmt = _dialect_insert(dialect)(model).values(**column_record(model, record))
    if dialect in ("mysql", "mariadb"):
        return stmt.prefix_with("IGNORE")
    return stmt.on_conflict_do_nothing()


def build_update(model, record: Mapping[str, Any], resource_id: Any, driver_id: str):
    """
    UPDATE restricted to one row owned by the caller.

    The model must have `id` and `driver_id` columns.
    """
    return (
        update(model)
        .where(model.id == resource_id, model.driver_id == driver_id)
        .values(**column_record(model, record))
    )


def build_delete(model, resource_id: Any, driver_id: str):
    """DELETE restricted to one row owned by the caller."""
    return delete(model).where(model.id == resource_id, model.driver_id == driver_id)


def build_upsert(model, record: Mapping[str, Any], key_columns: Sequence[str], dialect: str,
                 update_columns: Iterable[str] = None):
    """
    INSERT, or on a conflict over key_columns update the other columns.

    By default every non-key column in the record is overwritten with its
    proposed value; update_columns narrows that set.
    """
    record = column_record(model, record)
    stmt = _dialect_insert(dialect)(model).values(**record)

    if update_columns is None:
        update_columns = [c for c in record if c not in key_columns]
    update_columns = list(update_columns)

    if dialect in ("mysql", "mariadb"):
        changes = {c: stmt.inserted[c] for c in update_columns}
        if "updated_at" in model.__table__.c:
            changes["updated_at"] = func.now()
        if not changes:
            # Keep ON DUPLICATE KEY valid when only key columns were sent
            changes = {key_columns[0]: stmt.inserted[key_columns[0]]}
        return stmt.on_duplicate_key_update(changes)

    changes = {c: stmt.excluded[c] for c in update_columns}
    if not changes:
        return stmt.on_conflict_do_nothing(index_elements=list(key_columns))
    if "updated_at" in model.__table__.c:
        changes["updated_at"] = func.now()
    return stmt.on_conflict_do_update(index_elements=list(key_columns), set_=changes)
