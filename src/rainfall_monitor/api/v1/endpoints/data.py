"""Shared record endpoints.

Exposes the record store used by the controller and the viewers:

- ``GET /data/{id}`` returns ``{id, data, timestamp}``
- ``PUT /data/{id}`` accepts ``{"data": {...}}`` and replaces the record

and one read-only facet route per viewer, each of which loads the stored
record, normalises it into a `RainfallRecord` and returns the derived view:

- ``GET /data/{id}/alert``
- ``GET /data/{id}/cities``
- ``GET /data/{id}/statistics``
- ``GET /data/{id}/hazard-scale``

Error bodies keep the ``{"error": ..., "message": ...}`` shape (see the
exception handlers registered in `rainfall_monitor.app`).
"""
from __future__ import annotations

from typing import Any, Dict, Iterator

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, ValidationError

from rainfall_monitor.domain import facets
from rainfall_monitor.domain.record import RainfallRecord
from rainfall_monitor.errors import InvalidPayloadError, RecordNotFoundError
from rainfall_monitor.logger import get_logger
from rainfall_monitor.persistence.database import ScadaDatabase

log = get_logger(__name__)

router = APIRouter()


class ScadaItem(BaseModel):
    id: str
    data: Dict[str, Any]
    timestamp: int


class UpdateResponse(BaseModel):
    message: str
    id: str
    timestamp: int


def get_database() -> Iterator[ScadaDatabase]:
    db = ScadaDatabase()
    try:
        yield db
    finally:
        db.close()


def _load_record(db: ScadaDatabase, record_id: str) -> RainfallRecord:
    item = db.get_record(record_id)
    if not item:
        raise RecordNotFoundError(record_id)
    try:
        return RainfallRecord.from_data(item.get("data") or {})
    except ValidationError as exc:
        raise InvalidPayloadError(
            "Stored data is not a valid rainfall record", status_code=422, message=str(exc))


@router.get("/data/{record_id}", response_model=ScadaItem)
def get_data(record_id: str, db: ScadaDatabase = Depends(get_database)):
    """Return the stored item for ``record_id`` or 404 when it does not exist."""
    log.debug(f"GET /data/{record_id}")
    item = db.get_record(record_id)
    if not item:
        raise RecordNotFoundError(record_id)
    return item


@router.put("/data/{record_id}", response_model=UpdateResponse)
def put_data(record_id: str, payload: Any = Body(None), db: ScadaDatabase = Depends(get_database)):
    """Replace the record's ``data`` object and stamp it with the current time.

    The ``data`` object is stored as sent, so any writer of the shared record
    stays compatible; normalisation happens when a facet is read.
    """
    log.info(f"PUT /data/{record_id}")
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise InvalidPayloadError("Missing or invalid 'data' field in request body")
    item = db.put_record(record_id, payload["data"])
    return {"message": "Data updated successfully", "id": record_id, "timestamp": item["timestamp"]}


@router.get("/data/{record_id}/alert")
def get_alert(record_id: str, db: ScadaDatabase = Depends(get_database)):
    return facets.warning_alert(_load_record(db, record_id))


@router.get("/data/{record_id}/cities")
def get_cities(record_id: str, db: ScadaDatabase = Depends(get_database)):
    return facets.affected_cities(_load_record(db, record_id))


@router.get("/data/{record_id}/statistics")
def get_statistics(record_id: str, db: ScadaDatabase = Depends(get_database)):
    return facets.statistics_snapshot(_load_record(db, record_id))


@router.get("/data/{record_id}/hazard-scale")
def get_hazard_scale(record_id: str, db: ScadaDatabase = Depends(get_database)):
    return facets.hazard_scale_view(_load_record(db, record_id))
