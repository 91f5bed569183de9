from __future__ import annotations

import threading
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException

from apps.api.observability import traced
from apps.api.schemas.reminders import (
    ReminderCreateRequest,
    ReminderGroupsResponse,
    ReminderResponse,
    ReminderSearchResponse,
    ReminderUpdateRequest,
)
from packages.core.logging_config import get_logger
from packages.core.reminders import (
    Reminder,
    ReminderCollection,
    ReminderIndexError,
    ValidationError,
    build_matcher,
)


router = APIRouter(prefix="/reminders", tags=["reminders"])
logger = get_logger("api")

_LOCK = threading.Lock()
_COLLECTION: Optional[ReminderCollection] = None


def _collection() -> ReminderCollection:
    global _COLLECTION
    if _COLLECTION is None:
        _COLLECTION = ReminderCollection(
            matcher=build_matcher(),
            logger=get_logger("collection"),
        )
    return _COLLECTION


def _positions(collection: ReminderCollection) -> Dict[int, int]:
    return {id(reminder): index for index, reminder in enumerate(collection.reminders, start=1)}


def _to_response(reminder: Reminder, position: int) -> ReminderResponse:
    return ReminderResponse(position=position, **reminder.to_dict())


def _many(collection: ReminderCollection, reminders: List[Reminder]) -> List[ReminderResponse]:
    positions = _positions(collection)
    return [_to_response(reminder, positions[id(reminder)]) for reminder in reminders]


@router.post("", response_model=ReminderResponse)
def create(payload: ReminderCreateRequest) -> ReminderResponse:
    with _LOCK:
        collection = _collection()
        try:
            reminder = collection.add_reminder(payload.description, payload.tag)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        position = collection.size()
    logger.info("Added reminder at position %s tagged %r", position, reminder.tag)
    return _to_response(reminder, position)


@router.get("", response_model=List[ReminderResponse])
def list_all() -> List[ReminderResponse]:
    with _LOCK:
        collection = _collection()
        return _many(collection, collection.reminders)


@router.get("/search", response_model=ReminderSearchResponse)
def search(keyword: str) -> ReminderSearchResponse:
    with _LOCK, traced("reminders.search", {"reminders.keyword": keyword}) as span:
        collection = _collection()
        result = collection.search_stage(keyword)
        if span is not None:
            span.set_attribute("reminders.stage", result.stage)
            span.set_attribute("reminders.result_count", len(result.reminders))
        return ReminderSearchResponse(
            keyword=result.keyword,
            stage=result.stage,
            results=_many(collection, result.reminders),
        )


@router.get("/groups", response_model=ReminderGroupsResponse)
def groups() -> ReminderGroupsResponse:
    with _LOCK:
        collection = _collection()
        positions = _positions(collection)
        return ReminderGroupsResponse(
            groups={
                tag: [_to_response(reminder, positions[id(reminder)]) for reminder in members]
                for tag, members in collection.group_by_tag().items()
            }
        )


@router.get("/{position}", response_model=ReminderResponse)
def get(position: int) -> ReminderResponse:
    with _LOCK:
        try:
            reminder = _collection().get_reminder(position)
        except ReminderIndexError as exc:
            raise HTTPException(status_code=404, detail="Reminder not found") from exc
    return _to_response(reminder, position)


@router.patch("/{position}", response_model=ReminderResponse)
def update(position: int, payload: ReminderUpdateRequest) -> ReminderResponse:
    with _LOCK:
        try:
            reminder = _collection().modify_reminder(position, payload.description)
        except ReminderIndexError as exc:
            raise HTTPException(status_code=404, detail="Reminder not found") from exc
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _to_response(reminder, position)


@router.post("/{position}/toggle", response_model=ReminderResponse)
def toggle(position: int) -> ReminderResponse:
    with _LOCK:
        try:
            reminder = _collection().toggle_completion(position)
        except ReminderIndexError as exc:
            raise HTTPException(status_code=404, detail="Reminder not found") from exc
    return _to_response(reminder, position)
