from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class ReminderCreateRequest(BaseModel):
    description: str = Field(..., min_length=1)
    tag: str = Field(..., min_length=1)


class ReminderUpdateRequest(BaseModel):
    description: str = Field(..., min_length=1)


class ReminderResponse(BaseModel):
    position: int
    description: str
    tag: str
    is_completed: bool


class ReminderSearchResponse(BaseModel):
    keyword: str
    stage: str
    results: List[ReminderResponse]


class ReminderGroupsResponse(BaseModel):
    groups: Dict[str, List[ReminderResponse]]
