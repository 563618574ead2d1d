"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    rows: int
    loaded: bool
    last_refreshed: Optional[str] = None
    error: Optional[str] = None


class FieldInfo(BaseModel):
    name: str
    label: str
    sortable: bool


class FieldsResponse(BaseModel):
    fields: list[FieldInfo]


class QueryEcho(BaseModel):
    search: str
    sort: Optional[str] = None
    direction: Optional[str] = None
    label: str


class TendersResponse(BaseModel):
    total: int
    matched: int
    offset: int
    count: int
    query: QueryEcho
    rows: list[dict]
    last_refreshed: Optional[str] = None
    error: Optional[str] = None


class RefreshResponse(BaseModel):
    status: str
    message: str
