"""Pydantic schemas for Groups.

Request bodies and responses are wrapped in a `group` / `groups` envelope.
An `owner` key in a request body is ignored: the owner always comes from
the authenticated caller.
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator


class GroupCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    guidelines: Optional[str] = None
    event: list[str] = []

    model_config = {"extra": "ignore"}


class GroupUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    guidelines: Optional[str] = None
    event: Optional[list[str]] = None

    model_config = {"extra": "ignore"}

    @field_validator("name", "description")
    @classmethod
    def _not_null(cls, value: Optional[str]) -> str:
        # Only runs for keys the client actually sent.
        if value is None:
            raise ValueError("may not be null")
        return value


class GroupCreateRequest(BaseModel):
    group: GroupCreate


class GroupUpdateRequest(BaseModel):
    group: GroupUpdate


class GroupOut(BaseModel):
    id: str = Field(validation_alias=AliasChoices("group_id", "id"))
    name: str
    description: str
    guidelines: Optional[str] = None
    owner: str = Field(validation_alias=AliasChoices("owner_id", "owner"))
    event: list[str] = Field(default_factory=list, validation_alias=AliasChoices("event_ids", "event"))
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class GroupEnvelope(BaseModel):
    group: GroupOut


class GroupListEnvelope(BaseModel):
    groups: list[GroupOut]
