"""Pydantic schemas for Events."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field, model_validator


class EventCreate(BaseModel):
    title: str = Field(min_length=1)
    start_time_utc: Optional[datetime] = None
    end_time_utc: Optional[datetime] = None

    @model_validator(mode="after")
    def _end_after_start(self) -> EventCreate:
        if self.start_time_utc and self.end_time_utc and self.end_time_utc < self.start_time_utc:
            raise ValueError("end_time_utc must not precede start_time_utc")
        return self


class EventCreateRequest(BaseModel):
    event: EventCreate


class EventOut(BaseModel):
    id: str = Field(validation_alias=AliasChoices("event_id", "id"))
    title: str
    start_time_utc: Optional[datetime] = None
    end_time_utc: Optional[datetime] = None
    owner: str = Field(validation_alias=AliasChoices("owner_id", "owner"))
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class EventEnvelope(BaseModel):
    event: EventOut


class EventListEnvelope(BaseModel):
    events: list[EventOut]
