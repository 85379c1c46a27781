"""Group and GroupEvent ORM models.

A Group is owned by exactly one User, fixed at creation. Its `event` list
is kept as ordered GroupEvent association rows so the client sees the ids
in the order it supplied them.
"""
import uuid
from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from group_api.database import Base


class Group(Base):
    __tablename__ = "groups"

    group_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=False)
    guidelines = Column(Text, nullable=True)
    owner_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    event_links = relationship(
        "GroupEvent",
        back_populates="group",
        order_by="GroupEvent.position",
        cascade="all, delete-orphan",
    )

    @property
    def event_ids(self) -> list[str]:
        return [link.event_id for link in self.event_links]


class GroupEvent(Base):
    __tablename__ = "group_events"

    group_id = Column(String(36), ForeignKey("groups.group_id"), primary_key=True)
    position = Column(Integer, primary_key=True)
    event_id = Column(String(36), ForeignKey("events.event_id"), nullable=False)

    group = relationship("Group", back_populates="event_links")
