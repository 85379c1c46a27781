"""Group persistence operations used by the groups router.

Lookups return None when nothing matches; callers decide how absence is
reported. Event references are checked before anything is written.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from group_api.errors import BadParamsError
from group_api.models.event import Event
from group_api.models.group import Group, GroupEvent
from group_api.models.user import User
from group_api.schemas.group import GroupCreate, GroupUpdate

logger = logging.getLogger(__name__)


def _resolve_event_ids(db: Session, event_ids: list[str]) -> list[str]:
    """Return `event_ids` unchanged if every id names an existing Event."""
    if not event_ids:
        return []
    found = {row.event_id for row in db.query(Event.event_id).filter(Event.event_id.in_(event_ids)).all()}
    missing = [eid for eid in event_ids if eid not in found]
    if missing:
        raise BadParamsError(f"Unknown event id(s): {', '.join(missing)}")
    return list(event_ids)


def _event_links(event_ids: list[str]) -> list[GroupEvent]:
    return [GroupEvent(position=i, event_id=eid) for i, eid in enumerate(event_ids)]


def list_groups(db: Session) -> list[Group]:
    return db.query(Group).order_by(Group.created_at).all()


def find_group(db: Session, group_id: str) -> Optional[Group]:
    return db.query(Group).filter(Group.group_id == group_id).first()


def create_group(db: Session, owner: User, fields: GroupCreate) -> Group:
    """Persist a new Group owned by `owner`."""
    event_ids = _resolve_event_ids(db, fields.event)
    group = Group(
        name=fields.name,
        description=fields.description,
        guidelines=fields.guidelines,
        owner_id=owner.user_id,
    )
    group.event_links = _event_links(event_ids)
    db.add(group)
    db.commit()
    db.refresh(group)
    logger.info("Created group '%s' (%s) owned by user %s", group.name, group.group_id, owner.user_id)
    return group


def update_group(db: Session, group: Group, fields: GroupUpdate) -> None:
    """Merge the fields the client sent into `group`.

    A supplied `event` list replaces the stored one; an omitted one is kept.
    """
    updates = fields.model_dump(exclude_unset=True)
    event_ids = updates.pop("event", None)
    if event_ids is not None:
        event_ids = _resolve_event_ids(db, event_ids)

    for field, value in updates.items():
        setattr(group, field, value)

    if event_ids is not None:
        group.event_links.clear()
        db.flush()
        group.event_links.extend(_event_links(event_ids))

    group.updated_at = func.now()
    db.commit()
    logger.info("Updated group %s", group.group_id)


def delete_group(db: Session, group: Group) -> None:
    group_id = group.group_id
    db.delete(group)
    db.commit()
    logger.info("Deleted group %s", group_id)
