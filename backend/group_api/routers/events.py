"""Event routes: the entities groups reference in their `event` list."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from group_api.database import get_db
from group_api.errors import handle_404
from group_api.models.event import Event
from group_api.models.user import User
from group_api.schemas.event import EventCreateRequest, EventEnvelope, EventListEnvelope
from group_api.security import require_token

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=EventListEnvelope)
def list_events(current_user: User = Depends(require_token), db: Session = Depends(get_db)):
    return {"events": db.query(Event).order_by(Event.created_at).all()}


@router.get("/{event_id}", response_model=EventEnvelope)
def get_event(event_id: str, current_user: User = Depends(require_token), db: Session = Depends(get_db)):
    event = handle_404(db.query(Event).filter(Event.event_id == event_id).first())
    return {"event": event}


@router.post("", response_model=EventEnvelope, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreateRequest,
    current_user: User = Depends(require_token),
    db: Session = Depends(get_db),
):
    """Create an event owned by the caller."""
    event = Event(**payload.event.model_dump(), owner_id=current_user.user_id)
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Created event %s by user %s", event.event_id, current_user.user_id)
    return {"event": event}
