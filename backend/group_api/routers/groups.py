"""Group resource routes.

Every route requires a bearer token. Update and delete additionally
require the caller to own the group; the not-found check always runs
first, then ownership, and only then is anything written.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from group_api.blanks import remove_blanks
from group_api.database import get_db
from group_api.errors import handle_404, require_ownership
from group_api.models.user import User
from group_api.schemas.group import GroupCreateRequest, GroupEnvelope, GroupListEnvelope, GroupUpdate, GroupUpdateRequest
from group_api.security import require_token
from group_api.services import group_service

logger = logging.getLogger(__name__)
router = APIRouter()


def _parse_update(body: Any) -> GroupUpdate:
    """Validate an already blank-stripped PATCH body."""
    try:
        return GroupUpdateRequest.model_validate(body).group
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in errors]
        ) from exc


@router.get("", response_model=GroupListEnvelope)
def list_groups(current_user: User = Depends(require_token), db: Session = Depends(get_db)):
    """List every group; reads are not filtered by owner."""
    return {"groups": group_service.list_groups(db)}


@router.get("/{group_id}", response_model=GroupEnvelope)
def get_group(group_id: str, current_user: User = Depends(require_token), db: Session = Depends(get_db)):
    group = handle_404(group_service.find_group(db, group_id))
    return {"group": group}


@router.post("", response_model=GroupEnvelope, status_code=status.HTTP_201_CREATED)
def create_group(
    payload: GroupCreateRequest,
    current_user: User = Depends(require_token),
    db: Session = Depends(get_db),
):
    """Create a group owned by the caller, whatever `owner` the body names."""
    group = group_service.create_group(db, current_user, payload.group)
    return {"group": group}


@router.patch("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_group(
    group_id: str,
    current_user: User = Depends(require_token),
    body: Any = Depends(remove_blanks),
    db: Session = Depends(get_db),
):
    """Merge non-blank fields into a group the caller owns. Responds with no body."""
    group = handle_404(group_service.find_group(db, group_id))
    require_ownership(current_user, group)
    group_service.update_group(db, group, _parse_update(body))


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(group_id: str, current_user: User = Depends(require_token), db: Session = Depends(get_db)):
    group = handle_404(group_service.find_group(db, group_id))
    require_ownership(current_user, group)
    group_service.delete_group(db, group)
