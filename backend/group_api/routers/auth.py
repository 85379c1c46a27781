"""Account routes: sign up, sign in, change password, sign out.

Signing in issues a random bearer token stored on the user; signing out
rotates it so the old value no longer authenticates.
"""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from group_api.database import get_db
from group_api.errors import BadCredentialsError, BadParamsError
from group_api.models.user import User
from group_api.schemas.user import PasswordChangeRequest, SignedInUserEnvelope, SignInRequest, SignUpRequest, UserEnvelope
from group_api.security import generate_token, hash_password, require_token, verify_password

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/sign-up", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def sign_up(payload: SignUpRequest, db: Session = Depends(get_db)):
    credentials = payload.credentials
    if credentials.password != credentials.password_confirmation:
        raise BadParamsError("password and password_confirmation do not match")
    if db.query(User).filter(User.email == credentials.email).first():
        raise BadParamsError("Email already registered")

    user = User(email=credentials.email, hashed_password=hash_password(credentials.password))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user %s (%s)", user.user_id, user.email)
    return {"user": user}


@router.post("/sign-in", response_model=SignedInUserEnvelope, status_code=status.HTTP_201_CREATED)
def sign_in(payload: SignInRequest, db: Session = Depends(get_db)):
    """Check the credentials and issue a fresh bearer token."""
    credentials = payload.credentials
    user = db.query(User).filter(User.email == credentials.email).first()
    if user is None or not verify_password(credentials.password, user.hashed_password):
        logger.info("Sign-in rejected for %s", credentials.email)
        raise BadCredentialsError()

    user.token = generate_token()
    db.commit()
    db.refresh(user)
    logger.info("User %s signed in", user.user_id)
    return {"user": user}


@router.patch("/change-password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(
    payload: PasswordChangeRequest,
    current_user: User = Depends(require_token),
    db: Session = Depends(get_db),
):
    if not verify_password(payload.passwords.old, current_user.hashed_password):
        raise BadCredentialsError()
    current_user.hashed_password = hash_password(payload.passwords.new)
    db.commit()
    logger.info("User %s changed password", current_user.user_id)


@router.delete("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(current_user: User = Depends(require_token), db: Session = Depends(get_db)):
    current_user.token = generate_token()
    db.commit()
    logger.info("User %s signed out", current_user.user_id)
