"""Pydantic schemas for Users and the sign-up / sign-in credentials."""
from __future__ import annotations
from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field


class SignUpCredentials(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)
    password_confirmation: str


class SignUpRequest(BaseModel):
    credentials: SignUpCredentials


class SignInCredentials(BaseModel):
    email: str
    password: str


class SignInRequest(BaseModel):
    credentials: SignInCredentials


class PasswordChange(BaseModel):
    old: str
    new: str = Field(min_length=1)


class PasswordChangeRequest(BaseModel):
    passwords: PasswordChange


class UserOut(BaseModel):
    id: str = Field(validation_alias=AliasChoices("user_id", "id"))
    email: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class SignedInUserOut(UserOut):
    token: str


class UserEnvelope(BaseModel):
    user: UserOut


class SignedInUserEnvelope(BaseModel):
    user: SignedInUserOut
