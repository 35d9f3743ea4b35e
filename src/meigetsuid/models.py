# MeigetsuID data models.
# Created: 2026-10-19

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class CompareMode(StrEnum):
    """Comparison operator for status and age checks."""

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    GREATER = "greater"
    GREATER_EQUAL = "greater_equal"
    LESS = "less"
    LESS_EQUAL = "less_equal"


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


class ClientInformation(BaseModel):
    """Registered OAuth client. A missing secret marks a public (PKCE-only) client."""

    client_id: str
    client_secret: str | None = None
    redirect_uri: str


class TokenExpiry(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: datetime
    refresh_token: datetime


class TokenInformation(BaseModel):
    """Access + refresh token pair.

    Wire timestamps (ISO-8601 strings or epoch seconds) are parsed into
    ``datetime`` on validation.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str
    refresh_token: str
    expires_at: TokenExpiry

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready form with timestamps rendered as ISO strings."""
        return self.model_dump(mode="json")


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


class PersonalRecordBase(BaseModel):
    first_name: str
    family_name: str
    prefecture: str
    city: str
    address: str
    gender: int
    birthday: datetime


class PersonalRecord(PersonalRecordBase):
    """Personal identity record with its verification tier."""

    check_level: int


class PersonalRecordUpdate(BaseModel):
    """Partial personal record; only fields that are set get sent."""

    first_name: str | None = None
    family_name: str | None = None
    prefecture: str | None = None
    city: str | None = None
    address: str | None = None
    gender: int | None = None
    birthday: datetime | None = None


class UserBase(BaseModel):
    user_id: str
    name: str


class UserUpdate(BaseModel):
    """Partial user record; only fields that are set get sent."""

    user_id: str | None = None
    name: str | None = None
    password: str | None = None


class UserGet(UserBase):
    id: str
    mailaddress: str
    account_type: int
    created_at: datetime
    personality_classification: int
    personal: PersonalRecord | None = None


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


class ApplicationBase(BaseModel):
    name: str
    callback_url: str
    privacy: str
    description: str | None = None
    term: str | None = None


class ApplicationCreate(ApplicationBase):
    public: bool


class ApplicationUpdate(BaseModel):
    """Application update. New client credentials are issued only when
    ``regenerate_client_secret`` is true."""

    regenerate_client_secret: bool
    name: str | None = None
    callback_url: str | None = None
    privacy: str | None = None
    description: str | None = None
    term: str | None = None


class ApplicationGetForEnum(BaseModel):
    """Application summary as returned by the list endpoint."""

    name: str
    client_id: str
    description: str | None = None


class Developer(BaseModel):
    id: str
    name: str


class ApplicationGet(ApplicationBase):
    developer: Developer


class ApplicationCreateResult(BaseModel):
    client_id: str
    client_secret: str


# ---------------------------------------------------------------------------
# Status / age checks
# ---------------------------------------------------------------------------


class AgeCheckResult(BaseModel):
    result: bool
    level: int


class IdentificationStatusResponse(BaseModel):
    """Wrapped identification status check (newer API revision)."""

    execution_id: str | None = None
    status: int | None = None
    result: bool


class AgeCheckResponse(BaseModel):
    """Wrapped age check (newer API revision)."""

    execution_id: str | None = None
    status: int | None = None
    result: AgeCheckResult
