"""Async client for the MeigetsuID identity provider API."""

from meigetsuid.auth import (
    get_authorization_id,
    get_token,
    get_token_by_auth_code,
    get_token_by_refresh_token,
)
from meigetsuid.client import MeigetsuID
from meigetsuid.config import Settings, get_settings
from meigetsuid.errors import APIError, MeigetsuIDError
from meigetsuid.models import (
    AgeCheckResponse,
    AgeCheckResult,
    ApplicationCreate,
    ApplicationCreateResult,
    ApplicationGet,
    ApplicationGetForEnum,
    ApplicationUpdate,
    ClientInformation,
    CompareMode,
    IdentificationStatusResponse,
    PersonalRecord,
    PersonalRecordUpdate,
    TokenInformation,
    UserGet,
    UserUpdate,
)
from meigetsuid.pkce import generate_pkce_pair

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AgeCheckResponse",
    "AgeCheckResult",
    "ApplicationCreate",
    "ApplicationCreateResult",
    "ApplicationGet",
    "ApplicationGetForEnum",
    "ApplicationUpdate",
    "ClientInformation",
    "CompareMode",
    "IdentificationStatusResponse",
    "MeigetsuID",
    "MeigetsuIDError",
    "PersonalRecord",
    "PersonalRecordUpdate",
    "Settings",
    "TokenInformation",
    "UserGet",
    "UserUpdate",
    "generate_pkce_pair",
    "get_authorization_id",
    "get_settings",
    "get_token",
    "get_token_by_auth_code",
    "get_token_by_refresh_token",
]
