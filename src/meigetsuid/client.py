# MeigetsuID API client - user, personal record and application endpoints.
# Created: 2026-10-19

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, overload

import httpx
from pydantic import BaseModel

from meigetsuid._http import send
from meigetsuid.config import Settings, get_settings
from meigetsuid.errors import APIError
from meigetsuid.models import (
    AgeCheckResponse,
    AgeCheckResult,
    ApplicationCreate,
    ApplicationCreateResult,
    ApplicationGet,
    ApplicationGetForEnum,
    ApplicationUpdate,
    CompareMode,
    IdentificationStatusResponse,
    PersonalRecordUpdate,
    TokenInformation,
    UserGet,
    UserUpdate,
)

logger = logging.getLogger(__name__)


def _body(model: type[BaseModel], data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """JSON body holding only the fields the caller set.

    Mappings are validated into ``model`` first so values such as datetimes
    are serialized the same way as for model instances.
    """
    return model.model_validate(data).model_dump(mode="json", exclude_unset=True)


class MeigetsuID:
    """Client for the MeigetsuID API, bound to one token pair.

    The token is validated once and never replaced; obtain a new pair with
    :func:`meigetsuid.auth.get_token` and build a new client to continue
    after expiry. Using the client as an async context manager signs out
    (revokes the access token) on exit.

    Usage:
        async with MeigetsuID(token) as client:
            user = await client.get_user_record(contain_personal=True)
    """

    def __init__(
        self,
        token: TokenInformation | Mapping[str, Any],
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._token = TokenInformation.model_validate(token)
        self._settings = settings or get_settings()
        self._transport = transport
        self._signed_out = False

    @property
    def token(self) -> TokenInformation:
        return self._token

    @property
    def signed_out(self) -> bool:
        return self._signed_out

    async def __aenter__(self) -> MeigetsuID:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._signed_out:
            return
        if exc_type is None:
            await self.sign_out()
            return
        # Keep the body's exception as the one the caller sees.
        try:
            await self.sign_out()
        except APIError as e:
            logger.warning("Sign-out after error failed: %s", e)

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        return await send(
            method,
            path,
            settings=self._settings,
            access_token=self._token.access_token,
            transport=self._transport,
            **kwargs,
        )

    # -- session --

    async def sign_out(self) -> None:
        """Revoke the access token server-side."""
        await self._send("DELETE", "/auth")
        self._signed_out = True
        logger.info("Signed out of MeigetsuID")

    # -- user --

    async def get_user_record(self, contain_personal: bool = False) -> UserGet:
        """Fetch the signed-in user.

        The personal record is only returned when ``contain_personal`` is set
        and the server has one.
        """
        resp = await self._send(
            "GET",
            "/user",
            params={"contain_personal": "true" if contain_personal else "false"},
        )
        user = UserGet.model_validate(resp.json())
        if not contain_personal and user.personal is not None:
            user = user.model_copy(update={"personal": None})
        return user

    async def request_confirm_mail_for_update(self) -> None:
        """Ask the server to mail a confirmation id for a user record update."""
        await self._send("PATCH", "/user")

    async def update_user_record(
        self, confirm_id: str, new_data: UserUpdate | Mapping[str, Any]
    ) -> None:
        await self._send("PATCH", f"/user/{confirm_id}", json=_body(UserUpdate, new_data))

    async def update_mail_address(self, confirm_id: str, new_mail_address: str) -> None:
        await self._send("PATCH", f"/user/{confirm_id}/mailaddress", text=new_mail_address)

    async def send_mail_address_update_code(self, confirm_code: str) -> None:
        """Have the server send a verification code to the pending address."""
        await self._send("PATCH", f"/user/{confirm_code}/mailaddress")

    async def update_personal_record(
        self, confirm_id: str, new_record: PersonalRecordUpdate | Mapping[str, Any]
    ) -> None:
        await self._send(
            "PATCH", f"/user/mpim/{confirm_id}", json=_body(PersonalRecordUpdate, new_record)
        )

    # -- application --

    async def create_application(
        self, data: ApplicationCreate | Mapping[str, Any]
    ) -> ApplicationCreateResult:
        resp = await self._send("POST", "/application", json=_body(ApplicationCreate, data))
        result = ApplicationCreateResult.model_validate(resp.json())
        logger.info("Created application %s", result.client_id)
        return result

    async def update_application(
        self, data: ApplicationUpdate | Mapping[str, Any]
    ) -> ApplicationCreateResult | None:
        """Update an application.

        Returns the new client credentials when ``regenerate_client_secret``
        is true, otherwise None. The HTTP verb follows
        ``Settings.application_update_method``.
        """
        update = ApplicationUpdate.model_validate(data)
        resp = await self._send(
            self._settings.application_update_method,
            "/application",
            json=update.model_dump(mode="json", exclude_unset=True),
        )
        if not update.regenerate_client_secret:
            return None
        result = ApplicationCreateResult.model_validate(resp.json())
        logger.info("Regenerated client secret for %s", result.client_id)
        return result

    async def list_applications(self) -> list[ApplicationGetForEnum]:
        resp = await self._send("GET", "/application")
        return [ApplicationGetForEnum.model_validate(a) for a in resp.json()["applications"]]

    async def get_application_detail(self, client_id: str) -> ApplicationGet:
        resp = await self._send("GET", f"/application/{client_id}")
        return ApplicationGet.model_validate(resp.json())

    @overload
    async def get_application(self, client_id: None = None) -> list[ApplicationGetForEnum]: ...

    @overload
    async def get_application(self, client_id: str) -> ApplicationGet: ...

    async def get_application(
        self, client_id: str | None = None
    ) -> ApplicationGet | list[ApplicationGetForEnum]:
        """List applications without an id, fetch one application's detail with it."""
        if client_id is None:
            return await self.list_applications()
        return await self.get_application_detail(client_id)

    async def delete_application(self, client_id: str) -> None:
        await self._send("DELETE", f"/application/{client_id}")
        logger.info("Deleted application %s", client_id)

    # -- status / age checks --

    async def check_identification_status(
        self, border_level: int, compare_mode: CompareMode | str
    ) -> bool | IdentificationStatusResponse:
        """Compare the user's ``check_level`` against ``border_level``.

        Returns a bool, or the wrapped response when
        ``Settings.check_envelope`` is ``"wrapped"``.
        """
        resp = await self._send(
            "GET",
            "/user/mpim/status",
            params={"level": border_level, "compare_mode": CompareMode(compare_mode).value},
        )
        data = resp.json()
        if self._settings.check_envelope == "wrapped":
            return IdentificationStatusResponse.model_validate(data)
        return bool(data["result"])

    async def check_age(
        self, border_age: int, compare_mode: CompareMode | str
    ) -> AgeCheckResult | AgeCheckResponse:
        """Compare the user's age against ``border_age``.

        Returns ``{result, level}``, or the wrapped response when
        ``Settings.check_envelope`` is ``"wrapped"`` or the server nests the
        result anyway.
        """
        resp = await self._send(
            "GET",
            "/user/mpim/age",
            params={"age": border_age, "compare_mode": CompareMode(compare_mode).value},
        )
        data = resp.json()
        if self._settings.check_envelope == "wrapped" or isinstance(data.get("result"), dict):
            return AgeCheckResponse.model_validate(data)
        return AgeCheckResult.model_validate(data)
