import asyncio
from contextlib import asynccontextmanager
from types import TracebackType
from typing import AsyncIterator, TypeVar

import aiohttp
from loguru import logger
from pydantic import ValidationError

from roster.config import SLACK_API_BASE_URL, AppConfig
from roster.service.slack_client.errors import (
    ApiError,
    DecodeError,
    HttpError,
    TransportError,
)
from roster.service.slack_client.models import ChannelMembers, SlackResponse, UserInfo

ResponseT = TypeVar("ResponseT", bound=SlackResponse)


class SlackClient:
    CHANNEL_MEMBERS = "conversations.members"
    USER_INFO = "users.info"

    def __init__(
        self,
        token: str,
        base_url: str = SLACK_API_BASE_URL,
        timeout_seconds: float = 10.0,
    ):
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_channel_members(self, channel_id: str) -> ChannelMembers:
        channel_members = await self._post(
            self.CHANNEL_MEMBERS,
            {"channel": channel_id},
            ChannelMembers,
        )
        logger.debug(f"Channel {channel_id} has {len(channel_members.members)} members")
        return channel_members

    async def fetch_user_info(self, member_id: str) -> UserInfo:
        user_info = await self._post(self.USER_INFO, {"user": member_id}, UserInfo)
        if not user_info.user.id:
            logger.error("{} returned ok without a user id for {}", self.USER_INFO, member_id)
            raise ApiError(self.USER_INFO, "empty_user_id")
        return user_info

    async def _post(
        self,
        method: str,
        fields: dict[str, str],
        model: type[ResponseT],
    ) -> ResponseT:
        try:
            async with self._session.post(
                url=f"{self._base_url}/{method}",
                data={"token": self._token, **fields},
            ) as response:
                status, reason = response.status, response.reason
                if not 400 <= status < 600:
                    body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error("Request to {} failed: {!r}", method, exc)
            raise TransportError(method, repr(exc)) from exc

        if 400 <= status < 600:
            logger.error("{} responded with {} {}", method, status, reason)
            raise HttpError(method, status, reason)

        try:
            envelope = SlackResponse.model_validate_json(body)
        except ValidationError as exc:
            logger.error("Could not decode {} response: {}", method, body[:200])
            raise DecodeError(method, str(exc)) from exc

        # payload fields are meaningless unless ok is set
        if not envelope.ok:
            logger.error("{} responded with error {}", method, envelope.error_code)
            raise ApiError(method, envelope.error_code)

        try:
            return model.model_validate_json(body)
        except ValidationError as exc:
            logger.error("Could not decode {} response: {}", method, body[:200])
            raise DecodeError(method, str(exc)) from exc

    async def __aenter__(self) -> "SlackClient":
        self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType,
    ) -> None:
        await self._session.close()


@asynccontextmanager
async def get_client(config: AppConfig) -> AsyncIterator[SlackClient]:
    async with SlackClient(
        token=config.slack_auth_token,
        base_url=config.slack_api_base_url,
        timeout_seconds=config.request_timeout_seconds,
    ) as client:
        yield client
