from typing import AsyncGenerator

import pytest_asyncio
from aiohttp.test_utils import TestServer

from roster.config import AppConfig
from roster.service.slack_client import SlackClient
from tests.fake_slack_api import FakeSlackApi


@pytest_asyncio.fixture()
async def slack_api() -> AsyncGenerator[FakeSlackApi, None]:
    yield FakeSlackApi()


@pytest_asyncio.fixture()
async def slack_server(slack_api: FakeSlackApi) -> AsyncGenerator[TestServer, None]:
    server = TestServer(slack_api.app)
    await server.start_server()
    yield server
    await server.close()


@pytest_asyncio.fixture()
async def app_config(slack_server: TestServer) -> AsyncGenerator[AppConfig, None]:
    yield AppConfig(
        slack_auth_token="test_token",
        channel_id="C1",
        slack_api_base_url=str(slack_server.make_url("/api")),
        request_timeout_seconds=1.0,
        resolve_profiles=True,
        shuffle_seed=None,
    )


@pytest_asyncio.fixture()
async def slack_client(app_config: AppConfig) -> AsyncGenerator[SlackClient, None]:
    async with SlackClient(
        token=app_config.slack_auth_token,
        base_url=app_config.slack_api_base_url,
        timeout_seconds=app_config.request_timeout_seconds,
    ) as client:
        yield client
