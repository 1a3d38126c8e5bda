import asyncio
from typing import Sequence, cast

from loguru import logger

from roster.service.slack_client import (
    MemberResolutionError,
    SlackClient,
    SlackClientError,
    User,
)


async def fetch_member_ids(client: SlackClient, channel_id: str) -> list[str]:
    channel_members = await client.fetch_channel_members(channel_id)
    logger.info(f"Channel {channel_id} has {len(channel_members.members)} members")
    return list(channel_members.members)


async def resolve_member_ids(client: SlackClient, member_ids: Sequence[str]) -> list[User]:
    """Look up every member concurrently, one task per id.

    Results land in the slot of their member id, so the returned list follows
    ``member_ids`` no matter which lookup finishes first. All tasks are awaited
    before the outcome is decided: if any lookup failed, the first failure in
    ``member_ids`` order is raised and nothing is returned.

    There is no cap on the number of concurrent requests.
    """
    users: list[User | None] = [None] * len(member_ids)

    async def resolve(index: int, member_id: str) -> None:
        user_info = await client.fetch_user_info(member_id)
        users[index] = user_info.user

    logger.info(f"Resolving {len(member_ids)} members")
    tasks = [
        asyncio.create_task(resolve(index, member_id))
        for index, member_id in enumerate(member_ids)
    ]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    failures = [
        (member_id, result)
        for member_id, result in zip(member_ids, results)
        if isinstance(result, BaseException)
    ]
    if len(failures) > 0:
        logger.warning(
            "Some members could not be resolved, {}/{} requests failed.".format(
                len(failures), len(results)
            )
        )
        for member_id, exc in failures:
            logger.error(f"{member_id}: {exc}")
        member_id, exc = failures[0]
        if not isinstance(exc, SlackClientError):
            raise exc
        raise MemberResolutionError(member_id, exc) from exc

    logger.info("All members resolved")
    return cast(list[User], users)


async def resolve_members(client: SlackClient, channel_id: str) -> list[User]:
    member_ids = await fetch_member_ids(client, channel_id)
    return await resolve_member_ids(client, member_ids)
