import asyncio
import os

from roster.service.member_resolver import resolve_members
from roster.service.slack_client import SlackClient


async def main():
    async with SlackClient(token=os.environ["SLACK_AUTH_TOKEN"]) as client:
        for user in await resolve_members(client, os.environ["CHANNEL_ID"]):
            print(user)


if __name__ == "__main__":
    asyncio.run(main())
