import asyncio
import random
import sys

from loguru import logger
from pydantic import ValidationError

from roster.config import AppConfig, get_config
from roster.service.member_resolver import fetch_member_ids, resolve_member_ids
from roster.service.output import print_member_ids, print_users
from roster.service.shuffle import make_random, shuffle
from roster.service.slack_client import SlackClientError, get_client


async def run(config: AppConfig, rng: random.Random) -> None:
    async with get_client(config) as client:
        member_ids = shuffle(await fetch_member_ids(client, config.channel_id), rng)
        if not config.resolve_profiles:
            print_member_ids(member_ids)
            return
        users = await resolve_member_ids(client, member_ids)
    print_users(users)


async def main() -> int:
    try:
        config = get_config()
    except ValidationError as exc:
        logger.error(f"Missing configuration: {exc}")
        return 1
    rng = make_random(config.shuffle_seed)
    try:
        await run(config, rng)
    except SlackClientError as exc:
        logger.error(str(exc))
        return 1
    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
