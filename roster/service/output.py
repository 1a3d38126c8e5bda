from typing import Iterable

from roster.service.slack_client import User


def format_user(user: User) -> str:
    profile = user.profile
    return "\t".join((user.id, profile.display_name, profile.real_name, profile.email))


def print_member_ids(member_ids: Iterable[str]) -> None:
    for member_id in member_ids:
        print(member_id)


def print_users(users: Iterable[User]) -> None:
    for user in users:
        print(format_user(user))
