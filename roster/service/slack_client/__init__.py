from roster.service.slack_client.client import SLACK_API_BASE_URL, SlackClient, get_client
from roster.service.slack_client.errors import (
    ApiError,
    DecodeError,
    HttpError,
    MemberResolutionError,
    SlackClientError,
    TransportError,
)
from roster.service.slack_client.models import (
    ChannelMembers,
    SlackResponse,
    User,
    UserInfo,
    UserProfile,
)

__all__ = [
    "SLACK_API_BASE_URL",
    "ApiError",
    "ChannelMembers",
    "DecodeError",
    "HttpError",
    "MemberResolutionError",
    "SlackClient",
    "SlackClientError",
    "SlackResponse",
    "TransportError",
    "User",
    "UserInfo",
    "UserProfile",
    "get_client",
]
