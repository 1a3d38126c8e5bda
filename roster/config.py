from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

SLACK_API_BASE_URL = "https://api.slack.com/api"


class AppConfig(BaseSettings):
    slack_auth_token: str
    channel_id: str
    slack_api_base_url: str = SLACK_API_BASE_URL
    request_timeout_seconds: float = 10.0
    resolve_profiles: bool = True
    shuffle_seed: int | None = None  # seeded from the clock when unset


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()  # type: ignore
