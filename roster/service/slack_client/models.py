from pydantic import BaseModel, ConfigDict, Field, field_validator


class SlackResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ok: bool
    error_code: str = Field(default="", alias="error")
    request_method: str = Field(default="", alias="req_method")


class ChannelMembers(SlackResponse):
    members: tuple[str, ...] = ()

    @field_validator("members")
    @classmethod
    def members_are_unique(cls, members: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(members)) != len(members):
            raise ValueError("member ids must be unique")
        return members


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str = ""
    real_name: str = ""
    real_name_normalized: str = ""
    email: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value: str | None) -> str:
        return "" if value is None else value


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    profile: UserProfile = UserProfile()


class UserInfo(SlackResponse):
    user: User = User()
