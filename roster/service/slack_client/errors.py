class SlackClientError(Exception):
    pass


class TransportError(SlackClientError):
    def __init__(self, method: str, reason: str):
        super().__init__(f"Could not reach {method}: {reason}")
        self.method = method
        self.reason = reason


class HttpError(SlackClientError):
    def __init__(self, method: str, status: int, reason: str | None):
        super().__init__(f"{method} responded with {status} {reason or ''}".rstrip())
        self.method = method
        self.status = status
        self.reason = reason


class DecodeError(SlackClientError):
    def __init__(self, method: str, reason: str):
        super().__init__(f"Malformed {method} response: {reason}")
        self.method = method
        self.reason = reason


class ApiError(SlackClientError):
    def __init__(self, method: str, error_code: str):
        super().__init__(f"API Error: {method} failed with {error_code!r}")
        self.method = method
        self.error_code = error_code


class MemberResolutionError(SlackClientError):
    """Lookup of a single channel member failed, the cause is chained."""

    def __init__(self, member_id: str, cause: SlackClientError):
        super().__init__(f"Could not resolve member {member_id}: {cause}")
        self.member_id = member_id
        self.cause = cause
