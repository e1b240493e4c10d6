"""Defines the exceptions raised by the Convious SDK."""


class ConviousError(Exception):
    """Base class for every error raised by the SDK."""


class AuthError(ConviousError):
    """The token endpoint refused to issue a credential."""

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(f"Authentication failed: {detail}")
        self.detail = detail
        self.status_code = status_code


class TransportError(ConviousError):
    """The request could not be transmitted, so no response exists."""


class ApiError(ConviousError):
    def __init__(self, url: str, status_code: int, body: str) -> None:
        super().__init__(f"Request to {url} failed with status code {status_code}. Response body: {body}")
        self.url = url
        self.status_code = status_code
        self.body = body
