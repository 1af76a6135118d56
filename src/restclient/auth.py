"""Authentication providers.

An authentication provider attaches credentials to an
:class:`OutboundRequest`. It runs after the request signer, so it may read
signature headers but never removes them.
"""

import base64
from typing import Optional, Protocol, runtime_checkable

from ._utils.constants import HEADER_API_KEY, HEADER_AUTHORIZATION
from .models.requests import OutboundRequest


@runtime_checkable
class AuthenticationProvider(Protocol):
    def authenticate(self, request: OutboundRequest) -> OutboundRequest: ...


class BearerTokenAuthenticator:
    def __init__(self, token: str) -> None:
        self.token = token

    def authenticate(self, request: OutboundRequest) -> OutboundRequest:
        return request.with_headers({HEADER_AUTHORIZATION: f"Bearer {self.token}"})


class BasicAuthenticator:
    def __init__(self, username: str, password: str) -> None:
        self.username = username
        self.password = password

    @property
    def credentials(self) -> str:
        raw = f"{self.username}:{self.password}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")

    def authenticate(self, request: OutboundRequest) -> OutboundRequest:
        return request.with_headers({HEADER_AUTHORIZATION: f"Basic {self.credentials}"})


class ApiKeyAuthenticator:
    """Sends a static API key, either as a header or as a query parameter.

    Args:
        api_key: The key to send.
        header: Header name used when ``query_param`` is not set.
        query_param: When given, the key is appended to the query string
            under this name instead of being sent as a header.
    """

    def __init__(
        self,
        api_key: str,
        *,
        header: str = HEADER_API_KEY,
        query_param: Optional[str] = None,
    ) -> None:
        self.api_key = api_key
        self.header = header
        self.query_param = query_param

    def authenticate(self, request: OutboundRequest) -> OutboundRequest:
        if self.query_param:
            return request.with_params({self.query_param: self.api_key})
        return request.with_headers({self.header: self.api_key})
