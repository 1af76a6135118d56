from typing import Any, Optional

from httpx import Response


class RestClientError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class EndpointMissingError(RestClientError):
    def __init__(
        self,
        message="Endpoint required. Pass it to the client or set the RESTCLIENT_ENDPOINT environment variable.",
    ):
        super().__init__(message)


class ResponseParserMissingError(RestClientError):
    def __init__(
        self,
        message="A response parser is required to construct the client.",
    ):
        super().__init__(message)


class ResourceNotFoundError(RestClientError):
    """Raised when an id-scoped request is answered with a 4xx status.

    Attributes:
        resource: The resource name the request targeted.
        id: The identifier of the requested resource.
        response: The response that was received.
        status_code: Its HTTP status code.
    """

    def __init__(self, resource: str, id: Any, response: Optional[Response] = None):
        self.resource = resource
        self.id = id
        self.response = response
        self.status_code = response.status_code if response is not None else 404
        super().__init__(f"Resource [{resource}/{id}] not found")


class RequestFailedError(RestClientError):
    """Raised on a 5xx response or a connection-level failure.

    The original ``httpx`` exception is available as ``__cause__``.
    """

    def __init__(self, method: str, path: str, status_code: Optional[int] = None):
        self.method = method
        self.path = path
        self.status_code = status_code
        super().__init__(f"Request {method} {path} failed")


class ParseFailureError(RestClientError):
    """Raised by a response parser when the body does not have the expected shape."""

    def __init__(self, message: str, response: Optional[Response] = None):
        self.response = response
        super().__init__(message)
