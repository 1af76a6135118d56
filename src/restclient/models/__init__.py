from .errors import (
    EndpointMissingError,
    ParseFailureError,
    RequestFailedError,
    ResourceNotFoundError,
    ResponseParserMissingError,
    RestClientError,
)
from .requests import OutboundRequest

__all__ = [
    "EndpointMissingError",
    "OutboundRequest",
    "ParseFailureError",
    "RequestFailedError",
    "ResourceNotFoundError",
    "ResponseParserMissingError",
    "RestClientError",
]
