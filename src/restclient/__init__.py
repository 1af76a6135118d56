"""Generic REST resource client.

Performs CRUD operations against the resources of a REST endpoint with
pluggable request signing, authentication and response parsing.
"""

from ._config import Config
from ._rest_client import RestClient
from ._utils import BodyType
from ._version import __version__
from .auth import (
    ApiKeyAuthenticator,
    AuthenticationProvider,
    BasicAuthenticator,
    BearerTokenAuthenticator,
)
from .models import (
    EndpointMissingError,
    OutboundRequest,
    ParseFailureError,
    RequestFailedError,
    ResourceNotFoundError,
    ResponseParserMissingError,
    RestClientError,
)
from .parsers import JsonResponseParser, ModelResponseParser, ResponseParser
from .signers import HmacRequestSigner, RequestSigner

__all__ = [
    "__version__",
    "ApiKeyAuthenticator",
    "AuthenticationProvider",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "BodyType",
    "Config",
    "EndpointMissingError",
    "HmacRequestSigner",
    "JsonResponseParser",
    "ModelResponseParser",
    "OutboundRequest",
    "ParseFailureError",
    "RequestFailedError",
    "RequestSigner",
    "ResourceNotFoundError",
    "ResponseParser",
    "ResponseParserMissingError",
    "RestClient",
    "RestClientError",
]
