from ._body import BodyType, build_query, encode_body
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "BodyType",
    "build_query",
    "encode_body",
    "setup_logging",
    "RequestSpec",
    "get_httpx_client_kwargs",
]
