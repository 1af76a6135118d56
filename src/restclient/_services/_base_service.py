from logging import getLogger
from typing import Any, Optional

from httpx import (
    URL,
    AsyncClient,
    Client,
    Headers,
    HTTPStatusError,
    Request,
    Response,
    TransportError,
)

from .._config import Config
from .._utils import BodyType, RequestSpec, build_query, encode_body
from .._utils._body import Payload
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_LOCATION,
    HEADER_USER_AGENT,
    METHOD_GET,
)
from .._version import __version__
from ..auth import AuthenticationProvider
from ..models.errors import RequestFailedError
from ..models.requests import OutboundRequest
from ..signers import RequestSigner


def is_server_error(response: Response) -> bool:
    return response.status_code >= 500 and response.status_code < 600


def is_client_error(response: Response) -> bool:
    return response.status_code >= 400 and response.status_code < 500


def location_path(location: str) -> str:
    """Extract the resource-relative path from a ``Location`` header value.

    Absolute and relative URIs are accepted; scheme, host and query are
    dropped and surrounding slashes trimmed.
    """
    return URL(location).path.strip("/")


class BaseService:
    """Builds, signs, authenticates and sends requests against one endpoint.

    A request is built from a :class:`RequestSpec`, encoded with the body
    type currently configured, then passed through a fixed two-step
    pipeline: the request signer first, the authentication provider second.
    Either step is skipped when no strategy is registered.

    The body type, signer and authenticator are plain instance state. They
    are meant to be configured before the client is shared; changing them
    while requests are in flight is not synchronized.
    """

    def __init__(
        self,
        config: Config,
        http_client: Optional[Client] = None,
        http_client_async: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger("restclient")
        self._config = config

        self._body_type: BodyType = config.body_type
        self._request_signer: Optional[RequestSigner] = None
        self._auth_provider: Optional[AuthenticationProvider] = None

        # clients passed in belong to the caller and are never closed here
        self._http_client = http_client
        self._http_client_async = http_client_async
        self._owns_client = http_client is None
        self._owns_client_async = http_client_async is None

        super().__init__()

    def _client_kwargs(self) -> dict[str, Any]:
        return {
            **get_httpx_client_kwargs(self._config.timeout),
            "headers": Headers(self.default_headers),
        }

    @property
    def client(self) -> Client:
        if self._http_client is None:
            self._http_client = Client(**self._client_kwargs())
        return self._http_client

    @property
    def client_async(self) -> AsyncClient:
        if self._http_client_async is None:
            self._http_client_async = AsyncClient(**self._client_kwargs())
        return self._http_client_async

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    @property
    def body_type(self) -> BodyType:
        return self._body_type

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_USER_AGENT: f"restclient-python/{__version__}",
        }

    def use_request_signer(self, signer: Optional[RequestSigner]) -> None:
        """Register the request signer, replacing any previous one.

        Passing ``None`` removes the current signer.
        """
        self._request_signer = signer

    def use_authenticator(self, auth_provider: Optional[AuthenticationProvider]) -> None:
        """Register the authentication provider, replacing any previous one.

        Passing ``None`` removes the current provider.
        """
        self._auth_provider = auth_provider

    def set_body_type(self, body_type: BodyType | str) -> None:
        """Select how request bodies are encoded from now on.

        Requests that were already built keep the encoding they were built with.
        """
        self._body_type = BodyType(body_type.upper() if isinstance(body_type, str) else body_type)

    def build_request(self, spec: RequestSpec) -> OutboundRequest:
        url = self.endpoint + spec.path.lstrip("/")
        if spec.params:
            url += "?" + build_query(spec.params)

        content_type, content = encode_body(self._body_type, spec.data)

        return OutboundRequest(
            method=spec.method,
            url=url,
            headers={HEADER_CONTENT_TYPE: content_type},
            content=content,
        )

    def _prepare(self, spec: RequestSpec) -> OutboundRequest:
        request = self.build_request(spec)

        if self._request_signer is not None:
            request = self._request_signer.sign(request)

        if self._auth_provider is not None:
            request = self._auth_provider.authenticate(request)

        return request

    def _to_httpx(self, client: Client | AsyncClient, request: OutboundRequest) -> Request:
        return client.build_request(
            request.method,
            request.url,
            headers={**self.default_headers, **request.headers},
            content=request.content,
        )

    def _check_response(self, spec: RequestSpec, response: Response) -> Response:
        self._logger.debug(f"Response: {response.status_code} {spec.method} {spec.path}")

        if is_server_error(response):
            try:
                response.raise_for_status()
            except HTTPStatusError as e:
                raise RequestFailedError(
                    spec.method, spec.path, response.status_code
                ) from e

        return response

    def request(
        self,
        method: str,
        path: str,
        *,
        data: Optional[Payload] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Send one request to ``endpoint + path``.

        Args:
            method: The HTTP method.
            path: The resource-relative path.
            data: The body payload, encoded with the current body type.
            params: Query parameters; omitted from the URL when empty.

        Returns:
            Response: The completed response. 4xx responses are returned,
                not raised; callers decide what they mean.

        Raises:
            RequestFailedError: On a 5xx response or a connection-level failure.
        """
        spec = RequestSpec(method=method, path=path, data=data, params=params)
        request = self._prepare(spec)

        self._logger.debug(f"Request: {request.method} {request.url}")

        try:
            response = self.client.send(self._to_httpx(self.client, request))
        except TransportError as e:
            raise RequestFailedError(method, spec.path) from e

        return self._check_response(spec, response)

    async def request_async(
        self,
        method: str,
        path: str,
        *,
        data: Optional[Payload] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Asynchronous counterpart of :meth:`request`."""
        spec = RequestSpec(method=method, path=path, data=data, params=params)
        request = self._prepare(spec)

        self._logger.debug(f"Request: {request.method} {request.url}")

        try:
            response = await self.client_async.send(
                self._to_httpx(self.client_async, request)
            )
        except TransportError as e:
            raise RequestFailedError(method, spec.path) from e

        return self._check_response(spec, response)

    def follow_location(self, response: Response) -> Response:
        """GET the resource named by the response's ``Location`` header.

        Only one hop is made; a ``Location`` on the followed response is
        left to the caller.
        """
        path = location_path(response.headers[HEADER_LOCATION])
        self._logger.debug(f"Following Location: {path}")
        return self.request(METHOD_GET, path)

    async def follow_location_async(self, response: Response) -> Response:
        path = location_path(response.headers[HEADER_LOCATION])
        self._logger.debug(f"Following Location: {path}")
        return await self.request_async(METHOD_GET, path)

    def close(self) -> None:
        """Close the synchronous httpx client if this instance created it.

        An async client created by this instance is closed by :meth:`aclose`.
        """
        if self._owns_client and self._http_client is not None:
            self._http_client.close()

    async def aclose(self) -> None:
        """Close every httpx client this instance created."""
        if self._owns_client_async and self._http_client_async is not None:
            await self._http_client_async.aclose()
        self.close()
