from os import environ as env
from types import TracebackType
from typing import Any, Optional

from dotenv import load_dotenv
from httpx import AsyncClient, Client, HTTPStatusError, Response

from ._config import Config
from ._services import BaseService
from ._services._base_service import is_client_error
from ._utils import BodyType, setup_logging
from ._utils._body import Payload
from ._utils.constants import (
    ENV_BODY_TYPE,
    ENV_ENDPOINT,
    ENV_TIMEOUT,
    HEADER_LOCATION,
    METHOD_DELETE,
    METHOD_GET,
    METHOD_PATCH,
    METHOD_POST,
    METHOD_PUT,
)
from .models.errors import (
    EndpointMissingError,
    ResourceNotFoundError,
    ResponseParserMissingError,
)
from .parsers import ResponseParser

load_dotenv()


def _path(resource: str, id: Any = None) -> str:
    resource = resource.strip("/")
    if id is None:
        return f"{resource}/"
    return f"{resource}/{id}"


def _raise_not_found(resource: str, id: Any, response: Response) -> None:
    if is_client_error(response):
        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            raise ResourceNotFoundError(resource.strip("/"), id, response) from e


class RestClient(BaseService):
    """CRUD client for the resources exposed under one REST endpoint.

    Resources are addressed as ``endpoint/resource/`` (collections) and
    ``endpoint/resource/id`` (single items). Every operation has an
    asynchronous twin with an ``_async`` suffix.

    Examples:
        ```python
        from restclient import BearerTokenAuthenticator, JsonResponseParser, RestClient

        client = RestClient("https://api.example.com", JsonResponseParser())
        client.use_authenticator(BearerTokenAuthenticator("token"))

        user = client.get("users", 7)
        page = client.get_all("users", {"page": 2})
        created = client.create("users", {"name": "Ada"})
        client.update("users", 7, {"name": "Ada L."}, partial=True)
        client.delete("users", 7)
        ```
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        response_parser: Optional[ResponseParser] = None,
        *,
        body_type: Optional[BodyType | str] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
        http_client: Optional[Client] = None,
        http_client_async: Optional[AsyncClient] = None,
    ) -> None:
        """Initialize the client.

        Args:
            endpoint: Base URI of the API. Read from ``RESTCLIENT_ENDPOINT``
                when not given.
            response_parser: Turns responses into results. Required.
            body_type: ``JSON`` or ``FORM`` (default). Read from
                ``RESTCLIENT_BODY_TYPE`` when not given.
            timeout: Transport timeout in seconds. Read from
                ``RESTCLIENT_TIMEOUT`` when not given.
            debug: Enable debug logging.
            http_client: Preconfigured ``httpx.Client`` to send requests with.
            http_client_async: Preconfigured ``httpx.AsyncClient`` for the
                ``_async`` operations.

        Raises:
            EndpointMissingError: If no endpoint is given or configured.
            ResponseParserMissingError: If no response parser is given.
        """
        endpoint_value = endpoint or env.get(ENV_ENDPOINT)
        if not endpoint_value:
            raise EndpointMissingError()

        if response_parser is None:
            raise ResponseParserMissingError()
        if not isinstance(response_parser, ResponseParser):
            raise TypeError(
                f"{type(response_parser).__name__} does not implement parse(response)"
            )

        config_values: dict[str, Any] = {"endpoint": endpoint_value}
        body_type_value = body_type or env.get(ENV_BODY_TYPE)
        if body_type_value:
            config_values["body_type"] = body_type_value
        timeout_value = timeout or env.get(ENV_TIMEOUT)
        if timeout_value:
            config_values["timeout"] = timeout_value

        setup_logging(debug)

        super().__init__(
            Config(**config_values),
            http_client=http_client,
            http_client_async=http_client_async,
        )
        self._response_parser = response_parser

    @property
    def response_parser(self) -> ResponseParser:
        return self._response_parser

    def get(self, resource: str, id: Any) -> Any:
        """Fetch a single resource.

        Raises:
            ResourceNotFoundError: If the server answers with a 4xx status.
            RequestFailedError: On a 5xx status or a connection failure.
            ParseFailureError: If the body cannot be parsed.
        """
        response = self.request(METHOD_GET, _path(resource, id))
        _raise_not_found(resource, id, response)

        return self._response_parser.parse(response)

    async def get_async(self, resource: str, id: Any) -> Any:
        response = await self.request_async(METHOD_GET, _path(resource, id))
        _raise_not_found(resource, id, response)

        return self._response_parser.parse(response)

    def get_all(self, resource: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Fetch a resource collection, passing ``params`` as the query string."""
        response = self.request(METHOD_GET, _path(resource), params=params)

        return self._response_parser.parse(response)

    async def get_all_async(
        self, resource: str, params: Optional[dict[str, Any]] = None
    ) -> Any:
        response = await self.request_async(METHOD_GET, _path(resource), params=params)

        return self._response_parser.parse(response)

    def create(self, resource: str, data: Payload) -> Any:
        """Create a resource.

        A non-empty response body is parsed and returned. Otherwise, when the
        server answers with a ``Location`` header, the created resource is
        fetched from there. With neither, ``None`` is returned.
        """
        response = self.request(METHOD_POST, _path(resource), data=data)

        if response.text.strip():
            return self._response_parser.parse(response)

        if HEADER_LOCATION in response.headers:
            return self._response_parser.parse(self.follow_location(response))

        return None

    async def create_async(self, resource: str, data: Payload) -> Any:
        response = await self.request_async(METHOD_POST, _path(resource), data=data)

        if response.text.strip():
            return self._response_parser.parse(response)

        if HEADER_LOCATION in response.headers:
            return self._response_parser.parse(
                await self.follow_location_async(response)
            )

        return None

    def update(
        self, resource: str, id: Any, data: Payload, partial: bool = False
    ) -> Any:
        """Replace a resource with PUT, or modify it with PATCH when ``partial``.

        When the server answers with a ``Location`` header the updated
        resource is fetched from there; otherwise the response body is parsed.

        Raises:
            ResourceNotFoundError: If the server answers with a 4xx status.
        """
        method = METHOD_PATCH if partial else METHOD_PUT

        response = self.request(method, _path(resource, id), data=data)
        _raise_not_found(resource, id, response)

        if HEADER_LOCATION in response.headers:
            response = self.follow_location(response)
            _raise_not_found(resource, id, response)

        return self._response_parser.parse(response)

    async def update_async(
        self, resource: str, id: Any, data: Payload, partial: bool = False
    ) -> Any:
        method = METHOD_PATCH if partial else METHOD_PUT

        response = await self.request_async(method, _path(resource, id), data=data)
        _raise_not_found(resource, id, response)

        if HEADER_LOCATION in response.headers:
            response = await self.follow_location_async(response)
            _raise_not_found(resource, id, response)

        return self._response_parser.parse(response)

    def delete(self, resource: str, id: Any) -> bool:
        """Delete a resource.

        Returns:
            bool: True only when the server answers 204 No Content.

        Raises:
            ResourceNotFoundError: If the server answers with a 4xx status.
        """
        response = self.request(METHOD_DELETE, _path(resource, id))
        _raise_not_found(resource, id, response)

        return response.status_code == 204

    async def delete_async(self, resource: str, id: Any) -> bool:
        response = await self.request_async(METHOD_DELETE, _path(resource, id))
        _raise_not_found(resource, id, response)

        return response.status_code == 204

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
