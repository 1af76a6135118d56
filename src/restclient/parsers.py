"""Response parsers.

A response parser turns a completed :class:`httpx.Response` into the value
returned by the client operations. Parsers raise :class:`ParseFailureError`
when the body does not match what they expect; they never fall back to an
empty value.
"""

import json
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

from httpx import Response
from pydantic import TypeAdapter, ValidationError

from .models.errors import ParseFailureError

T = TypeVar("T")


@runtime_checkable
class ResponseParser(Protocol):
    def parse(self, response: Response) -> Any: ...


class JsonResponseParser:
    """Decodes the body as JSON.

    Args:
        key: Optional envelope key. When set, the parser returns
            ``body[key]`` and fails if the body is not an object holding it.
    """

    def __init__(self, key: Optional[str] = None) -> None:
        self.key = key

    def parse(self, response: Response) -> Any:
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseFailureError(
                "Response body is not valid JSON",
                response,
            ) from e

        if self.key is None:
            return body

        if not isinstance(body, dict) or self.key not in body:
            raise ParseFailureError(
                f"Response body has no '{self.key}' member", response
            )
        return body[self.key]


class ModelResponseParser(JsonResponseParser, Generic[T]):
    """Decodes the body as JSON and validates it into ``model``.

    ``model`` is any type pydantic can validate: a ``BaseModel`` subclass,
    ``list[SomeModel]``, a ``TypedDict``...

    Examples:
        ```python
        client = RestClient("https://api.example.com", ModelResponseParser(User))
        user = client.get("users", 7)
        ```
    """

    def __init__(self, model: type[T], key: Optional[str] = None) -> None:
        super().__init__(key)
        self.model = model
        self._adapter: TypeAdapter[T] = TypeAdapter(model)

    def parse(self, response: Response) -> T:
        body = super().parse(response)
        try:
            return self._adapter.validate_python(body)
        except ValidationError as e:
            raise ParseFailureError(
                f"Response body does not match {self.model!r}: {e.error_count()} validation error(s)",
                response,
            ) from e
