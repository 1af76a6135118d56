from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Union
from urllib.parse import urlencode

from pydantic import BaseModel
from pydantic_core import to_json

from .constants import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON

Payload = Union[Mapping[str, Any], BaseModel]


class BodyType(str, Enum):
    """Encoding used for request bodies."""

    JSON = "JSON"
    FORM = "FORM"


def _as_mapping(data: Optional[Payload]) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return _dump_model(data)
    return data


def _dump_model(model: BaseModel) -> dict[str, Any]:
    # models are always dumped by alias without None fields, at any depth
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _dump_models(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return _dump_model(value)
    if isinstance(value, Mapping):
        return {key: _dump_models(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_dump_models(item) for item in value]
    return value


def _flatten(data: Mapping[Any, Any], prefix: Optional[str] = None) -> Iterator[tuple[str, str]]:
    for key, value in data.items():
        name = f"{prefix}[{key}]" if prefix is not None else str(key)

        if value is None:
            continue
        if isinstance(value, BaseModel):
            yield from _flatten(_as_mapping(value), name)
        elif isinstance(value, Mapping):
            yield from _flatten(value, name)
        elif isinstance(value, (list, tuple)):
            yield from _flatten(dict(enumerate(value)), name)
        elif isinstance(value, bool):
            yield name, "1" if value else "0"
        elif isinstance(value, Enum):
            yield name, str(value.value)
        else:
            yield name, str(value)


def build_query(data: Optional[Payload]) -> str:
    """Percent-encode a mapping as ``key=value`` pairs joined by ``&``.

    Nested mappings and sequences are flattened into ``key[sub]`` names,
    booleans become ``1``/``0`` and ``None`` values are left out.

    Examples:
        ```python
        >>> build_query({"page": 2, "filter": {"name": "ada lovelace"}})
        'page=2&filter%5Bname%5D=ada+lovelace'
        ```
    """
    return urlencode(list(_flatten(_as_mapping(data))))


def encode_body(body_type: BodyType, data: Optional[Payload]) -> tuple[str, bytes]:
    """Serialize a request payload.

    Args:
        body_type: The encoding to apply.
        data: The payload. ``None`` is treated as an empty mapping.

    Returns:
        tuple[str, bytes]: The content type header value and the encoded body.
    """
    if body_type == BodyType.JSON:
        return CONTENT_TYPE_JSON, to_json(_dump_models(_as_mapping(data)))

    return CONTENT_TYPE_FORM, build_query(data).encode("ascii")
