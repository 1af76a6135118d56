from dataclasses import dataclass
from typing import Any, Optional

from ._body import Payload


@dataclass
class RequestSpec:
    """A logical operation against a resource path.

    Holds everything needed to build one outbound request: the HTTP method,
    the resource-relative path, the body payload and the query parameters.
    """

    method: str
    path: str
    data: Optional[Payload] = None
    params: Optional[dict[str, Any]] = None
