from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from httpx import URL


@dataclass(frozen=True)
class OutboundRequest:
    """An HTTP request that has been built but not yet sent.

    Instances are immutable. Request signers and authentication providers
    derive new instances with :meth:`with_headers` and :meth:`with_params`
    instead of changing the one they were given.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    def with_headers(self, headers: Mapping[str, str]) -> "OutboundRequest":
        """Return a copy with ``headers`` merged over the existing ones."""
        return replace(self, headers={**self.headers, **headers})

    def with_params(self, params: Mapping[str, Any]) -> "OutboundRequest":
        """Return a copy with ``params`` merged into the query string."""
        return replace(self, url=str(URL(self.url).copy_merge_params(dict(params))))

    @property
    def path(self) -> str:
        return URL(self.url).path
