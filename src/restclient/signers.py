"""Request signers.

A signer receives the fully built :class:`OutboundRequest` and returns a
derived request carrying signing metadata. Signers run before the
authentication provider and must not depend on it.
"""

import hashlib
import hmac
from typing import Protocol, runtime_checkable

from ._utils.constants import HEADER_SIGNATURE, HEADER_SIGNATURE_KEY
from .models.requests import OutboundRequest


@runtime_checkable
class RequestSigner(Protocol):
    def sign(self, request: OutboundRequest) -> OutboundRequest: ...


class HmacRequestSigner:
    """Signs requests with an HMAC over method, URL and body.

    The signed message is ``METHOD\\nURL\\nBODY``. The hex digest is sent in
    ``header`` and the key id in ``key_header``.

    Examples:
        ```python
        client.use_request_signer(HmacRequestSigner("key-1", "s3cr3t"))
        ```
    """

    def __init__(
        self,
        key_id: str,
        secret: str,
        *,
        header: str = HEADER_SIGNATURE,
        key_header: str = HEADER_SIGNATURE_KEY,
        digestmod: str = "sha256",
    ) -> None:
        self.key_id = key_id
        self._secret = secret.encode("utf-8")
        self.header = header
        self.key_header = key_header
        self.digestmod = digestmod

    def signature(self, request: OutboundRequest) -> str:
        message = b"\n".join(
            [request.method.encode("ascii"), request.url.encode("utf-8"), request.content]
        )
        return hmac.new(self._secret, message, getattr(hashlib, self.digestmod)).hexdigest()

    def sign(self, request: OutboundRequest) -> OutboundRequest:
        return request.with_headers(
            {
                self.key_header: self.key_id,
                self.header: self.signature(request),
            }
        )
