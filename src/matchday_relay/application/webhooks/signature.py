"""Application webhooks – traceability signature for outbound payloads."""
from __future__ import annotations

import hashlib
import hmac
import uuid

__all__ = ["WebhookSigner"]


class WebhookSigner:
    """Produces the ``webhook.signature`` token.

    With a secret the token is ``sha256=<hmac hexdigest>`` of the payload's
    canonical business content, which a receiver holding the same secret can
    check with :meth:`verify`. Without one it is an opaque ``trace_<uuid>``
    that carries no integrity guarantee.
    """

    ALG = "sha256"

    def __init__(self, secret: str = "") -> None:
        self._secret = secret

    @property
    def keyed(self) -> bool:
        return bool(self._secret)

    def token(self, canonical: bytes) -> str:
        if not self._secret:
            return f"trace_{uuid.uuid4().hex}"
        return self.sign(canonical, self._secret)

    @classmethod
    def sign(cls, payload: bytes, secret: str) -> str:
        """Return a signature string of the form ``sha256=<hexdigest>``."""
        mac = hmac.new(secret.encode(), payload, hashlib.sha256)
        return f"{cls.ALG}={mac.hexdigest()}"

    @classmethod
    def verify(cls, payload: bytes, secret: str, signature: str) -> bool:
        """Verify *signature* using constant-time comparison."""
        expected = cls.sign(payload, secret)
        return hmac.compare_digest(expected.encode(), signature.encode())
