"""Application webhooks – PayloadEnricher builds the wire representation."""
from __future__ import annotations

import copy
import uuid
from typing import Any, Mapping

from matchday_relay.application.webhooks.fingerprint import canonical_json
from matchday_relay.application.webhooks.router import RouterResolver
from matchday_relay.application.webhooks.signature import WebhookSigner
from matchday_relay.config.settings import RelaySettings
from matchday_relay.kernel.time import Clock, SystemClock, iso_now

__all__ = ["PayloadEnricher"]


class PayloadEnricher:
    """Returns a new payload with ``system``, ``webhook`` and ``club`` blocks.

    The input mapping is deep-copied and never modified. A top-level
    ``privacy`` mapping is kept as-is and also copied into the legacy
    top-level ``anonymise_faces`` / ``use_initials_only`` fields that older
    receiver scenarios read.
    """

    def __init__(
        self,
        settings: RelaySettings,
        router: RouterResolver,
        *,
        clock: Clock | None = None,
        session_id: str | None = None,
        signer: WebhookSigner | None = None,
    ) -> None:
        self._settings = settings
        self._router = router
        self._clock = clock or SystemClock()
        self.session_id = session_id or uuid.uuid4().hex
        self._signer = signer or WebhookSigner(settings.signing_secret)

    def enrich(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        enriched: dict[str, Any] = copy.deepcopy(dict(payload))
        now = iso_now(self._clock)
        event_type = str(enriched.get("event_type", ""))

        enriched["system"] = {
            "version": self._settings.version,
            "environment": self._settings.environment,
            "timestamp": now,
            "session_id": self.session_id,
        }
        enriched["webhook"] = {
            "sent_at": now,
            "attempt": 1,
            "priority": self._router.priority_for(enriched).value,
            "router_lane": self._router.route_for(event_type),
            "signature": self._signature(payload),
        }
        enriched["club"] = {
            "name": self._settings.club_name,
            "short_name": self._settings.club_short_name,
            "season": self._settings.season,
        }

        privacy = enriched.get("privacy")
        if isinstance(privacy, Mapping):
            enriched["anonymise_faces"] = bool(privacy.get("anonymise_faces", privacy.get("blur_faces", False)))
            enriched["use_initials_only"] = bool(privacy.get("use_initials_only", privacy.get("initials_only", False)))
        return enriched

    def _signature(self, payload: Mapping[str, Any]) -> str:
        if not self._signer.keyed:
            return self._signer.token(b"")
        return self._signer.token(canonical_json(payload))
