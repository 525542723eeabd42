"""Application webhooks – BatchDispatcher paces many sends through one engine."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from matchday_relay.application.rate_limit import IntervalRateLimiter
from matchday_relay.application.webhooks.results import BatchResult, SendResult
from matchday_relay.observability.logging import get_logger

__all__ = ["BatchDispatcher", "chunked"]

logger = get_logger(__name__)

SendOne = Callable[..., SendResult]


def chunked(items: Sequence[Any], size: int) -> list[Sequence[Any]]:
    if size < 1:
        raise ValueError("chunk size must be at least 1")
    return [items[i : i + size] for i in range(0, len(items), size)]


class BatchDispatcher:
    """Sends payloads in fixed-size chunks.

    Items inside a chunk go out back-to-back with the per-call limiter
    bypassed; one limiter interval is slept between chunks. Every item is
    attempted regardless of earlier failures and nothing is rolled back.
    """

    def __init__(self, send_one: SendOne, rate_limiter: IntervalRateLimiter, batch_size: int = 5) -> None:
        self._send_one = send_one
        self._rate_limiter = rate_limiter
        self._batch_size = batch_size

    def send_batch(
        self,
        payloads: Sequence[Mapping[str, Any]],
        *,
        batch_size: int | None = None,
        **options: Any,
    ) -> BatchResult:
        options["skip_rate_limit"] = True
        result = BatchResult()
        chunks = chunked(list(payloads), self._batch_size if batch_size is None else batch_size)

        for index, chunk in enumerate(chunks):
            if index > 0:
                self._rate_limiter.pause()
            for payload in chunk:
                result.results.append(self._send_one(payload, **options))

        logger.info(
            "webhook.batch_completed",
            total=result.total_count,
            succeeded=result.success_count,
            chunks=len(chunks),
        )
        return result
