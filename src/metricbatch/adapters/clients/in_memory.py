"""In-memory client adapter for the metrics ingestion API."""

from collections.abc import Sequence
from typing import Any

from metricbatch.core.encoding.wire import encode_request
from metricbatch.core.exceptions import TransportError
from metricbatch.core.models import Datum


class InMemoryMetricsClient:
    """In-memory implementation of MetricsClientPort.

    Records every submitted batch instead of sending it. Suitable for
    testing and dry runs.

    Args:
        fail_on_call: 1-based submission number that raises TransportError
            instead of being recorded (default: never fail).
    """

    def __init__(self, fail_on_call: int | None = None) -> None:
        self._batches: list[tuple[str, list[Datum]]] = []
        self._fail_on_call = fail_on_call
        self._calls = 0

    async def submit(self, namespace: str, datums: Sequence[Datum]) -> None:
        """Record one batch of datums."""
        self._calls += 1
        if self._calls == self._fail_on_call:
            raise TransportError(
                f"simulated failure on call {self._calls}", namespace, len(datums)
            )
        self._batches.append((namespace, list(datums)))

    @property
    def calls(self) -> int:
        """Number of submit() calls, including failed ones."""
        return self._calls

    @property
    def batches(self) -> list[tuple[str, list[Datum]]]:
        """Recorded (namespace, datums) batches in submission order."""
        return list(self._batches)

    @property
    def datums(self) -> list[Datum]:
        """All recorded datums, flattened in submission order."""
        return [d for _, batch in self._batches for d in batch]

    def requests(self) -> list[dict[str, Any]]:
        """Recorded batches encoded as PutMetricData request bodies."""
        return [encode_request(namespace, batch) for namespace, batch in self._batches]

    def clear(self) -> None:
        """Forget all recorded batches and reset the call counter."""
        self._batches.clear()
        self._calls = 0
