"""Port interfaces for ingestion API clients.

The write path depends only on this protocol, not on a concrete client.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from metricbatch.core.models import Datum


@runtime_checkable
class MetricsClientPort(Protocol):
    """Port for submitting datums to the metrics ingestion API.

    Examples: InMemoryMetricsClient, SQLiteMetricsClient.
    """

    async def submit(self, namespace: str, datums: Sequence[Datum]) -> None:
        """Submit one batch of at most MAX_DATUMS_PER_CALL datums.

        Args:
            namespace: Target namespace for every datum in the batch.
            datums: Datums to submit.

        Raises:
            TransportError: If the submission fails.
        """
        ...
