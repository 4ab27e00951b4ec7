"""Write driver turning metrics into submitted datum partitions."""

import logging
from collections.abc import Iterable

from metricbatch.core.aggregate import build_datums_for_metrics
from metricbatch.core.config import OutputConfig
from metricbatch.core.exceptions import TransportError
from metricbatch.core.models import Datum, Metric
from metricbatch.core.partition import MAX_DATUMS_PER_CALL, partition_datums
from metricbatch.core.ports import MetricsClientPort

logger = logging.getLogger(__name__)


class MetricsWriter:
    """Converts metrics to datums and submits them in API-sized partitions.

    Example:
        ```python
        from metricbatch import (
            InMemoryMetricsClient,
            MetricsWriter,
            OutputConfig,
            metric,
        )

        client = InMemoryMetricsClient()
        writer = MetricsWriter(client, OutputConfig(namespace="App/Web"))
        await writer.write([metric("http", {"latency": 42.0})])
        ```
    """

    def __init__(self, client: MetricsClientPort, config: OutputConfig) -> None:
        """Initialize the writer with a client and its settings.

        Args:
            client: Client implementing MetricsClientPort.
            config: Namespace, resolution and statistics settings.
        """
        self._client = client
        self._config = config

    @property
    def config(self) -> OutputConfig:
        return self._config

    def build_datums(self, metrics: Iterable[Metric]) -> list[Datum]:
        """Convert metrics into one flat datum list using the writer's config."""
        return build_datums_for_metrics(
            metrics,
            write_statistics=self._config.write_statistics,
            high_resolution=self._config.high_resolution_metrics,
        )

    async def connect(self) -> None:
        """Connect the client if it supports connecting."""
        connect = getattr(self._client, "connect", None)
        if connect is not None:
            await connect()

    async def close(self) -> None:
        """Close the client if it supports closing."""
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()

    async def write(self, metrics: Iterable[Metric]) -> int:
        """Convert and submit metrics.

        All datums are built before the first submission. Partitions are
        submitted one at a time, in order; the first failure stops the write.

        Args:
            metrics: Metrics collected during one write cycle.

        Returns:
            Number of datums submitted.

        Raises:
            TransportError: If a partition submission fails. Earlier
                partitions have already been submitted.
        """
        datums = self.build_datums(metrics)
        namespace = self._config.namespace
        submitted = 0
        for partition in partition_datums(datums, MAX_DATUMS_PER_CALL):
            try:
                await self._client.submit(namespace, partition)
            except TransportError as e:
                logger.error("Unable to write to namespace %s: %s", namespace, e)
                raise
            except Exception as e:
                logger.error("Unable to write to namespace %s: %s", namespace, e)
                raise TransportError(str(e), namespace, len(partition)) from e
            submitted += len(partition)
        logger.debug("Submitted %d datums to namespace %s", submitted, namespace)
        return submitted
