"""Exceptions raised by metricbatch."""


class MetricBatchError(Exception):
    """Base class for metricbatch errors."""


class TransportError(MetricBatchError):
    """Submitting a partition to the ingestion API failed.

    Partitions submitted before the failing one have already been accepted.
    """

    def __init__(self, message: str, namespace: str, partition_size: int) -> None:
        super().__init__(message)
        self.namespace = namespace
        self.partition_size = partition_size
