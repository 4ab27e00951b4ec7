"""Encoders for ingestion API payloads."""

from metricbatch.core.encoding.wire import encode_datum, encode_request

__all__ = ["encode_datum", "encode_request"]
