"""Core conversion, aggregation and batching logic."""
