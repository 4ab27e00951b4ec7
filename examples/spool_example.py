"""Example writing metrics to a local SQLite spool.

Run with:
    python examples/spool_example.py

Converts a few metrics with statistic aggregation enabled, writes them
through MetricsWriter in batches of twenty, then prints what was stored.
"""

import asyncio
import logging

from metricbatch import MetricsWriter, OutputConfig, SQLiteMetricsClient, metric


async def main() -> None:
    client = SQLiteMetricsClient("spool.db")
    writer = MetricsWriter(
        client,
        OutputConfig(
            namespace="Example/App",
            high_resolution_metrics=True,
            write_statistics=True,
        ),
    )
    await writer.connect()
    try:
        metrics = [
            metric(
                "http",
                {
                    "latency_min": 0.004,
                    "latency_max": 0.250,
                    "latency_sum": 3.1,
                    "latency_count": 40,
                    "requests": 40,
                    "healthy": True,
                },
                tags={"host": "web-1", "region": "eu-west-1", "path": "/"},
            ),
            # Incomplete statistic set: sent as http_queue_min / http_queue_max
            metric("http", {"queue_min": 0, "queue_max": 12}, tags={"host": "web-1"}),
        ]
        submitted = await writer.write(metrics)
        print(f"submitted {submitted} datums")
        async for datum in client.read("Example/App"):
            print(datum)
    finally:
        await writer.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
