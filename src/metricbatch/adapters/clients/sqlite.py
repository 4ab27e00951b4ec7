"""SQLite client adapter that spools submitted datums locally."""

import asyncio
import json
from collections.abc import AsyncIterable, AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

import aiosqlite

from metricbatch.core.models import Datum, Dimension, StatisticSet

_DATUMS_SCHEMA = """
CREATE TABLE IF NOT EXISTS datums (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    namespace TEXT NOT NULL,
    batch INTEGER NOT NULL,
    name TEXT NOT NULL,
    dimensions TEXT NOT NULL DEFAULT '[]',
    timestamp REAL NOT NULL,
    storage_resolution INTEGER NOT NULL,
    value REAL,
    minimum REAL,
    maximum REAL,
    sum REAL,
    sample_count REAL
);
CREATE INDEX IF NOT EXISTS idx_datums_namespace ON datums(namespace);
"""

_NEXT_BATCH = """
SELECT COALESCE(MAX(batch), 0) + 1 FROM datums
"""

_INSERT_DATUM = """
INSERT INTO datums (
    namespace, batch, name, dimensions, timestamp, storage_resolution,
    value, minimum, maximum, sum, sample_count
) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""

_SELECT_COLUMNS = """
SELECT name, dimensions, timestamp, storage_resolution,
       value, minimum, maximum, sum, sample_count
FROM datums
"""

_COUNT_DATUMS = """
SELECT COUNT(*) FROM datums
"""


def _to_row(namespace: str, batch: int, datum: Datum) -> tuple[Any, ...]:
    stats = datum.statistic_values
    return (
        namespace,
        batch,
        datum.metric_name,
        json.dumps([[d.name, d.value] for d in datum.dimensions]),
        datum.timestamp,
        datum.storage_resolution,
        datum.value,
        stats.minimum if stats else None,
        stats.maximum if stats else None,
        stats.sum if stats else None,
        stats.sample_count if stats else None,
    )


def _from_row(row: Any) -> Datum:
    statistic_values = None
    if row[4] is None:
        statistic_values = StatisticSet(
            minimum=row[5], maximum=row[6], sum=row[7], sample_count=row[8]
        )
    return Datum(
        metric_name=row[0],
        dimensions=tuple(Dimension(name=n, value=v) for n, v in json.loads(row[1])),
        timestamp=row[2],
        storage_resolution=row[3],
        value=row[4],
        statistic_values=statistic_values,
    )


class SQLiteMetricsClient:
    """SQLite implementation of MetricsClientPort.

    Stores each submitted batch in a SQLite database using aiosqlite. Uses
    WAL mode for file databases. For :memory: databases, a persistent
    connection is maintained since in-memory databases are connection-scoped
    in SQLite.

    Args:
        db_path: Database file path, or ":memory:".
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._initialized = False
        self._init_lock: asyncio.Lock | None = None
        self._write_lock: asyncio.Lock | None = None
        self._persistent_conn: aiosqlite.Connection | None = None

    def _get_lock(self) -> asyncio.Lock:
        """Get or create the initialization lock (lazy to avoid event loop issues)."""
        if self._init_lock is None:
            self._init_lock = asyncio.Lock()
        return self._init_lock

    def _get_write_lock(self) -> asyncio.Lock:
        """Get or create the lock serializing batch number allocation."""
        if self._write_lock is None:
            self._write_lock = asyncio.Lock()
        return self._write_lock

    async def _ensure_initialized(self) -> None:
        """Initialize database schema once."""
        if self._initialized:
            return
        async with self._get_lock():
            if self._initialized:
                return
            if self._db_path == ":memory:":
                self._persistent_conn = await aiosqlite.connect(":memory:")
                await self._persistent_conn.executescript(_DATUMS_SCHEMA)
            else:
                async with aiosqlite.connect(self._db_path) as db:
                    await db.execute("PRAGMA journal_mode=WAL")
                    await db.executescript(_DATUMS_SCHEMA)
            self._initialized = True

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield a connection, closing it afterwards for file databases."""
        await self._ensure_initialized()
        if self._db_path == ":memory:":
            if self._persistent_conn is None:
                raise RuntimeError("Memory database connection not initialized")
            yield self._persistent_conn
            return
        db = await aiosqlite.connect(self._db_path)
        try:
            yield db
        finally:
            await db.close()

    async def connect(self) -> None:
        """Create the schema ahead of the first submission."""
        await self._ensure_initialized()

    async def submit(self, namespace: str, datums: Sequence[Datum]) -> None:
        """Store one batch of datums under a new batch number."""
        # Batch number lookup and insert must not interleave with other submits.
        async with self._get_write_lock(), self._connection() as db:
            async with db.execute(_NEXT_BATCH) as cursor:
                row = await cursor.fetchone()
            batch = row[0] if row else 1
            await db.executemany(
                _INSERT_DATUM, [_to_row(namespace, batch, d) for d in datums]
            )
            await db.commit()

    async def read(self, namespace: str | None = None) -> AsyncIterable[Datum]:
        """Read stored datums in submission order.

        Args:
            namespace: Only return datums stored under this namespace.
                       Default None returns all datums.
        """
        if namespace is None:
            query, params = _SELECT_COLUMNS + " ORDER BY id ASC", ()
        else:
            query = _SELECT_COLUMNS + " WHERE namespace = ? ORDER BY id ASC"
            params = (namespace,)
        async with self._connection() as db:
            async with db.execute(query, params) as cursor:
                async for row in cursor:
                    yield _from_row(row)

    async def count(self) -> int:
        """Return total number of stored datums."""
        async with self._connection() as db:
            async with db.execute(_COUNT_DATUMS) as cursor:
                row = await cursor.fetchone()
                return row[0] if row else 0

    async def batch_count(self) -> int:
        """Return the number of stored batches."""
        async with self._connection() as db:
            async with db.execute("SELECT COUNT(DISTINCT batch) FROM datums") as cursor:
                row = await cursor.fetchone()
                return row[0] if row else 0

    async def close(self) -> None:
        """Close persistent connection (for :memory: databases)."""
        if self._persistent_conn is not None:
            await self._persistent_conn.close()
            self._persistent_conn = None
            self._initialized = False
