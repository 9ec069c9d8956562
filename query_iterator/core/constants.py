from __future__ import annotations

DEFAULT_CHUNK_SIZE = 1000

# chunk_size bounds, shared by IteratorConfig and Settings
MIN_CHUNK_SIZE = 1
MAX_CHUNK_SIZE = 100_000

LOGGER_NAME = "query_iterator"
