"""Snowflake-style ID generator for entity IDs (users, games, orders, payments).

Generates monotonically increasing, unique string IDs within one process.
IDs from one generator sort by creation order when compared as integers.
"""

import threading
import time


class SnowflakeIdGenerator:
    """Simple snowflake ID generator.

    Layout (64 bits):
      - 41 bits: millisecond timestamp (since custom epoch)
      - 10 bits: node_id (0-1023)
      - 12 bits: sequence (0-4095 per millisecond)
    """

    _EPOCH_MS = 1_700_000_000_000
    _NODE_BITS = 10
    _SEQUENCE_BITS = 12
    _MAX_SEQUENCE = (1 << _SEQUENCE_BITS) - 1

    def __init__(self, node_id: int = 0) -> None:
        if not (0 <= node_id < (1 << self._NODE_BITS)):
            raise ValueError(f"node_id must be 0-{(1 << self._NODE_BITS) - 1}")
        self._node_id = node_id
        self._sequence = 0
        self._last_ms = -1
        self._lock = threading.Lock()

    def next_id(self, prefix: str = "") -> str:
        with self._lock:
            ts = self._now_ms()
            if ts < self._last_ms:
                # clock went backwards; keep issuing from the last timestamp
                ts = self._last_ms
            if ts == self._last_ms:
                self._sequence = (self._sequence + 1) & self._MAX_SEQUENCE
                if self._sequence == 0:
                    ts = self._wait_past(ts)
            else:
                self._sequence = 0

            self._last_ms = ts
            value = (
                ((ts - self._EPOCH_MS) << (self._NODE_BITS + self._SEQUENCE_BITS))
                | (self._node_id << self._SEQUENCE_BITS)
                | self._sequence
            )
            return f"{prefix}{value}"

    def _now_ms(self) -> int:
        return int(time.time() * 1000)

    def _wait_past(self, last_ms: int) -> int:
        ts = self._now_ms()
        while ts <= last_ms:
            ts = self._now_ms()
        return ts


_default_generator = SnowflakeIdGenerator()


def generate_id(prefix: str = "") -> str:
    """Unique ID from the module-level generator, e.g. generate_id("ord_")."""
    return _default_generator.next_id(prefix)
