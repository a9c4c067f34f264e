"""Clients known to a replica, their queued transactions and reply bookkeeping."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol


class TransactionLike(Protocol):
    """What the registry needs from a transaction."""

    client_id: int
    transaction_id: int


@dataclass
class ClientInfo:
    """State of one client: whether it still runs, and how much it sent and got back."""

    connection: Any
    running: bool = True
    received: int = 0
    replied: int = 0


@dataclass
class ClientRegistry:
    """Known clients plus the queue of transactions waiting to go into a block.

    ``capacity`` bounds the queue; ``None`` leaves it unbounded.
    """

    capacity: int | None = None
    clients: dict[int, ClientInfo] = field(default_factory=dict)
    _queue: deque = field(default_factory=deque, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity is not None and self.capacity < 0:
            raise ValueError(f"queue capacity cannot be negative, got {self.capacity}")

    def __len__(self) -> int:
        """Number of transactions waiting to be put into a block."""
        with self._lock:
            return len(self._queue)

    def register(self, client_id: int, connection: Any) -> bool:
        """Record a starting client; return True if it was not known before.

        A client already known keeps its existing state and connection.
        """
        if client_id in self.clients:
            return False
        self.clients[client_id] = ClientInfo(connection)
        return True

    def accept_transaction(self, client_id: int, transaction: Any) -> bool:
        """Queue ``transaction`` if it comes from a known, running client.

        Return False when the client is unknown or stopped, or the queue is full.
        """
        with self._lock:
            info = self.clients.get(client_id)
            if info is None or not info.running:
                return False
            if self.capacity is not None and len(self._queue) >= self.capacity:
                return False
            info.received += 1
            self._queue.append(transaction)
            return True

    def pending_replies(self, entries: Iterable[TransactionLike]) -> list[tuple[int, int]]:
        """Return ``(transaction_id, client_id)`` pairs to reply to for executed ``entries``.

        Dummy transactions (id 0) and transactions of unknown clients are skipped.
        """
        return [
            (entry.transaction_id, entry.client_id)
            for entry in entries
            if entry.transaction_id != 0 and entry.client_id in self.clients
        ]

    def record_reply(self, client_id: int) -> bool:
        """Count one reply sent to ``client_id``; return False if the client is unknown."""
        info = self.clients.get(client_id)
        if info is None:
            return False
        info.replied += 1
        return True

    def take_batch(self, limit: int) -> list[Any]:
        """Remove and return up to ``limit`` queued transactions, oldest first."""
        if limit < 0:
            raise ValueError(f"batch limit cannot be negative, got {limit}")
        with self._lock:
            count = min(limit, len(self._queue))
            return [self._queue.popleft() for _ in range(count)]