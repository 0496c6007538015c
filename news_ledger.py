"""Bounded record of news item IDs that have already been posted."""

from __future__ import annotations

from collections import deque
from typing import Deque, Hashable, Set

from logging_config import logger

DEFAULT_CAPACITY = 100


class NewsLedger:
    """
    Insertion-ordered set of posted news IDs with a fixed capacity.

    When an insert pushes the size past capacity, the oldest inserted ID is
    evicted. Lookups never change eviction order. Not thread-safe; callers
    serialize access (see bot_context.BotContext.ledger_lock).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Ledger capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._order: Deque[Hashable] = deque()
        self._members: Set[Hashable] = set()

    @property
    def capacity(self) -> int:
        return self._capacity

    def contains(self, item_id: Hashable) -> bool:
        return item_id in self._members

    def insert(self, item_id: Hashable) -> None:
        """Record an ID; a repeat insert is a no-op and keeps the original position."""
        if item_id in self._members:
            return

        self._order.append(item_id)
        self._members.add(item_id)

        if len(self._order) > self._capacity:
            evicted = self._order.popleft()
            self._members.discard(evicted)
            logger.debug("Evicted news ID %s from ledger (capacity %d)", evicted, self._capacity)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._members

    def __len__(self) -> int:
        return len(self._order)


__all__ = ["NewsLedger", "DEFAULT_CAPACITY"]
