"""Caller-owned request ids used to drop superseded search responses."""
from __future__ import annotations

import threading
from typing import TypeVar

T = TypeVar("T")


class SearchGeneration:
    """Hands out increasing request ids; only the latest id is current."""

    def __init__(self) -> None:
        self._latest = 0
        self._lock = threading.Lock()

    @property
    def latest(self) -> int:
        return self._latest

    def next_id(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, request_id: int) -> bool:
        return request_id == self._latest

    def accept(self, request_id: int, results: T) -> T | None:
        """Return ``results`` when ``request_id`` is still the latest, else ``None``."""
        return results if self.is_current(request_id) else None


__all__ = ["SearchGeneration"]
