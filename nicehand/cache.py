"""Caching of analysis results keyed by a signature of the game state.

Repeated requests for the same spot are answered from the cache until the
entry ages out; when the cache is full the least recently used entry goes.
"""

from __future__ import annotations

import copy
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from nicehand.web_state import WebGameState


class AnalysisRequestLike(Protocol):
    """Anything carrying the game state an analysis is asked for."""

    game_state: WebGameState


@dataclass(frozen=True)
class StateSignature:
    """Identifies a game state for cache lookups."""

    players_hash: int
    board_hash: int
    pot: int
    street: int
    to_act: int

    @classmethod
    def from_web_state(cls, web_state: WebGameState) -> StateSignature:
        players_hash = hash(
            (
                tuple(web_state.stacks),
                tuple(web_state.alive_players),
                tuple(web_state.street_investments),
            )
        )
        board_hash = hash((tuple(web_state.board), tuple(web_state.hole_cards)))
        return cls(
            players_hash=players_hash,
            board_hash=board_hash,
            pot=web_state.pot,
            street=web_state.street,
            to_act=web_state.player_to_act,
        )


@dataclass(frozen=True)
class CacheConfig:
    """Size and age limits of the cache; durations are in seconds."""

    max_size: int = 1000
    max_age: float = 300.0
    cleanup_interval: float = 60.0


@dataclass(frozen=True)
class CacheStats:
    """A snapshot of cache usage."""

    entries_count: int
    total_access_count: int
    average_access_per_entry: float


@dataclass
class _Entry:
    result: Any
    created_at: float
    last_accessed: float
    access_count: int = 1

    def access(self, now: float) -> Any:
        self.last_accessed = now
        self.access_count += 1
        return copy.deepcopy(self.result)

    def expired(self, now: float, max_age: float) -> bool:
        return now - self.created_at > max_age


class CachedAnalysisService:
    """Runs an analyzer on requests, caching its results per game state."""

    def __init__(
        self,
        analyzer: Callable[[Any], Any],
        config: CacheConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._analyzer = analyzer
        self.config = config or CacheConfig()
        self._clock = clock
        self._entries: dict[StateSignature, _Entry] = {}
        self._lock = threading.Lock()
        self._last_cleanup = clock()

    def get_analysis(self, request: AnalysisRequestLike) -> Any:
        """The analysis of ``request``, from the cache when it holds a fresh one.

        Errors raised by the analyzer propagate and nothing is cached.
        """
        signature = StateSignature.from_web_state(request.game_state)
        self._maybe_cleanup()

        with self._lock:
            entry = self._entries.get(signature)
            if entry is not None:
                now = self._clock()
                if not entry.expired(now, self.config.max_age):
                    return entry.access(now)
                del self._entries[signature]

        result = self._analyzer(request)
        self._store(signature, result)
        return copy.deepcopy(result)

    def get_stats(self) -> CacheStats:
        """Entry count and access totals."""
        with self._lock:
            count = len(self._entries)
            total = sum(entry.access_count for entry in self._entries.values())
        return CacheStats(
            entries_count=count,
            total_access_count=total,
            average_access_per_entry=total / count if count else 0.0,
        )

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._entries.clear()

    def _store(self, signature: StateSignature, result: Any) -> None:
        now = self._clock()
        with self._lock:
            if self._entries and len(self._entries) >= self.config.max_size:
                oldest = min(self._entries, key=lambda key: self._entries[key].last_accessed)
                del self._entries[oldest]
            self._entries[signature] = _Entry(copy.deepcopy(result), now, now)

    def _maybe_cleanup(self) -> None:
        now = self._clock()
        with self._lock:
            if now - self._last_cleanup <= self.config.cleanup_interval:
                return
            self._last_cleanup = now
            expired = [
                key
                for key, entry in self._entries.items()
                if entry.expired(now, self.config.max_age)
            ]
            for key in expired:
                del self._entries[key]