from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional

from trip_client.core.config import settings
from trip_client.core.session import Session
from trip_client.external.platform_api import PlatformAPI

ALL_CATEGORIES = "All"

Lookup = Callable[[str], Awaitable[List[Dict[str, Any]]]]


class SuggestionDebouncer:
    """
    Latest-keystroke-wins lookups. Each call waits out the delay and is dropped
    (returns None) if a newer call arrived in the meantime.
    """

    def __init__(self, delay_ms: int):
        self.delay = delay_ms / 1000
        self._generation = 0
        self._in_flight = 0

    @property
    def idle(self) -> bool:
        return self._in_flight == 0

    async def run(self, query: str, lookup: Lookup) -> Optional[List[Dict[str, Any]]]:
        self._generation += 1
        generation = self._generation
        if not query:
            return []
        self._in_flight += 1
        try:
            await asyncio.sleep(self.delay)
            if generation != self._generation:
                return None
            return await lookup(query)
        finally:
            self._in_flight -= 1


class SearchService:
    def __init__(self, api: PlatformAPI, delay_ms: int | None = None):
        self.api = api
        self.delay_ms = settings.search_debounce_ms if delay_ms is None else delay_ms
        # only clients with a lookup still waiting or running have an entry
        self._debouncers: Dict[str, SuggestionDebouncer] = {}

    async def search(self, session: Session, query: str = "", category: str = ALL_CATEGORIES) -> List[Dict[str, Any]]:
        text = query.strip()
        return await self.api.list_guides(
            session,
            search=text or None,
            category=None if not category or category == ALL_CATEGORIES else category,
        )

    async def suggest(self, session: Session, query: str, client_id: str = "anonymous") -> Optional[List[Dict[str, Any]]]:
        debouncer = self._debouncers.setdefault(client_id, SuggestionDebouncer(self.delay_ms))

        async def lookup(text: str) -> List[Dict[str, Any]]:
            return await self.api.search_suggestions(session, text, limit=settings.search_suggestion_limit)

        try:
            return await debouncer.run(query.strip(), lookup)
        finally:
            if debouncer.idle and self._debouncers.get(client_id) is debouncer:
                del self._debouncers[client_id]

    def pending_clients(self) -> int:
        return len(self._debouncers)
