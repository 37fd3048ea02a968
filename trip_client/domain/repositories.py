from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict

from .models import DraftEntity


class DraftRepository(ABC):
    @abstractmethod
    async def save(self, entity: DraftEntity) -> DraftEntity:
        raise NotImplementedError

    @abstractmethod
    async def get(self, draft_id: str) -> DraftEntity:
        raise NotImplementedError

    @abstractmethod
    async def update(self, entity: DraftEntity) -> DraftEntity:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, draft_id: str) -> None:
        raise NotImplementedError


class InMemoryDraftRepository(DraftRepository):
    """Drafts live only as long as the process; nothing is written to disk."""

    def __init__(self):
        self._store: Dict[str, DraftEntity] = {}

    async def save(self, entity: DraftEntity) -> DraftEntity:
        self._store[entity.id] = entity
        return entity

    async def get(self, draft_id: str) -> DraftEntity:
        if draft_id not in self._store:
            raise KeyError("Draft not found")
        return self._store[draft_id]

    async def update(self, entity: DraftEntity) -> DraftEntity:
        entity.updated_at = datetime.utcnow()
        self._store[entity.id] = entity
        return entity

    async def delete(self, draft_id: str) -> None:
        if self._store.pop(draft_id, None) is None:
            raise KeyError("Draft not found")

    def __len__(self) -> int:
        return len(self._store)
