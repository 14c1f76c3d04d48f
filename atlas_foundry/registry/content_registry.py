from __future__ import annotations

import logging
from typing import Dict, Iterator, List

from ..exceptions import DuplicateIdError
from ..models import ContentEntry

logger = logging.getLogger(__name__)


class ContentRegistry:
    """Id-keyed staging map shared by all three entity kinds.

    Ids are global: a mission may not reuse a body's id and vice versa.
    """

    def __init__(self) -> None:
        self._by_id: Dict[str, ContentEntry] = {}

    def add(self, entry: ContentEntry) -> None:
        existing = self._by_id.get(entry.id)
        if existing is not None:
            raise DuplicateIdError(
                entry.id,
                existing.kind,
                existing.rel_path,
                entry.kind,
                entry.rel_path,
            )
        self._by_id[entry.id] = entry
        logger.debug(f"Registered {entry.kind}: {entry.id} ({entry.rel_path})")

    def get(self, entity_id: str) -> ContentEntry | None:
        return self._by_id.get(entity_id)

    def entries(self) -> Dict[str, ContentEntry]:
        """Return a copy of the id -> entry map."""
        return dict(self._by_id)

    def ids(self) -> List[str]:
        return list(self._by_id.keys())

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[ContentEntry]:
        return iter(self._by_id.values())
