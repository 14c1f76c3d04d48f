"""ContentStore: the single owner of one built content index."""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from atlas_foundry.indexes import ContentIndex, build_index, empty_index
from atlas_foundry.lanes import (
    BreadcrumbItem,
    OrbitLaneModel,
    build_breadcrumb,
    derive_orbit_lane,
)
from atlas_foundry.loader.content_loader import ContentLoader
from atlas_foundry.validator.integrity_validator import IntegrityValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadReport:
    """Counts reported after a successful load."""

    entity_count: int
    files_scanned: int
    content_root_found: bool = True

    def summary(self) -> str:
        return (
            f"Content validation passed: {self.entity_count} entities "
            f"({self.files_scanned} files scanned)."
        )


class ContentStore:
    """
    Loads, validates and indexes a content root exactly once.

    The pipeline is discovery -> parse/validate -> identity assembly ->
    integrity checks -> index build. The result (or the error that aborted
    it) is cached for the lifetime of the store; there is no invalidation.
    Concurrent callers block on the same in-flight build.

    Usage:
        ```python
        store = ContentStore("content")
        index = store.get_index()
        lane = store.derive_orbit_lane("sol")
        crumbs = store.build_breadcrumb("sol/earth/moon")
        ```
    """

    def __init__(self, content_root: str | Path):
        """
        Initialize the store.

        Args:
            content_root: Directory holding system/body/mission documents
        """
        self.content_root = Path(content_root)
        self._lock = threading.Lock()
        self._index: Optional[ContentIndex] = None
        self._error: Optional[Exception] = None
        self._root_found = False
        self.build_count = 0

    def get_index(self) -> ContentIndex:
        """
        Return the memoized index, building it on first use.

        Raises:
            ContentError: When the load fails. Any failure, including an
                unexpected one, is cached and re-raised by later calls
                without touching disk again.
        """
        with self._lock:
            if self._index is not None:
                return self._index
            if self._error is not None:
                raise self._error
            try:
                self._index = self._build()
            except Exception as exc:
                self._error = exc
                raise
            return self._index

    def _build(self) -> ContentIndex:
        self.build_count += 1
        loader = ContentLoader(self.content_root)
        if not loader.exists():
            logger.warning(
                f"No content root at {self.content_root}; serving an empty index"
            )
            self._root_found = False
            return empty_index()

        self._root_found = True
        logger.info(f"Building content index from {self.content_root}")
        registry = loader.load_all()
        entries = registry.entries()
        IntegrityValidator(entries).validate()
        index = build_index(entries, files_scanned=loader.files_scanned)
        logger.info(
            f"Content index built: {index.entity_count} entities "
            f"({index.files_scanned} files scanned)"
        )
        return index

    def load_report(self) -> LoadReport:
        """Build (if needed) and report entity and file counts."""
        index = self.get_index()
        return LoadReport(
            entity_count=index.entity_count,
            files_scanned=index.files_scanned,
            content_root_found=self._root_found,
        )

    def derive_orbit_lane(self, anchor_id: str) -> OrbitLaneModel:
        return derive_orbit_lane(anchor_id, self.get_index())

    def build_breadcrumb(self, anchor_id: str) -> list[BreadcrumbItem]:
        return build_breadcrumb(anchor_id, self.get_index())
