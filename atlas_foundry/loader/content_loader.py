from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..models import ContentEntry
from ..parsers.json_parser import parse_content_file
from ..registry.content_registry import ContentRegistry
from ..validator.schema_validator import CONTENT_FILENAMES

logger = logging.getLogger(__name__)


def discover(root_dir: str | Path) -> List[Path]:
    """Recursively collect ``system.json``, ``body.json`` and ``mission.json`` files.

    Directory names carry no meaning; they are only walked. A missing root
    yields an empty list. The order of the result is unspecified.
    """
    base = Path(root_dir)
    if not base.is_dir():
        return []
    found = [
        p.resolve()
        for p in base.rglob("*")
        if p.name in CONTENT_FILENAMES and p.is_file()
    ]
    logger.debug(f"Discovered {len(found)} content files under {base}")
    return found


class ContentLoader:
    """Discovers, parses and registers every content document under a root."""

    def __init__(self, base_path: str | Path):
        self.base = Path(base_path)
        self.files_scanned = 0

    def exists(self) -> bool:
        return self.base.is_dir()

    def load_all(self) -> ContentRegistry:
        """Parse every discovered document into a fresh registry.

        Fail-fast: the first parse, schema or duplicate-id error aborts the
        whole load.
        """
        registry = ContentRegistry()
        files = discover(self.base)
        self.files_scanned = len(files)
        for path in files:
            entry: ContentEntry = parse_content_file(path, self.base)
            logger.debug(f"Parsed {entry.kind} {entry.id} from {entry.rel_path}")
            registry.add(entry)
        return registry
