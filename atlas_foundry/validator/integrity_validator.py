"""Cross-entity integrity checks over the assembled id map.

- validates each system's primary body
- resolves body system/parent references and the single-root-child rule
- resolves mission relation targets
- detects navigation cycles between bodies

Every pass is fail-fast: the first violation aborts the load. Entries are
visited in id order so the reported violation does not depend on the order
files were discovered in.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Set

from ..exceptions import HierarchyInvariantError, ReferenceIntegrityError
from ..models import Body, ContentEntry, Mission, System

logger = logging.getLogger(__name__)


class IntegrityValidator:
    """Validates references and hierarchy invariants across all entries."""

    def __init__(self, entries: Dict[str, ContentEntry]):
        self.entries = entries

    def validate(self) -> None:
        # Pass B relies on every system's primaryBodyId already being confirmed.
        self.validate_systems()
        self.validate_bodies()
        self.validate_missions()
        self.detect_cycles()
        logger.debug(f"Integrity checks passed for {len(self.entries)} entities")

    def _of_kind(self, kind: str) -> List[ContentEntry]:
        return [
            self.entries[entity_id]
            for entity_id in sorted(self.entries)
            if self.entries[entity_id].kind == kind
        ]

    def validate_systems(self) -> None:
        """Pass A: each primaryBodyId is a body of this system parented by it."""
        for entry in self._of_kind("system"):
            system: System = entry.data
            prefix = (
                f'Invalid primaryBodyId: "{system.primary_body_id}" on system '
                f'"{system.id}" ({entry.rel_path})'
            )
            primary = self.entries.get(system.primary_body_id)
            if primary is None or primary.kind != "body":
                raise HierarchyInvariantError(
                    f"{prefix} (no body with that id)", system.id, entry.rel_path
                )

            body: Body = primary.data
            if body.system_id != system.id:
                raise HierarchyInvariantError(
                    f'{prefix} (body belongs to system "{body.system_id}")',
                    system.id,
                    entry.rel_path,
                )
            if body.nav_parent_id != system.id:
                raise HierarchyInvariantError(
                    f'{prefix} (primary body must have navParentId "{system.id}")',
                    system.id,
                    entry.rel_path,
                )

    def validate_bodies(self) -> None:
        """Pass B: system and parent references plus the single-root-child rule."""
        for entry in self._of_kind("body"):
            body: Body = entry.data

            system_entry = self.entries.get(body.system_id)
            if system_entry is None or system_entry.kind != "system":
                raise ReferenceIntegrityError(
                    f'Invalid systemId: "{body.system_id}" on body "{body.id}" '
                    f"({entry.rel_path}) (no system with that id)",
                    body.id,
                    "systemId",
                    entry.rel_path,
                )

            if body.nav_parent_id == body.id:
                raise HierarchyInvariantError(
                    f'Invalid navParentId: body "{body.id}" cannot be its own parent '
                    f"({entry.rel_path})",
                    body.id,
                    entry.rel_path,
                )

            parent = self.entries.get(body.nav_parent_id)
            if parent is None or parent.kind == "mission":
                raise ReferenceIntegrityError(
                    f'Invalid navParentId: "{body.nav_parent_id}" on body "{body.id}" '
                    f"({entry.rel_path}) (no system or body with that id)",
                    body.id,
                    "navParentId",
                    entry.rel_path,
                )

            if parent.kind == "system":
                root: System = parent.data
                if (
                    body.nav_parent_id != body.system_id
                    or body.id != root.primary_body_id
                ):
                    raise HierarchyInvariantError(
                        f'Invalid navParentId: "{body.nav_parent_id}" on body '
                        f'"{body.id}" ({entry.rel_path}) (only the primary body may '
                        "be a direct child of the system root)",
                        body.id,
                        entry.rel_path,
                    )

    def validate_missions(self) -> None:
        """Pass C: every relation target resolves to some entity."""
        for entry in self._of_kind("mission"):
            mission: Mission = entry.data
            for position, relation in enumerate(mission.relations or []):
                if relation.target_id not in self.entries:
                    raise ReferenceIntegrityError(
                        f'Invalid relation targetId: "{relation.target_id}" on mission '
                        f'"{mission.id}" ({entry.rel_path})',
                        mission.id,
                        f"relations.{position}.targetId",
                        entry.rel_path,
                    )

    def detect_cycles(self) -> None:
        """Walk navParentId upward from every body; a revisit is a cycle."""
        settled: Set[str] = set()

        for entry in self._of_kind("body"):
            path: List[str] = []
            on_path: Set[str] = set()
            current = entry

            while current.kind == "body" and current.id not in settled:
                if current.id in on_path:
                    cycle = path[path.index(current.id):] + [current.id]
                    raise HierarchyInvariantError(
                        f"Navigation cycle detected: {' -> '.join(cycle)} "
                        f"({current.rel_path})",
                        current.id,
                        current.rel_path,
                    )
                path.append(current.id)
                on_path.add(current.id)
                current = self.entries[current.data.nav_parent_id]

            settled.update(path)
