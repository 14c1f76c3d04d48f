"""Navigation view-models: orbit lanes and breadcrumbs.

Both derivations are pure functions of a built ContentIndex. An unknown
anchor id is a normal state (stale links must not crash navigation), so it
yields an empty result instead of raising.
"""

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from atlas_foundry.indexes import ContentIndex
from atlas_foundry.models import Body, System


@dataclass(frozen=True)
class BreadcrumbItem:
    """Navigation pill shown above the map."""

    id: str
    label: str
    kind: Literal["system", "body"]


@dataclass(frozen=True)
class OrbitLaneModel:
    """Data needed to render one orbit lane frame.

    ``lane_bodies`` always starts with the center body and then lists the
    orbiters in display order.
    """

    system: Optional[System] = None
    center_body: Optional[Body] = None
    orbiters: List[Body] = field(default_factory=list)
    lane_bodies: List[Body] = field(default_factory=list)
    is_system_root: bool = False

    @property
    def is_empty(self) -> bool:
        return self.center_body is None


def _lane(
    system: Optional[System], center: Optional[Body], index: ContentIndex, is_root: bool
) -> OrbitLaneModel:
    if center is None:
        return OrbitLaneModel(system=system, is_system_root=is_root)
    orbiters = index.get_children(center.id)
    return OrbitLaneModel(
        system=system,
        center_body=center,
        orbiters=orbiters,
        lane_bodies=[center, *orbiters],
        is_system_root=is_root,
    )


def derive_orbit_lane(anchor_id: str, index: ContentIndex) -> OrbitLaneModel:
    """Resolve the center body and its orbiters for ``anchor_id``.

    A body anchor is its own center. A system anchor is centered on the
    system's primary body.
    """
    body = index.get_body(anchor_id)
    if body is not None:
        return _lane(index.get_system(body.system_id), body, index, is_root=False)

    system = index.get_system(anchor_id)
    if system is None:
        return OrbitLaneModel()

    return _lane(system, index.get_body(system.primary_body_id), index, is_root=True)


def build_breadcrumb(anchor_id: str, index: ContentIndex) -> List[BreadcrumbItem]:
    """Crumbs from the system root down to ``anchor_id``.

    The primary body is left out unless it is the anchor itself, so viewing
    Earth yields "Sol > Earth" rather than "Sol > Sun > Earth". The upward
    walk tracks visited ids and therefore terminates even on a cyclic graph.
    """
    anchor_body = index.get_body(anchor_id)
    system_id = anchor_body.system_id if anchor_body else anchor_id
    system = index.get_system(system_id)
    if system is None:
        return []

    root = BreadcrumbItem(id=system.id, label=system.name, kind="system")
    if anchor_body is None:
        return [root]

    visited: set[str] = set()
    chain: List[BreadcrumbItem] = []
    cursor: Optional[Body] = anchor_body

    while cursor is not None:
        if cursor.id == system.primary_body_id and anchor_id != system.primary_body_id:
            break
        if cursor.id in visited:
            break
        visited.add(cursor.id)

        chain.append(BreadcrumbItem(id=cursor.id, label=cursor.name, kind="body"))

        if cursor.nav_parent_id == system_id:
            break
        cursor = index.get_body(cursor.nav_parent_id)

    chain.reverse()
    return [root, *chain]
