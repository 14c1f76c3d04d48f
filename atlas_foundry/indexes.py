"""Sorted collections and grouped lookups built from a validated id map."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, TypeVar

from atlas_foundry.models import Body, ContentEntry, Entity, Mission, System

T = TypeVar("T", System, Body, Mission)


def _name_key(name: str) -> Tuple[str, str]:
    # Case-insensitive first, exact name second, so distinct names never tie.
    return (name.casefold(), name)


def body_sort_key(body: Body) -> Tuple[Any, ...]:
    """navOrder ascending (missing last), then name, then id."""
    missing = body.nav_order is None
    return (missing, body.nav_order or 0.0, *_name_key(body.name), body.id)


def named_sort_key(entity: Entity) -> Tuple[Any, ...]:
    return (*_name_key(entity.name), entity.id)


def index_by_id(items: Iterable[T]) -> Dict[str, T]:
    """Build an id lookup; on duplicate ids the later item wins."""
    lookup: Dict[str, T] = {}
    for item in items:
        lookup[item.id] = item
    return lookup


@dataclass
class ContentIndex:
    """Normalized, deterministically ordered view of the content graph."""

    systems: List[System] = field(default_factory=list)
    bodies: List[Body] = field(default_factory=list)
    missions: List[Mission] = field(default_factory=list)
    entities_by_id: Dict[str, Entity] = field(default_factory=dict)
    bodies_by_system_id: Dict[str, List[Body]] = field(default_factory=dict)
    children_by_parent_id: Dict[str, List[Body]] = field(default_factory=dict)
    files_scanned: int = 0

    @property
    def entity_count(self) -> int:
        return len(self.entities_by_id)

    @property
    def systems_by_id(self) -> Dict[str, System]:
        return index_by_id(self.systems)

    @property
    def bodies_by_id(self) -> Dict[str, Body]:
        return index_by_id(self.bodies)

    def get_entity(self, entity_id: str) -> Optional[Entity]:
        return self.entities_by_id.get(entity_id)

    def get_system(self, system_id: str) -> Optional[System]:
        entity = self.entities_by_id.get(system_id)
        return entity if isinstance(entity, System) else None

    def get_body(self, body_id: str) -> Optional[Body]:
        entity = self.entities_by_id.get(body_id)
        return entity if isinstance(entity, Body) else None

    def get_children(self, parent_id: str) -> List[Body]:
        """Copy of the sorted direct children of ``parent_id``, or an empty list."""
        return list(self.children_by_parent_id.get(parent_id, ()))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready output using the camelCase content field names."""

        def dump(items: Iterable[Entity]) -> List[Dict[str, Any]]:
            return [item.to_document() for item in items]

        return {
            "systems": dump(self.systems),
            "bodies": dump(self.bodies),
            "missions": dump(self.missions),
            "entitiesById": {
                entity_id: entity.to_document()
                for entity_id, entity in self.entities_by_id.items()
            },
            "bodiesBySystemId": {
                key: dump(value) for key, value in self.bodies_by_system_id.items()
            },
            "childrenByParentId": {
                key: dump(value) for key, value in self.children_by_parent_id.items()
            },
        }


def empty_index() -> ContentIndex:
    """Index returned when there is no content root at all."""
    return ContentIndex()


def build_index(
    entries: Dict[str, ContentEntry], files_scanned: int = 0
) -> ContentIndex:
    """Materialize sorted collections and grouped lookups.

    Expects ``entries`` to have passed the integrity checks already.
    """
    systems: List[System] = []
    bodies: List[Body] = []
    missions: List[Mission] = []
    entities_by_id: Dict[str, Entity] = {}

    for entity_id in sorted(entries):
        entry = entries[entity_id]
        entities_by_id[entity_id] = entry.data
        if entry.kind == "system":
            systems.append(entry.data)
        elif entry.kind == "body":
            bodies.append(entry.data)
        else:
            missions.append(entry.data)

    systems.sort(key=named_sort_key)
    bodies.sort(key=body_sort_key)
    missions.sort(key=named_sort_key)

    bodies_by_system_id: Dict[str, List[Body]] = {}
    children_by_parent_id: Dict[str, List[Body]] = {}
    # bodies is already sorted, so appending keeps every group sorted.
    for body in bodies:
        bodies_by_system_id.setdefault(body.system_id, []).append(body)
        children_by_parent_id.setdefault(body.nav_parent_id, []).append(body)

    return ContentIndex(
        systems=systems,
        bodies=bodies,
        missions=missions,
        entities_by_id=entities_by_id,
        bodies_by_system_id=bodies_by_system_id,
        children_by_parent_id=children_by_parent_id,
        files_scanned=files_scanned,
    )
