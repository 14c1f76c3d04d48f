"""Atlas Foundry - content graph validator and indexer.

This module loads system, body and mission documents from a content root,
proves they form a consistent navigation graph, and exposes sorted indexes
plus the lane, breadcrumb and museum fact view-models used for rendering.
"""

from atlas_foundry.exceptions import (
    ContentError,
    DuplicateIdError,
    HierarchyInvariantError,
    ParseError,
    ReferenceIntegrityError,
    SchemaValidationError,
)
from atlas_foundry.models import Body, Entity, Mission, System
from atlas_foundry.indexes import ContentIndex, build_index
from atlas_foundry.lanes import (
    BreadcrumbItem,
    OrbitLaneModel,
    build_breadcrumb,
    derive_orbit_lane,
)
from atlas_foundry.museum import (
    MuseumDetail,
    MuseumFactSection,
    format_enum_label,
    format_metric,
    get_discovery_details,
    get_museum_fact_sections,
    normalize_source_url,
    size_to_pixels,
)
from atlas_foundry.store import ContentStore, LoadReport

__all__ = [
    # Models
    "System",
    "Body",
    "Mission",
    "Entity",
    # Index
    "ContentIndex",
    "ContentStore",
    "LoadReport",
    "build_index",
    # Navigation
    "BreadcrumbItem",
    "OrbitLaneModel",
    "build_breadcrumb",
    "derive_orbit_lane",
    # Museum facts
    "MuseumDetail",
    "MuseumFactSection",
    "format_enum_label",
    "format_metric",
    "get_discovery_details",
    "get_museum_fact_sections",
    "normalize_source_url",
    "size_to_pixels",
    # Errors
    "ContentError",
    "ParseError",
    "SchemaValidationError",
    "DuplicateIdError",
    "ReferenceIntegrityError",
    "HierarchyInvariantError",
]
