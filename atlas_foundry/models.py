"""Data models for the three content entity kinds.

Documents on disk use camelCase keys; the models expose snake_case
attributes and accept or emit the camelCase names as aliases. Every model
is closed (unknown keys are rejected), strict (no string-to-number
coercion) and frozen once loaded.
"""

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

EntityKind = Literal["system", "body", "mission"]

BodyType = Literal[
    "star",
    "planet",
    "moon",
    "dwarf-planet",
    "asteroid",
    "comet",
    "region",
]

AtmosphereType = Literal[
    "none",
    "exosphere",
    "thin",
    "substantial",
    "substantial-envelope",
]

LiquidWaterPresence = Literal[
    "none",
    "past-surface",
    "subsurface-possible",
    "subsurface-likely",
    "subsurface-confirmed",
    "surface",
]

MagneticFieldType = Literal["none", "intrinsic", "induced", "remnant"]

ActivityLevel = Literal["none", "past", "possible", "active"]

DiscoveryYearPrecision = Literal["exact", "estimated", "prehistoric"]

RequiredStr = Annotated[str, StringConstraints(min_length=1)]
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
NonEmptyStrList = Annotated[list[TrimmedStr], Field(min_length=1)]
PositiveFloat = Annotated[float, Field(gt=0)]
Kelvin = Annotated[float, Field(ge=0)]


class ContentModel(BaseModel):
    """Shared configuration for every content document model."""

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        frozen=True,
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_document(self) -> dict[str, Any]:
        """Dump using the on-disk camelCase field names, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ------------------
# Shared sub-models
# ------------------


class Relation(ContentModel):
    """Typed edge from a mission to any other entity."""

    type: RequiredStr = Field(
        description="Relationship label, e.g. 'orbits', 'visited-by', 'part-of'"
    )
    target_id: RequiredStr = Field(description="Canonical id of the related entity")


class Source(ContentModel):
    """Bibliographic source referenced by inline ``[n]`` citation markers."""

    attribution: TrimmedStr
    title: TrimmedStr
    url: str | None = None
    year: int | None = None
    publisher: str | None = None


class Rings(ContentModel):
    """Embedded ring metadata; rings are never standalone entities."""

    description: str | None = None
    data: dict[str, Any] | None = None


class Physical(ContentModel):
    mean_radius_km: PositiveFloat | None = None
    mass_kg: PositiveFloat | None = None
    density_kg_m3: PositiveFloat | None = Field(default=None, alias="densityKgM3")
    surface_gravity_m_s2: PositiveFloat | None = Field(
        default=None, alias="surfaceGravityMS2"
    )
    escape_velocity_m_s: PositiveFloat | None = Field(
        default=None, alias="escapeVelocityMS"
    )


class Orbit(ContentModel):
    semi_major_axis_km: PositiveFloat | None = None
    orbital_period_days: PositiveFloat | None = None
    eccentricity: Annotated[float, Field(ge=0, lt=1)] | None = None
    inclination_deg: Annotated[float, Field(ge=0, le=180)] | None = None
    rotation_period_hours: PositiveFloat | None = None
    retrograde_rotation: bool | None = None
    tidally_locked: bool | None = None


class Atmosphere(ContentModel):
    """Atmosphere summary.

    Cross-field rules (an airless body has no components or pressure, a
    gas-giant envelope has no surface pressure) are enforced by
    ``check_atmosphere`` after structural validation.
    """

    type: AtmosphereType
    main_components: NonEmptyStrList | None = None
    surface_pressure_bar: Annotated[float, Field(ge=0)] | None = None


class Composition(ContentModel):
    primary: NonEmptyStrList | None = None
    atmosphere: Atmosphere | None = None
    internal_structure: NonEmptyStrList | None = None


class Environment(ContentModel):
    mean_temperature_k: Kelvin | None = None
    min_temperature_k: Kelvin | None = None
    max_temperature_k: Kelvin | None = None
    liquid_water_presence: LiquidWaterPresence | None = None
    magnetic_field_type: MagneticFieldType | None = None
    volcanic_activity: ActivityLevel | None = None
    cryovolcanic_activity: ActivityLevel | None = None
    tectonic_activity: ActivityLevel | None = None


class Discovery(ContentModel):
    discovery_year: int | None = None
    discovery_year_precision: DiscoveryYearPrecision | None = None
    discovered_by: TrimmedStr | None = None
    discovery_method: TrimmedStr | None = None


# ------------------
# Entities
# ------------------


class System(ContentModel):
    """Root of one navigation hierarchy (for example: "sol")."""

    kind: ClassVar[EntityKind] = "system"

    id: RequiredStr = Field(description="Globally unique canonical identifier")
    name: RequiredStr = Field(description="Display name shown in navigation")
    primary_body_id: RequiredStr = Field(
        description="Body rendered as the visual center of the system root"
    )
    description: str | None = Field(
        default=None, description="Short summary used in previews"
    )


class Body(ContentModel):
    """A celestial body placed in the navigation tree by ``nav_parent_id``."""

    kind: ClassVar[EntityKind] = "body"

    # Identity and placement
    id: RequiredStr = Field(description="Globally unique id, e.g. 'sol/mercury'")
    name: RequiredStr = Field(description="Display name shown in detail views")
    hook: TrimmedStr = Field(description="One-sentence curiosity hook")
    type: BodyType = Field(description="Top-level body classification")
    size: Annotated[int, Field(ge=1, le=10)] = Field(
        description="Presentation-only scale from 1 to 10"
    )
    system_id: RequiredStr = Field(description="Owning system id")
    nav_parent_id: RequiredStr = Field(
        description="Parent node in the navigation tree (system or body id)"
    )
    nav_order: float | None = Field(
        default=None, description="Sibling sort key; missing values sort last"
    )
    curation_score: Annotated[float, Field(ge=0, le=100)] = Field(
        description="Editorial ranking from 0 to 100"
    )

    # Editorial text
    highlights: NonEmptyStrList | None = None
    how_we_know: NonEmptyStrList | None = None
    open_questions: NonEmptyStrList | None = None
    sources: list[Source] | None = None
    scientific_synthesis: NonEmptyStrList | None = Field(
        default=None,
        description="Paragraphs that may cite sources with inline [n] markers",
    )

    # Structured facts
    rings: Rings | None = None
    physical: Physical | None = None
    orbit: Orbit | None = None
    composition: Composition | None = None
    environment: Environment | None = None
    discovery: Discovery | None = None


class Mission(ContentModel):
    """A mission linked to other entities through typed relations."""

    kind: ClassVar[EntityKind] = "mission"

    id: RequiredStr = Field(description="Globally unique mission id")
    name: RequiredStr = Field(description="Mission display name")
    description: str | None = None
    relations: list[Relation] | None = Field(
        default=None, description="Non-hierarchical edges to other entities"
    )


Entity = Union[System, Body, Mission]


@dataclass(frozen=True)
class ContentEntry:
    """A validated entity plus the file it came from."""

    kind: EntityKind
    rel_path: str
    data: Entity

    @property
    def id(self) -> str:
        return self.data.id
