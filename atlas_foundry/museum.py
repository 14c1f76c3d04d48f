"""Museum-floor fact rows derived from a single body.

Pure formatting helpers used by the detail view. Absent values never
produce a row, and a section only appears when it has at least one row.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Literal, Optional

from atlas_foundry.models import Body

MARKDOWN_LINK = re.compile(r"\[[^\]]+\]\((https?://[^)]+)\)")


@dataclass(frozen=True)
class MuseumDetail:
    label: str
    value: str


@dataclass(frozen=True)
class MuseumFactSection:
    id: str
    title: str
    items: List[MuseumDetail] = field(default_factory=list)


def size_to_pixels(size: int, variant: Literal["anchor", "child"]) -> int:
    """Marker diameter for a 1-10 size score; anchors render larger."""
    clamped = min(10, max(1, size))
    if variant == "anchor":
        return 88 + clamped * 12
    return 30 + clamped * 8


def format_enum_label(value: str) -> str:
    """'dwarf-planet' -> 'Dwarf Planet'."""
    return " ".join(part[:1].upper() + part[1:] for part in value.split("-"))


def format_metric(value: float) -> str:
    if value == 0:
        return "0"
    magnitude = abs(value)
    if magnitude >= 1_000_000 or magnitude < 0.001:
        return f"{value:.2e}"
    text = f"{value:,.2f}"
    return text.rstrip("0").rstrip(".") if "." in text else text


def normalize_source_url(raw_url: Optional[str]) -> Optional[str]:
    """Return a clickable http(s) URL, unwrapping legacy markdown links."""
    if not raw_url:
        return None
    match = MARKDOWN_LINK.search(raw_url)
    if match:
        return match.group(1)
    trimmed = raw_url.strip()
    if not trimmed.startswith(("http://", "https://")):
        return None
    return trimmed


def _number(label: str, value: Optional[float], unit: str = "") -> Optional[MuseumDetail]:
    if value is None:
        return None
    text = format_metric(value)
    return MuseumDetail(label, f"{text} {unit}" if unit else text)


def _boolean(label: str, value: Optional[bool]) -> Optional[MuseumDetail]:
    if value is None:
        return None
    return MuseumDetail(label, "Yes" if value else "No")


def _strings(label: str, values: Optional[List[str]]) -> Optional[MuseumDetail]:
    if not values:
        return None
    return MuseumDetail(label, ", ".join(values))


def _enum(label: str, value: Optional[str]) -> Optional[MuseumDetail]:
    if not value:
        return None
    return MuseumDetail(label, format_enum_label(value))


def _section(
    section_id: str, title: str, candidates: Iterable[Optional[MuseumDetail]]
) -> Optional[MuseumFactSection]:
    items = [item for item in candidates if item is not None]
    if not items:
        return None
    return MuseumFactSection(id=section_id, title=title, items=items)


def get_discovery_details(body: Body) -> List[MuseumDetail]:
    discovery = body.discovery
    if discovery is None:
        return []

    details: List[MuseumDetail] = []
    if discovery.discovery_year_precision == "prehistoric":
        details.append(MuseumDetail("Discovery Era", "Known since prehistory"))
    if discovery.discovery_year is not None:
        if discovery.discovery_year_precision == "estimated":
            year = f"c. {discovery.discovery_year} (estimated)"
        else:
            year = str(discovery.discovery_year)
        details.append(MuseumDetail("Discovery Year", year))
    if discovery.discovered_by:
        details.append(MuseumDetail("Discovered By", discovery.discovered_by))
    if discovery.discovery_method:
        details.append(MuseumDetail("Method", discovery.discovery_method))
    return details


def get_museum_fact_sections(body: Body) -> List[MuseumFactSection]:
    """Group a body's structured facts into display cards."""
    physical = body.physical
    orbit = body.orbit
    composition = body.composition
    atmosphere = composition.atmosphere if composition else None
    environment = body.environment

    sections = [
        _section(
            "physical-profile",
            "Physical Profile",
            [
                _number("Mean Radius", physical and physical.mean_radius_km, "km"),
                _number("Mass", physical and physical.mass_kg, "kg"),
                _number("Density", physical and physical.density_kg_m3, "kg/m^3"),
                _number(
                    "Surface Gravity", physical and physical.surface_gravity_m_s2, "m/s^2"
                ),
                _number(
                    "Escape Velocity", physical and physical.escape_velocity_m_s, "m/s"
                ),
            ],
        ),
        _section(
            "orbit-rotation",
            "Orbit and Rotation",
            [
                _number("Semi-Major Axis", orbit and orbit.semi_major_axis_km, "km"),
                _number("Orbital Period", orbit and orbit.orbital_period_days, "days"),
                _number("Eccentricity", orbit and orbit.eccentricity),
                _number("Inclination", orbit and orbit.inclination_deg, "deg"),
                _number("Rotation Period", orbit and orbit.rotation_period_hours, "hrs"),
                _boolean("Retrograde Rotation", orbit and orbit.retrograde_rotation),
                _boolean("Tidally Locked", orbit and orbit.tidally_locked),
            ],
        ),
        _section(
            "composition",
            "Composition",
            [
                _strings("Primary Composition", composition and composition.primary),
                _enum("Atmosphere Type", atmosphere and atmosphere.type),
                _strings(
                    "Atmospheric Components", atmosphere and atmosphere.main_components
                ),
                _number(
                    "Surface Pressure", atmosphere and atmosphere.surface_pressure_bar, "bar"
                ),
                _strings(
                    "Internal Structure", composition and composition.internal_structure
                ),
            ],
        ),
        _section(
            "environment",
            "Environment",
            [
                _number("Mean Temperature", environment and environment.mean_temperature_k, "K"),
                _number("Minimum Temperature", environment and environment.min_temperature_k, "K"),
                _number("Maximum Temperature", environment and environment.max_temperature_k, "K"),
                _enum("Liquid Water", environment and environment.liquid_water_presence),
                _enum("Magnetic Field", environment and environment.magnetic_field_type),
                _enum("Volcanic Activity", environment and environment.volcanic_activity),
                _enum(
                    "Cryovolcanic Activity",
                    environment and environment.cryovolcanic_activity,
                ),
                _enum("Tectonic Activity", environment and environment.tectonic_activity),
            ],
        ),
    ]
    return [section for section in sections if section is not None]
