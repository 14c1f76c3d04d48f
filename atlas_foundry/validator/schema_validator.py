"""Per-kind schema validation for content documents.

Structural rules (required fields, enums, bounds, closed-world keys) live on
the pydantic models. The refinements below cover the cross-field rules and
only run once a document is structurally valid. Nothing here touches disk.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Literal

from pydantic import ValidationError

from atlas_foundry.models import Body, Entity, EntityKind, Mission, System

CITATION_PATTERN = re.compile(r"\[(\d+)\]")

CONTENT_FILENAMES: dict[str, EntityKind] = {
    "system.json": "system",
    "body.json": "body",
    "mission.json": "mission",
}


@dataclass(frozen=True)
class ValidationIssue:
    """A single schema violation inside one document."""

    path: tuple[str | int, ...]
    message: str

    @property
    def field_path(self) -> str:
        if not self.path:
            return "(root)"
        return ".".join(str(part) for part in self.path)

    def __str__(self) -> str:
        return f"{self.field_path}: {self.message}"


SchemaResult = Entity | list[ValidationIssue]


def kind_from_filename(filename: str) -> EntityKind | Literal["unknown"]:
    """Map a content basename to its entity kind."""
    return CONTENT_FILENAMES.get(filename, "unknown")


def _issues_from_error(error: ValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(path=tuple(item["loc"]), message=item["msg"])
        for item in error.errors(include_url=False)
    ]


# ------------------
# Refinements
# ------------------


def check_citations(body: Body) -> list[ValidationIssue]:
    """Every inline ``[n]`` marker must point into ``sources`` (1-based)."""
    issues: list[ValidationIssue] = []
    source_count = len(body.sources or [])

    for field_name, paragraphs in (
        ("highlights", body.highlights),
        ("scientificSynthesis", body.scientific_synthesis),
    ):
        for position, text in enumerate(paragraphs or []):
            for match in CITATION_PATTERN.finditer(text):
                number = int(match.group(1))
                if source_count == 0:
                    issues.append(
                        ValidationIssue(
                            (field_name, position),
                            f"citation [{number}] requires a non-empty sources list",
                        )
                    )
                elif not 1 <= number <= source_count:
                    issues.append(
                        ValidationIssue(
                            (field_name, position),
                            f"citation [{number}] is out of range "
                            f"(sources has {source_count} entries)",
                        )
                    )
    return issues


def check_atmosphere(body: Body) -> list[ValidationIssue]:
    atmosphere = body.composition.atmosphere if body.composition else None
    if atmosphere is None:
        return []

    base = ("composition", "atmosphere")
    issues: list[ValidationIssue] = []
    if atmosphere.type == "none":
        if atmosphere.main_components is not None:
            issues.append(
                ValidationIssue(
                    base + ("mainComponents",),
                    'must be omitted when atmosphere type is "none"',
                )
            )
        if atmosphere.surface_pressure_bar is not None:
            issues.append(
                ValidationIssue(
                    base + ("surfacePressureBar",),
                    'must be omitted when atmosphere type is "none"',
                )
            )
    elif atmosphere.type == "substantial-envelope":
        if atmosphere.surface_pressure_bar is not None:
            issues.append(
                ValidationIssue(
                    base + ("surfacePressureBar",),
                    'must be omitted when atmosphere type is "substantial-envelope"',
                )
            )
    return issues


def check_discovery(body: Body) -> list[ValidationIssue]:
    discovery = body.discovery
    if discovery is None:
        return []

    issues: list[ValidationIssue] = []
    if (
        discovery.discovery_year is not None
        and discovery.discovery_year_precision is None
    ):
        issues.append(
            ValidationIssue(
                ("discovery", "discoveryYearPrecision"),
                "is required when discoveryYear is set",
            )
        )
    if (
        discovery.discovery_year_precision == "prehistoric"
        and discovery.discovery_year is not None
    ):
        issues.append(
            ValidationIssue(
                ("discovery", "discoveryYear"),
                'must be omitted when discoveryYearPrecision is "prehistoric"',
            )
        )
    return issues


BODY_REFINEMENTS: tuple[Callable[[Body], list[ValidationIssue]], ...] = (
    check_citations,
    check_atmosphere,
    check_discovery,
)


# ------------------
# Validators
# ------------------


def validate_system(raw: Any) -> SchemaResult:
    try:
        return System.model_validate(raw)
    except ValidationError as exc:
        return _issues_from_error(exc)


def validate_body(raw: Any) -> SchemaResult:
    """Validate a body document, then apply the cross-field refinements.

    Returns:
        The typed Body, or every issue found. Refinement issues are only
        reported once the structural pass is clean.
    """
    try:
        body = Body.model_validate(raw)
    except ValidationError as exc:
        return _issues_from_error(exc)

    issues: list[ValidationIssue] = []
    for refinement in BODY_REFINEMENTS:
        issues.extend(refinement(body))
    return issues or body


def validate_mission(raw: Any) -> SchemaResult:
    try:
        return Mission.model_validate(raw)
    except ValidationError as exc:
        return _issues_from_error(exc)


SCHEMA_VALIDATORS: dict[EntityKind, Callable[[Any], SchemaResult]] = {
    "system": validate_system,
    "body": validate_body,
    "mission": validate_mission,
}


def validate_entity(kind: EntityKind, raw: Any) -> SchemaResult:
    """Dispatch ``raw`` to the validator for ``kind``."""
    validator = SCHEMA_VALIDATORS.get(kind)
    if validator is None:
        raise ValueError(f"Unknown entity kind: {kind!r}")
    return validator(raw)
