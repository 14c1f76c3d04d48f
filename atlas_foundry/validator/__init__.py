from .schema_validator import (
    ValidationIssue,
    kind_from_filename,
    validate_body,
    validate_entity,
    validate_mission,
    validate_system,
)
from .integrity_validator import IntegrityValidator

__all__ = [
    "IntegrityValidator",
    "ValidationIssue",
    "kind_from_filename",
    "validate_body",
    "validate_entity",
    "validate_mission",
    "validate_system",
]
