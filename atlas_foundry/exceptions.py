"""Exceptions raised while loading the content graph.

Every error is fatal to the load. Paths are relative to the content root so
a human can go straight to the offending document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from atlas_foundry.validator.schema_validator import ValidationIssue


class ContentError(Exception):
    """Base class for all content load failures."""

    def __init__(self, message: str, rel_path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.rel_path = rel_path


class ParseError(ContentError):
    """Raised when a content document is not valid JSON."""

    pass


class SchemaValidationError(ContentError):
    """Raised when a document violates its kind's schema.

    Attributes:
        issues: Every issue found in the document, in the order reported.
        field_path: Dot-joined path of the first issue, or ``(root)``.
    """

    def __init__(self, rel_path: str, issues: list["ValidationIssue"]) -> None:
        self.issues = issues
        self.field_path = issues[0].field_path if issues else "(root)"
        summary = "; ".join(str(issue) for issue in issues)
        super().__init__(
            f"Schema validation failed for {rel_path}: {summary}", rel_path=rel_path
        )


class DuplicateIdError(ContentError):
    """Raised when two documents declare the same id."""

    def __init__(
        self,
        entity_id: str,
        first_kind: str,
        first_path: str,
        second_kind: str,
        second_path: str,
    ) -> None:
        self.entity_id = entity_id
        self.first_path = first_path
        self.second_path = second_path
        super().__init__(
            f'Duplicate id: "{entity_id}" (found in {first_kind}: {first_path} '
            f"and {second_kind}: {second_path})",
            rel_path=second_path,
        )


class ReferenceIntegrityError(ContentError):
    """Raised when an id reference does not resolve."""

    def __init__(
        self, message: str, entity_id: str, field_path: str, rel_path: str
    ) -> None:
        self.entity_id = entity_id
        self.field_path = field_path
        super().__init__(message, rel_path=rel_path)


class HierarchyInvariantError(ContentError):
    """Raised when the navigation tree is malformed.

    Covers self-parenting, a mismatched ``primaryBodyId``, extra direct
    children of a system root, and cycles between bodies.
    """

    def __init__(self, message: str, entity_id: str, rel_path: str) -> None:
        self.entity_id = entity_id
        super().__init__(message, rel_path=rel_path)
