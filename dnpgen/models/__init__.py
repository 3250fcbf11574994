"""Data models for the DNP3 point list generator."""

from .point import (
    Category,
    PointFamily,
    PointDeclaration,
    PointAssignment,
    CategoryLists,
    POINT_NAMESPACE,
    FAMILY_CATEGORIES,
    MIRROR_CATEGORY,
    canonical_reference,
)

from .rules import (
    OutputPatternSet,
    RuleSet,
)

__all__ = [
    # Points
    "Category",
    "PointFamily",
    "PointDeclaration",
    "PointAssignment",
    "CategoryLists",
    "POINT_NAMESPACE",
    "FAMILY_CATEGORIES",
    "MIRROR_CATEGORY",
    "canonical_reference",
    # Rules
    "OutputPatternSet",
    "RuleSet",
]
