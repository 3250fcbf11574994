"""Point classifier and spare mirroring for DNP3 list generation."""

from typing import Iterable, Optional
from enum import Enum

from ..models import (
    Category,
    CategoryLists,
    PointAssignment,
    PointDeclaration,
    PointFamily,
    RuleSet,
    FAMILY_CATEGORIES,
    MIRROR_CATEGORY,
)


class TypeFamily(Enum):
    """Dispatch class of a TYPE= tag."""
    ANALOG = "ANALOG"                   # Dual-capable analog, direction from patterns
    DIGITAL = "DIGITAL"                 # Dual-capable digital, direction from patterns
    ANALOG_OUTPUT = "ANALOG_OUTPUT"     # Always AO
    DIGITAL_OUTPUT = "DIGITAL_OUTPUT"   # Always DO
    UNRECOGNIZED = "UNRECOGNIZED"


# Tags that fix the direction without pattern evaluation
EXPLICIT_OUTPUT_TAGS = {
    "AO": TypeFamily.ANALOG_OUTPUT,
    "DO": TypeFamily.DIGITAL_OUTPUT,
}

# Markers searched inside other tags, analog markers first
FAMILY_MARKERS = (
    ("AA", TypeFamily.ANALOG),      # Analog alarm
    ("REAL", TypeFamily.ANALOG),
    ("LA", TypeFamily.DIGITAL),     # Logic alarm
    ("BOOL", TypeFamily.DIGITAL),
)

POINT_FAMILY = {
    TypeFamily.ANALOG: PointFamily.ANALOG,
    TypeFamily.ANALOG_OUTPUT: PointFamily.ANALOG,
    TypeFamily.DIGITAL: PointFamily.DIGITAL,
    TypeFamily.DIGITAL_OUTPUT: PointFamily.DIGITAL,
}


def resolve_type_family(type_tag: str) -> TypeFamily:
    """
    Classify a TYPE= tag.

    Args:
        type_tag: Raw tag code (e.g., "AA", "LA", "REAL", "AO")

    Returns:
        TypeFamily enum value
    """
    if type_tag in EXPLICIT_OUTPUT_TAGS:
        return EXPLICIT_OUTPUT_TAGS[type_tag]

    for marker, type_family in FAMILY_MARKERS:
        if marker in type_tag:
            return type_family

    return TypeFamily.UNRECOGNIZED


def is_explicit_output(type_family: TypeFamily) -> bool:
    """Check if the tag class is a single-direction output."""
    return type_family in (TypeFamily.ANALOG_OUTPUT, TypeFamily.DIGITAL_OUTPUT)


def get_point_family(type_tag: str) -> Optional[PointFamily]:
    """Get the analog/digital family of a tag, None if unrecognized."""
    return POINT_FAMILY.get(resolve_type_family(type_tag))


def classify_point(
    declaration: PointDeclaration,
    rules: RuleSet
) -> Optional[PointAssignment]:
    """
    Decide the category of a declaration and build its mirrored spare.

    Explicit output tags are outputs unconditionally. For dual-capable tags the
    family's output patterns are evaluated against the bare point name: any
    match makes the point an output, otherwise it is an input.

    Args:
        declaration: Parsed point declaration
        rules: Active rule set

    Returns:
        PointAssignment, or None when the tag is not recognized
    """
    type_family = resolve_type_family(declaration.type_tag)
    if type_family == TypeFamily.UNRECOGNIZED:
        return None

    family = POINT_FAMILY[type_family]
    input_category, output_category = FAMILY_CATEGORIES[family]

    if is_explicit_output(type_family):
        is_output = True
    else:
        is_output = rules.patterns_for(family).matches(declaration.name)

    category = output_category if is_output else input_category

    return PointAssignment(
        declaration=declaration,
        family=family,
        category=category,
        entry=declaration.reference,
        spare_entry=rules.spare_entry(MIRROR_CATEGORY[category], declaration.name),
    )


def classify_into(
    declaration: PointDeclaration,
    rules: RuleSet,
    lists: CategoryLists
) -> Optional[PointAssignment]:
    """
    Classify a declaration and append it plus its spare to the lists.

    Args:
        declaration: Parsed point declaration
        rules: Active rule set
        lists: Lists of the current run

    Returns:
        The recorded PointAssignment, or None if nothing was appended
    """
    assignment = classify_point(declaration, rules)
    if assignment is not None:
        lists.record(assignment)
    return assignment


def classify_declarations(
    declarations: Iterable[PointDeclaration],
    rules: RuleSet
) -> CategoryLists:
    """
    Run one classification pass over declarations in encounter order.

    Args:
        declarations: Parsed declarations
        rules: Active rule set

    Returns:
        New CategoryLists owned by the caller
    """
    lists = CategoryLists()
    for declaration in declarations:
        classify_into(declaration, rules, lists)
    return lists


def get_family_summary(lists: CategoryLists) -> dict:
    """
    Summarize real points and spares per category.

    Args:
        lists: Filled category lists

    Returns:
        Dictionary keyed by category code with 'points', 'spares' and 'total'
    """
    summary = {}
    for category in Category:
        points = len(lists.real_entries(category))
        total = len(lists.entries(category))
        summary[category.value] = {
            "points": points,
            "spares": total - points,
            "total": total,
        }
    return summary
