"""Point declaration and category list models for DNP3 list generation."""

from dataclasses import dataclass, field
from typing import Dict, List
from enum import Enum


# Namespace prefix of every global variable reference in a .SIG file
POINT_NAMESPACE = "@GV"


class Category(Enum):
    """DNP3 list categories."""
    AI = "AI"    # Analog Input
    AO = "AO"    # Analog Output
    DI = "DI"    # Digital Input
    DO = "DO"    # Digital Output


class PointFamily(Enum):
    """Analog/digital family of a point, independent of direction."""
    ANALOG = "ANALOG"
    DIGITAL = "DIGITAL"


# Input/output category pairs per family
FAMILY_CATEGORIES = {
    PointFamily.ANALOG: (Category.AI, Category.AO),
    PointFamily.DIGITAL: (Category.DI, Category.DO),
}

# Category that receives the mirrored spare
MIRROR_CATEGORY = {
    Category.AI: Category.AO,
    Category.AO: Category.AI,
    Category.DI: Category.DO,
    Category.DO: Category.DI,
}


def canonical_reference(name: str) -> str:
    """Build the full point reference (e.g. "@GV.FT041") from a bare name."""
    return f"{POINT_NAMESPACE}.{name}"


@dataclass(frozen=True)
class PointDeclaration:
    """A single point extracted from a SIG= line."""

    name: str                   # Bare identifier, e.g. "FT041_H_H"
    type_tag: str               # Raw TYPE= code, e.g. "AA", "LA", "AO"
    line_number: int = 0        # 1-based source line, 0 if unknown

    @property
    def reference(self) -> str:
        """Canonical reference written to the list file."""
        return canonical_reference(self.name)


@dataclass(frozen=True)
class PointAssignment:
    """Outcome of classifying one declaration."""

    declaration: PointDeclaration
    family: PointFamily
    category: Category          # List that receives the real point
    entry: str                  # Text written for the real point
    spare_entry: str            # Text written in the mirrored slot

    @property
    def spare_category(self) -> Category:
        return MIRROR_CATEGORY[self.category]

    @property
    def is_output(self) -> bool:
        return self.category in (Category.AO, Category.DO)


@dataclass
class CategoryLists:
    """
    The four ordered DNP3 lists built during one classification pass.

    Entries are only ever added through record(), which appends to both lists
    of a family at once, so AI/AO and DI/DO always have equal lengths.
    """

    ai: List[str] = field(default_factory=list)
    ao: List[str] = field(default_factory=list)
    di: List[str] = field(default_factory=list)
    do: List[str] = field(default_factory=list)
    assignments: List[PointAssignment] = field(default_factory=list)

    def entries(self, category: Category) -> List[str]:
        """Get the list for a category."""
        mapping = {
            Category.AI: self.ai,
            Category.AO: self.ao,
            Category.DI: self.di,
            Category.DO: self.do,
        }
        return mapping[category]

    def record(self, assignment: PointAssignment) -> None:
        """Append a real entry and its mirrored spare."""
        self.entries(assignment.category).append(assignment.entry)
        self.entries(assignment.spare_category).append(assignment.spare_entry)
        self.assignments.append(assignment)

    @property
    def counts(self) -> Dict[str, int]:
        """Entry count per category, spares included."""
        return {category.value: len(self.entries(category)) for category in Category}

    @property
    def point_count(self) -> int:
        """Number of real points classified."""
        return len(self.assignments)

    @property
    def is_aligned(self) -> bool:
        """Check the input/output mirror invariant."""
        return len(self.ai) == len(self.ao) and len(self.di) == len(self.do)

    def real_entries(self, category: Category) -> List[str]:
        """Real point references assigned to a category, in encounter order."""
        return [a.entry for a in self.assignments if a.category == category]
