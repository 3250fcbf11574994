"""Classification rule set: output patterns and spare placeholders."""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .point import Category, PointFamily

logger = logging.getLogger(__name__)


class OutputPatternSet:
    """
    Ordered set of regular expressions deciding whether a point is an output.

    Patterns are compiled once. A pattern that fails to compile is logged and
    kept as a permanent non-match so the remaining patterns still apply.
    """

    def __init__(self, patterns: Iterable[str] = (), family: Optional[PointFamily] = None):
        """
        Compile the patterns.

        Args:
            patterns: Regular expressions in evaluation order
            family: Family the set belongs to, used in log messages only
        """
        self.family = family
        self._compiled: Dict[str, Optional[re.Pattern]] = {}

        label = family.value.lower() if family else "output"
        for source in patterns:
            if source in self._compiled:
                continue
            try:
                self._compiled[source] = re.compile(source)
            except re.error as e:
                logger.warning(
                    f"Invalid {label} output pattern {source!r} ignored: {e}"
                )
                self._compiled[source] = None

    @property
    def sources(self) -> List[str]:
        """All configured patterns, valid or not, in order."""
        return list(self._compiled)

    @property
    def invalid(self) -> List[str]:
        """Patterns that failed to compile."""
        return [source for source, compiled in self._compiled.items() if compiled is None]

    def first_match(self, name: str) -> Optional[str]:
        """Return the first pattern that matches the name, if any."""
        for source, compiled in self._compiled.items():
            if compiled is not None and compiled.search(name):
                return source
        return None

    def matches(self, name: str) -> bool:
        """Check whether any pattern matches anywhere in the name."""
        return self.first_match(name) is not None

    def __len__(self) -> int:
        return len(self._compiled)

    def __repr__(self) -> str:
        return f"OutputPatternSet({self.sources!r})"


@dataclass(frozen=True)
class RuleSet:
    """Read-only decision parameters for one classification run."""

    analog_output_patterns: OutputPatternSet
    digital_output_patterns: OutputPatternSet
    spare_ai: str
    spare_ao: str
    spare_di: str
    spare_do: str
    annotate_spares: bool = True

    @classmethod
    def from_patterns(
        cls,
        analog_output_regex: Iterable[str] = (),
        digital_output_regex: Iterable[str] = (),
        spare_ai: str = "SPARE_AI",
        spare_ao: str = "SPARE_AO",
        spare_di: str = "SPARE_DI",
        spare_do: str = "SPARE_DO",
        annotate_spares: bool = True,
    ) -> "RuleSet":
        """Build a rule set from raw pattern strings."""
        return cls(
            analog_output_patterns=OutputPatternSet(analog_output_regex, PointFamily.ANALOG),
            digital_output_patterns=OutputPatternSet(digital_output_regex, PointFamily.DIGITAL),
            spare_ai=spare_ai,
            spare_ao=spare_ao,
            spare_di=spare_di,
            spare_do=spare_do,
            annotate_spares=annotate_spares,
        )

    def patterns_for(self, family: PointFamily) -> OutputPatternSet:
        """Get the output pattern set of a family."""
        if family == PointFamily.ANALOG:
            return self.analog_output_patterns
        return self.digital_output_patterns

    def spare_name(self, category: Category) -> str:
        """Configured placeholder for a category."""
        mapping = {
            Category.AI: self.spare_ai,
            Category.AO: self.spare_ao,
            Category.DI: self.spare_di,
            Category.DO: self.spare_do,
        }
        return mapping[category]

    def spare_entry(self, category: Category, point_name: str) -> str:
        """
        Placeholder text for a mirrored slot.

        With annotation enabled the bare point name is appended in
        parentheses, e.g. "SPARE_AO(FT041_H_H)".
        """
        spare = self.spare_name(category)
        if self.annotate_spares:
            return f"{spare}({point_name})"
        return spare

    @property
    def invalid_patterns(self) -> List[str]:
        """All patterns across both families that failed to compile."""
        return self.analog_output_patterns.invalid + self.digital_output_patterns.invalid
