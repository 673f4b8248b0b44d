from __future__ import annotations

from dataclasses import dataclass

from .models import Violation
from .predicates import AnalysisContext
from .types_defs import ConditionCheck


@dataclass(frozen=True)
class ArchCondition[T]:
    """What every selected element must satisfy.

    ``check`` returns the violations found for one element; an empty list
    means the element satisfies the condition.
    """

    description: str
    check: ConditionCheck[T]

    def __call__(self, element: T, context: AnalysisContext) -> list[Violation]:
        return self.check(element, context)

    def __str__(self) -> str:
        return self.description
