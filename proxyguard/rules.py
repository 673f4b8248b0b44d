from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from itertools import chain

from loguru import logger

from . import constants as cs
from . import exceptions as ex
from . import logs as ls
from .conditions import ArchCondition
from .decorators import timing_decorator
from .models import JavaClass, JavaMethod, Violation
from .predicates import AnalysisContext, DescribedPredicate
from .program_model import ProgramModel


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    rule: ArchRule
    violations: tuple[Violation, ...]

    @property
    def passed(self) -> bool:
        return not self.violations

    def failure_report(self) -> str:
        header = cs.RULE_REPORT_HEADER.format(
            rule=self.rule.description, count=len(self.violations)
        )
        return "\n".join([header, *(v.description for v in self.violations)])


@dataclass(frozen=True)
class ArchRule[T: (JavaClass, JavaMethod)]:
    """An immutable (subject, predicate, condition) triple.

    Rules are declared once at import time and evaluated against any number
    of program models; the model always arrives as an argument.
    """

    subject: cs.RuleSubject
    predicate: DescribedPredicate[T]
    condition: ArchCondition[T]
    name: str | None = None

    @property
    def description(self) -> str:
        return cs.RULE_DESCRIPTION.format(
            subject=self.subject,
            predicate=self.predicate.description,
            condition=self.condition.description,
        )

    @property
    def display_name(self) -> str:
        return self.name or self.description

    def named(self, name: str) -> ArchRule[T]:
        return replace(self, name=name)

    def candidates(self, model: ProgramModel) -> Sequence[JavaClass | JavaMethod]:
        match self.subject:
            case cs.RuleSubject.CLASSES:
                return model.classes
            case cs.RuleSubject.METHODS:
                return [m for m in model.methods if not m.is_constructor]
            case _:
                raise ValueError(self.subject)

    @timing_decorator
    def evaluate(
        self, target: ProgramModel | AnalysisContext, workers: int = 1
    ) -> EvaluationResult:
        context = (
            target
            if isinstance(target, AnalysisContext)
            else AnalysisContext.for_model(target)
        )
        elements = self.candidates(context.model)
        logger.debug(
            ls.EVALUATING_RULE.format(
                rule=self.display_name, count=len(elements), subject=self.subject
            )
        )

        def violations_of(element: T) -> list[Violation]:
            if not self.predicate(element, context):
                return []
            return self.condition(element, context)

        if workers > 1:
            logger.debug(
                ls.PARALLEL_EVALUATION.format(count=len(elements), workers=workers)
            )
            with ThreadPoolExecutor(max_workers=workers) as executor:
                per_element = list(executor.map(violations_of, elements))
        else:
            per_element = [violations_of(element) for element in elements]

        violations = tuple(chain.from_iterable(per_element))
        logger.debug(
            ls.RULE_RESULT.format(rule=self.display_name, count=len(violations))
        )
        return EvaluationResult(rule=self, violations=violations)

    def check(self, target: ProgramModel | AnalysisContext, workers: int = 1) -> None:
        result = self.evaluate(target, workers=workers)
        if not result.passed:
            raise ex.RuleViolationError(result.failure_report())


@dataclass(frozen=True)
class SelectedElements[T: (JavaClass, JavaMethod)]:
    subject: cs.RuleSubject
    predicate: DescribedPredicate[T]

    def should(self, condition: ArchCondition[T]) -> ArchRule[T]:
        return ArchRule(self.subject, self.predicate, condition)


@dataclass(frozen=True, slots=True)
class GivenElements:
    subject: cs.RuleSubject

    def that[T: (JavaClass, JavaMethod)](
        self, predicate: DescribedPredicate[T]
    ) -> SelectedElements[T]:
        return SelectedElements(self.subject, predicate)


def methods() -> GivenElements:
    return GivenElements(cs.RuleSubject.METHODS)


def classes() -> GivenElements:
    return GivenElements(cs.RuleSubject.CLASSES)
