from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from . import constants as cs
from .models import AnnotationInstance, JavaClass, JavaMethod
from .program_model import ProgramModel
from .resolver import AnnotationResolver
from .types_defs import ElementTest, TypeName


@dataclass(frozen=True, slots=True)
class AnalysisContext:
    model: ProgramModel
    resolver: AnnotationResolver

    @classmethod
    def for_model(cls, model: ProgramModel) -> AnalysisContext:
        return cls(model=model, resolver=AnnotationResolver(model))


@dataclass(frozen=True)
class DescribedPredicate[T]:
    """A side-effect free test over elements, with a description for reports.

    Predicates are built once and evaluated against many elements, possibly
    from several threads; all run state arrives through the context.
    """

    description: str
    test: ElementTest[T]

    def __call__(self, element: T, context: AnalysisContext) -> bool:
        return self.test(element, context)

    def named(self, description: str) -> DescribedPredicate[T]:
        return DescribedPredicate(description, self.test)

    def __and__(self, other: DescribedPredicate[T]) -> DescribedPredicate[T]:
        return and_(self, other)

    def __or__(self, other: DescribedPredicate[T]) -> DescribedPredicate[T]:
        return or_(self, other)

    def __invert__(self) -> DescribedPredicate[T]:
        return not_(self)

    def __str__(self) -> str:
        return self.description


def and_[T](
    left: DescribedPredicate[T], right: DescribedPredicate[T]
) -> DescribedPredicate[T]:
    return DescribedPredicate(
        cs.PREDICATE_AND.format(left=left.description, right=right.description),
        lambda element, context: left(element, context) and right(element, context),
    )


def or_[T](
    left: DescribedPredicate[T], right: DescribedPredicate[T]
) -> DescribedPredicate[T]:
    return DescribedPredicate(
        cs.PREDICATE_OR.format(left=left.description, right=right.description),
        lambda element, context: left(element, context) or right(element, context),
    )


def not_[T](operand: DescribedPredicate[T]) -> DescribedPredicate[T]:
    return DescribedPredicate(
        cs.PREDICATE_NOT.format(operand=operand.description),
        lambda element, context: not operand(element, context),
    )


_MODE_DESCRIPTIONS = {
    cs.ResolutionMode.DIRECT: cs.PREDICATE_ANNOTATED_WITH,
    cs.ResolutionMode.META: cs.PREDICATE_META_ANNOTATED_WITH,
    cs.ResolutionMode.SUBTYPE: cs.PREDICATE_SUBTYPE_ANNOTATED_WITH,
}


def annotated_with(
    type_name: TypeName,
    mode: cs.ResolutionMode = cs.ResolutionMode.META,
    excluding: Iterable[TypeName] = (),
) -> DescribedPredicate[JavaClass | JavaMethod]:
    markers = tuple(excluding)
    simple_name = AnnotationInstance(type_name).simple_name

    def test(element: JavaClass | JavaMethod, context: AnalysisContext) -> bool:
        return context.resolver.is_annotated(element, type_name, mode, markers)

    return DescribedPredicate(_MODE_DESCRIPTIONS[mode].format(name=simple_name), test)


def assignable_to(
    type_name: TypeName, excluding: Iterable[TypeName] = ()
) -> DescribedPredicate[JavaClass]:
    markers = tuple(excluding)

    def test(java_class: JavaClass, context: AnalysisContext) -> bool:
        return context.resolver.is_assignable_to(java_class, type_name, markers)

    return DescribedPredicate(cs.PREDICATE_ASSIGNABLE_TO.format(name=type_name), test)


def declared_in(
    class_predicate: DescribedPredicate[JavaClass],
) -> DescribedPredicate[JavaMethod]:
    def test(method: JavaMethod, context: AnalysisContext) -> bool:
        return class_predicate(context.model.require_class(method.owner), context)

    return DescribedPredicate(
        cs.PREDICATE_DECLARED_IN.format(description=class_predicate.description),
        test,
    )


def constructors() -> DescribedPredicate[JavaMethod]:
    return DescribedPredicate(
        cs.PREDICATE_CONSTRUCTORS, lambda method, _context: method.is_constructor
    )
