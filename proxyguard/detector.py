from collections.abc import Iterable, Set

from .models import JavaMethod, Violation
from .program_model import ProgramModel


def self_invocations_of(method: JavaMethod, model: ProgramModel) -> list[Violation]:
    """Report every recorded call of ``method`` made from within its own class.

    Each call site is reported on its own, even when the same caller calls the
    method several times. A method without recorded callers yields nothing.
    """
    violations: list[Violation] = []
    for call in model.calls_to(method):
        model.require_method(call.origin)
        if call.is_same_class:
            violations.append(Violation(method, call.description))
    return violations


def find_self_invocations(
    methods: Iterable[JavaMethod], model: ProgramModel
) -> list[Violation]:
    ordered = (
        sorted(methods, key=lambda m: m.full_name)
        if isinstance(methods, Set)
        else methods
    )
    violations: list[Violation] = []
    for method in ordered:
        violations.extend(self_invocations_of(method, model))
    return violations
