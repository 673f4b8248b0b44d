"""Conditions shared by the rules of Spring's proxy-based features."""

from .. import exceptions as ex
from ..conditions import ArchCondition
from ..detector import self_invocations_of
from ..models import JavaMethod, Violation
from ..predicates import AnalysisContext
from ..proxyability import proxyability_issues


def not_be_called_from_within_the_same_class() -> ArchCondition[JavaMethod]:
    """Calls from within the declaring class bypass the proxy.

    Spring applies caching, retry and similar advice by wrapping the bean in a
    proxy. A method calling a sibling method of its own class talks to the
    target object directly, so the advice silently does not run.
    """

    def check(method: JavaMethod, context: AnalysisContext) -> list[Violation]:
        return self_invocations_of(method, context.model)

    return ArchCondition("not be called from within the same class", check)


def be_proxyable() -> ArchCondition[JavaMethod]:
    """Spring can only intercept methods a proxy subclass is able to override.

    Such methods must not be private, final or static, and the class declaring
    them must not be final. Otherwise the context may fail to start, or the
    advice is skipped at runtime.
    """

    def check(method: JavaMethod, context: AnalysisContext) -> list[Violation]:
        return [
            Violation(method, ex.NOT_PROXYABLE.format(reason=reason))
            for reason in proxyability_issues(method, context.model)
        ]

    return ArchCondition("be proxyable", check)
