"""Rules for Spring Retry's declarative ``@Retryable`` support."""

from ..rules import ArchRule, methods
from . import annotations as sa
from .component_predicates import spring_annotated_with
from .proxy_rules import be_proxyable, not_be_called_from_within_the_same_class

RETRYABLE_METHODS_ARE_PROXYABLE: ArchRule = (
    methods()
    .that(spring_annotated_with(sa.RETRYABLE))
    .should(be_proxyable())
    .named("retryable-methods-proxyable")
)
"""Spring must be able to proxy every ``@Retryable`` method.

The method should be public or at least non-private, non-final and non-static,
and its bean class should not be final. Otherwise the context fails to start
or calls are not retried.
"""

RETRYABLE_METHODS_NOT_CALLED_FROM_SAME_CLASS: ArchRule = (
    methods()
    .that(spring_annotated_with(sa.RETRYABLE))
    .should(not_be_called_from_within_the_same_class())
    .named("retryable-not-called-from-same-class")
)
"""``@Retryable`` methods must not be called from within their own class.

The internal call skips the retry proxy, so failures are never retried. Only
meaningful when retry runs in proxy mode (see ``@EnableRetry``).
"""
