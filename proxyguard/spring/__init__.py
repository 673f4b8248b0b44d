from collections.abc import Mapping
from types import MappingProxyType

from ..rules import ArchRule
from .cache_rules import CACHEABLE_METHOD_NOT_CALLED_FROM_SAME_CLASS
from .component_predicates import (
    spring_annotated_with,
    spring_component,
    spring_configuration,
    spring_controller,
    spring_repository,
    spring_service,
)
from .proxy_rules import be_proxyable, not_be_called_from_within_the_same_class
from .retry_rules import (
    RETRYABLE_METHODS_ARE_PROXYABLE,
    RETRYABLE_METHODS_NOT_CALLED_FROM_SAME_CLASS,
)

RULES: Mapping[str, ArchRule] = MappingProxyType(
    {
        rule.display_name: rule
        for rule in (
            CACHEABLE_METHOD_NOT_CALLED_FROM_SAME_CLASS,
            RETRYABLE_METHODS_ARE_PROXYABLE,
            RETRYABLE_METHODS_NOT_CALLED_FROM_SAME_CLASS,
        )
    }
)

__all__ = [
    "CACHEABLE_METHOD_NOT_CALLED_FROM_SAME_CLASS",
    "RETRYABLE_METHODS_ARE_PROXYABLE",
    "RETRYABLE_METHODS_NOT_CALLED_FROM_SAME_CLASS",
    "RULES",
    "be_proxyable",
    "not_be_called_from_within_the_same_class",
    "spring_annotated_with",
    "spring_component",
    "spring_configuration",
    "spring_controller",
    "spring_repository",
    "spring_service",
]
