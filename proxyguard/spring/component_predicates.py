from ..constants import ResolutionMode
from ..models import JavaClass
from ..predicates import DescribedPredicate, annotated_with, assignable_to
from . import annotations as sa


def spring_annotated_with(
    type_name: str, mode: ResolutionMode = ResolutionMode.META
) -> DescribedPredicate:
    return annotated_with(type_name, mode)


def spring_component() -> DescribedPredicate[JavaClass]:
    """Classes annotated or meta-annotated with ``@Component``.

    This covers ``@Controller``, ``@RestController``, ``@Service``,
    ``@Repository`` and ``@Configuration``, and interfaces extending the
    Spring Data ``Repository`` interface.
    """
    has_component = spring_annotated_with(sa.COMPONENT, ResolutionMode.SUBTYPE)
    return (has_component | _spring_data_repository()).named("Spring component")


def spring_controller() -> DescribedPredicate[JavaClass]:
    return spring_annotated_with(sa.CONTROLLER, ResolutionMode.SUBTYPE).named(
        "Spring controller"
    )


def spring_service() -> DescribedPredicate[JavaClass]:
    return spring_annotated_with(sa.SERVICE, ResolutionMode.SUBTYPE).named(
        "Spring service"
    )


def spring_repository() -> DescribedPredicate[JavaClass]:
    """Classes annotated with ``@Repository`` or Spring Data repositories."""
    has_repository = spring_annotated_with(sa.REPOSITORY, ResolutionMode.SUBTYPE)
    return (has_repository | _spring_data_repository()).named("Spring repository")


def spring_configuration() -> DescribedPredicate[JavaClass]:
    return spring_annotated_with(sa.CONFIGURATION, ResolutionMode.SUBTYPE).named(
        "Spring configuration"
    )


def _spring_data_repository() -> DescribedPredicate[JavaClass]:
    # (H) @NoRepositoryBean only opts out the interface carrying it
    return assignable_to(sa.DATA_REPOSITORY, excluding=(sa.NO_REPOSITORY_BEAN,))
