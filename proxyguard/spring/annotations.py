"""Spring type identifiers and the library declarations behind them.

The Java source front end only sees the analyzed project, not the Spring jars
on its classpath. ``framework_catalog`` supplies the declarations the rules
depend on (how stereotypes compose, which Spring Data interfaces opt out of
repository detection) so that composition works on source-only models too.
"""

from ..constants import JAVA_MODIFIER_PUBLIC, ClassKind
from ..models import AnnotationInstance, JavaClass

COMPONENT = "org.springframework.stereotype.Component"
CONTROLLER = "org.springframework.stereotype.Controller"
SERVICE = "org.springframework.stereotype.Service"
REPOSITORY = "org.springframework.stereotype.Repository"
REST_CONTROLLER = "org.springframework.web.bind.annotation.RestController"
RESPONSE_BODY = "org.springframework.web.bind.annotation.ResponseBody"
CONFIGURATION = "org.springframework.context.annotation.Configuration"

CACHEABLE = "org.springframework.cache.annotation.Cacheable"
RETRYABLE = "org.springframework.retry.annotation.Retryable"

DATA_REPOSITORY = "org.springframework.data.repository.Repository"
NO_REPOSITORY_BEAN = "org.springframework.data.repository.NoRepositoryBean"
CRUD_REPOSITORY = "org.springframework.data.repository.CrudRepository"
LIST_CRUD_REPOSITORY = "org.springframework.data.repository.ListCrudRepository"
PAGING_AND_SORTING_REPOSITORY = (
    "org.springframework.data.repository.PagingAndSortingRepository"
)
JPA_REPOSITORY = "org.springframework.data.jpa.repository.JpaRepository"

_PUBLIC = frozenset({JAVA_MODIFIER_PUBLIC})


def _annotation_type(name: str, *meta: str) -> JavaClass:
    return JavaClass(
        name=name,
        kind=ClassKind.ANNOTATION,
        modifiers=_PUBLIC,
        annotations=tuple(AnnotationInstance(m) for m in meta),
    )


def _interface(name: str, *extends: str, excluded: bool = False) -> JavaClass:
    return JavaClass(
        name=name,
        kind=ClassKind.INTERFACE,
        modifiers=_PUBLIC,
        annotations=(AnnotationInstance(NO_REPOSITORY_BEAN),) if excluded else (),
        interfaces=extends,
    )


def framework_catalog() -> tuple[JavaClass, ...]:
    return (
        _annotation_type(COMPONENT),
        _annotation_type(CONTROLLER, COMPONENT),
        _annotation_type(SERVICE, COMPONENT),
        _annotation_type(REPOSITORY, COMPONENT),
        _annotation_type(CONFIGURATION, COMPONENT),
        _annotation_type(REST_CONTROLLER, CONTROLLER, RESPONSE_BODY),
        _annotation_type(RESPONSE_BODY),
        _annotation_type(CACHEABLE),
        _annotation_type(RETRYABLE),
        _annotation_type(NO_REPOSITORY_BEAN),
        _interface(DATA_REPOSITORY),
        _interface(CRUD_REPOSITORY, DATA_REPOSITORY, excluded=True),
        _interface(LIST_CRUD_REPOSITORY, CRUD_REPOSITORY, excluded=True),
        _interface(PAGING_AND_SORTING_REPOSITORY, DATA_REPOSITORY, excluded=True),
        _interface(
            JPA_REPOSITORY,
            LIST_CRUD_REPOSITORY,
            PAGING_AND_SORTING_REPOSITORY,
            excluded=True,
        ),
    )
