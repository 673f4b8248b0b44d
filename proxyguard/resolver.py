from collections import deque
from collections.abc import Callable, Hashable, Iterable
from functools import cached_property

from loguru import logger

from . import exceptions as ex
from . import logs as ls
from .constants import ResolutionMode
from .models import AnnotationInstance, JavaClass, JavaMethod
from .program_model import ProgramModel
from .types_defs import TypeName

type ResolverCacheKey = tuple[
    JavaClass | JavaMethod, TypeName, ResolutionMode, tuple[TypeName, ...]
]


def reaches[N: Hashable](
    start: Iterable[N],
    expand: Callable[[N], Iterable[N]],
    goal: Callable[[N], bool],
) -> bool:
    """Breadth-first search from ``start`` until a node satisfies ``goal``.

    Every node is visited at most once, so cyclic graphs terminate.
    """
    visited: set[N] = set()
    queue: deque[N] = deque()
    for node in start:
        if node not in visited:
            visited.add(node)
            queue.append(node)

    while queue:
        node = queue.popleft()
        if goal(node):
            return True
        for neighbour in expand(node):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return False


class AnnotationResolver:
    """Answers "is this element annotated with X" against one program model.

    DIRECT looks at the element's own annotations only. META additionally
    follows annotation types to the annotations declared on them, transitively.
    SUBTYPE (classes) additionally accepts a META match on any supertype or
    superinterface. Marker annotations passed as ``excluding`` veto a match
    when present on the element under test; markers on ancestors are ignored.

    Annotation types missing from the model simply have no meta-annotations,
    so unknown identifiers resolve to ``False``.
    """

    def __init__(self, model: ProgramModel) -> None:
        self._model = model
        self._cache: dict[ResolverCacheKey, bool] = {}

    @property
    def model(self) -> ProgramModel:
        return self._model

    @cached_property
    def meta_annotations(self) -> dict[TypeName, tuple[TypeName, ...]]:
        graph = {
            java_class.name: tuple(a.type_name for a in java_class.annotations)
            for java_class in self._model.classes
            if java_class.annotations
        }
        logger.debug(ls.META_GRAPH_BUILT.format(count=len(graph)))
        return graph

    def is_annotated(
        self,
        element: JavaClass | JavaMethod,
        type_name: TypeName,
        mode: ResolutionMode = ResolutionMode.META,
        excluding: Iterable[TypeName] = (),
    ) -> bool:
        key: ResolverCacheKey = (element, type_name, mode, tuple(excluding))
        if (cached := self._cache.get(key)) is not None:
            return cached
        result = self._resolve(element, type_name, mode, key[3])
        self._cache[key] = result
        return result

    def is_assignable_to(
        self,
        java_class: JavaClass,
        type_name: TypeName,
        excluding: Iterable[TypeName] = (),
    ) -> bool:
        if self._is_excluded(java_class, excluding):
            return False
        return reaches(
            [java_class.name],
            self._supertype_expansion(java_class),
            lambda name: name == type_name,
        )

    def _resolve(
        self,
        element: JavaClass | JavaMethod,
        type_name: TypeName,
        mode: ResolutionMode,
        excluding: tuple[TypeName, ...],
    ) -> bool:
        if self._is_excluded(element, excluding):
            return False

        match mode:
            case ResolutionMode.DIRECT:
                return any(a.type_name == type_name for a in element.annotations)
            case ResolutionMode.META:
                return self._has_meta(element.annotations, type_name)
            case ResolutionMode.SUBTYPE:
                if isinstance(element, JavaMethod):
                    return self._has_meta(element.annotations, type_name)
                return reaches(
                    [element.name],
                    self._supertype_expansion(element),
                    lambda name: self._has_meta(
                        self._class_annotations(element, name), type_name
                    ),
                )
            case _:
                raise ValueError(ex.UNKNOWN_MODE.format(mode=mode))

    def _is_excluded(
        self, element: JavaClass | JavaMethod, markers: Iterable[TypeName]
    ) -> bool:
        return any(self._has_meta(element.annotations, marker) for marker in markers)

    def _has_meta(
        self, annotations: Iterable[AnnotationInstance], type_name: TypeName
    ) -> bool:
        graph = self.meta_annotations
        return reaches(
            (a.type_name for a in annotations),
            lambda name: graph.get(name, ()),
            lambda name: name == type_name,
        )

    def _class_annotations(
        self, java_class: JavaClass, name: TypeName
    ) -> tuple[AnnotationInstance, ...]:
        if name == java_class.name:
            return java_class.annotations
        return self._model.annotations_of(name)

    def _supertype_expansion(
        self, java_class: JavaClass
    ) -> Callable[[TypeName], tuple[TypeName, ...]]:
        def expand(name: TypeName) -> tuple[TypeName, ...]:
            if name == java_class.name:
                return java_class.supertypes
            return self._model.supertypes_of(name)

        return expand
