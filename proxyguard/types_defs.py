from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple, Protocol, TypedDict

from .constants import ClassKind

if TYPE_CHECKING:
    from tree_sitter import Node

    from .models import Violation
    from .predicates import AnalysisContext

type TypeName = str
type AnnotationValue = str | int | float | bool | list[str] | None
type AnnotationAttributes = dict[str, AnnotationValue]

type ASTNode = Node
type LanguageLoader = Callable[[], object]
type ElementTest[T] = Callable[[T, AnalysisContext], bool]
type ConditionCheck[T] = Callable[[T, AnalysisContext], list[Violation]]


class ModelSummary(TypedDict):
    total_classes: int
    total_methods: int
    total_calls: int
    class_kinds: dict[str, int]
    annotated_methods: int


class ModelMetadata(TypedDict, total=False):
    format_version: int
    exported_at: str
    source: str


class JavaParameter(NamedTuple):
    name: str
    type_name: str


class JavaAnnotationInfo(TypedDict):
    name: str | None
    arguments: AnnotationAttributes


class JavaClassInfo(TypedDict):
    name: str | None
    kind: ClassKind
    superclass: str | None
    interfaces: list[str]
    modifiers: list[str]
    annotations: list[JavaAnnotationInfo]
    components: list[JavaParameter]
    line: int


class JavaMethodInfo(TypedDict):
    name: str | None
    is_constructor: bool
    parameters: list[JavaParameter]
    modifiers: list[str]
    annotations: list[JavaAnnotationInfo]
    line: int


class JavaFieldInfo(TypedDict):
    names: list[str]
    type: str | None
    modifiers: list[str]


class JavaMethodCallInfo(TypedDict):
    name: str | None
    receiver: str | None
    arguments: int
    line: int


class LoadableProtocol(Protocol):
    def _ensure_loaded(self) -> None: ...


class TreeSitterNodeProtocol(Protocol):
    @property
    def type(self) -> str: ...
    @property
    def text(self) -> bytes | None: ...
