from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from . import constants as cs
from .types_defs import AnnotationAttributes, TypeName


@dataclass(frozen=True, slots=True)
class AnnotationInstance:
    type_name: TypeName
    attributes: AnnotationAttributes = field(
        default_factory=dict, compare=False, hash=False
    )

    @property
    def simple_name(self) -> str:
        return self.type_name.rsplit(cs.SEPARATOR_DOT, 1)[-1]


@dataclass(frozen=True, slots=True)
class JavaClass:
    """A type declaration of the analyzed program.

    Annotation types are modelled as classes of kind ``ANNOTATION`` so that
    the annotations placed on them (meta-annotations) are read exactly like
    the annotations of any other class.
    """

    name: TypeName
    kind: cs.ClassKind = cs.ClassKind.CLASS
    modifiers: frozenset[str] = frozenset()
    annotations: tuple[AnnotationInstance, ...] = ()
    superclass: TypeName | None = None
    interfaces: tuple[TypeName, ...] = ()
    source_file: str | None = None
    line: int | None = None

    @property
    def full_name(self) -> str:
        return self.name

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(cs.SEPARATOR_DOT, 1)[-1]

    @property
    def package_name(self) -> str:
        if cs.SEPARATOR_DOT not in self.name:
            return ""
        return self.name.rsplit(cs.SEPARATOR_DOT, 1)[0]

    @property
    def supertypes(self) -> tuple[TypeName, ...]:
        if self.superclass is None:
            return self.interfaces
        return (self.superclass, *self.interfaces)

    @property
    def is_final(self) -> bool:
        # (H) enums and records cannot be subclassed by a proxy generator either
        return cs.JAVA_MODIFIER_FINAL in self.modifiers or self.kind in (
            cs.ClassKind.ENUM,
            cs.ClassKind.RECORD,
        )

    @property
    def is_annotation(self) -> bool:
        return self.kind == cs.ClassKind.ANNOTATION

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class JavaMethod:
    owner: TypeName
    name: str
    parameter_types: tuple[str, ...] = ()
    modifiers: frozenset[str] = frozenset()
    annotations: tuple[AnnotationInstance, ...] = ()
    is_constructor: bool = False
    line: int | None = None

    @property
    def full_name(self) -> str:
        return cs.METHOD_FULL_NAME.format(
            owner=self.owner,
            name=self.name,
            parameters=cs.SEPARATOR_COMMA.join(self.parameter_types),
        )

    @property
    def visibility(self) -> cs.Visibility:
        if cs.JAVA_MODIFIER_PUBLIC in self.modifiers:
            return cs.Visibility.PUBLIC
        if cs.JAVA_MODIFIER_PROTECTED in self.modifiers:
            return cs.Visibility.PROTECTED
        if cs.JAVA_MODIFIER_PRIVATE in self.modifiers:
            return cs.Visibility.PRIVATE
        return cs.Visibility.PACKAGE

    @property
    def is_private(self) -> bool:
        return self.visibility == cs.Visibility.PRIVATE

    @property
    def is_final(self) -> bool:
        return cs.JAVA_MODIFIER_FINAL in self.modifiers

    @property
    def is_static(self) -> bool:
        return cs.JAVA_MODIFIER_STATIC in self.modifiers

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True, slots=True)
class CallSite:
    """One static call edge from ``origin`` to ``target``.

    ``target_owner`` is the class the call is dispatched through. It is the
    declaring class of ``target`` unless the call reaches an inherited method
    through a subclass, in which case it names that subclass.
    """

    origin: str
    origin_owner: TypeName
    target: str
    target_owner: TypeName
    source_file: str | None = None
    line: int | None = None
    origin_is_constructor: bool = False

    @property
    def is_same_class(self) -> bool:
        return self.origin_owner == self.target_owner

    @property
    def location(self) -> str:
        if self.source_file is None:
            return cs.UNKNOWN_LOCATION
        file_name = Path(self.source_file).name
        if self.line is None:
            return file_name
        return cs.CALL_LOCATION.format(file=file_name, line=self.line)

    @property
    def description(self) -> str:
        kind = (
            cs.CODE_UNIT_CONSTRUCTOR
            if self.origin_is_constructor
            else cs.CODE_UNIT_METHOD
        )
        return cs.CALL_DESCRIPTION.format(
            kind=kind, origin=self.origin, target=self.target, location=self.location
        )

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class Violation:
    element: JavaClass | JavaMethod
    description: str

    @property
    def element_name(self) -> str:
        return self.element.full_name


def _default_console() -> Console:
    return Console(width=None, stderr=False)


@dataclass
class AppContext:
    console: Console = field(default_factory=_default_console)
