from collections import Counter, defaultdict
from collections.abc import Iterable

from loguru import logger

from . import exceptions as ex
from . import logs as ls
from .models import AnnotationInstance, CallSite, JavaClass, JavaMethod
from .types_defs import ModelSummary, TypeName


class ProgramModel:
    """Read-only view of the analyzed program.

    Built once per run, either by the Java source front end or from a model
    file, and shared by every query of that run. Nothing in the package
    mutates a model after construction; ``with_classes`` returns a new one.
    """

    def __init__(
        self,
        classes: Iterable[JavaClass] = (),
        methods: Iterable[JavaMethod] = (),
        calls: Iterable[CallSite] = (),
    ) -> None:
        self._classes: dict[TypeName, JavaClass] = {}
        for java_class in classes:
            if java_class.name in self._classes:
                raise ex.ModelInconsistencyError(
                    ex.DUPLICATE_CLASS.format(name=java_class.name)
                )
            self._classes[java_class.name] = java_class

        self._methods: dict[str, JavaMethod] = {}
        self._methods_by_owner: defaultdict[TypeName, list[JavaMethod]] = (
            defaultdict(list)
        )
        for method in methods:
            if method.full_name in self._methods:
                raise ex.ModelInconsistencyError(
                    ex.DUPLICATE_METHOD.format(name=method.full_name)
                )
            self._methods[method.full_name] = method
            self._methods_by_owner[method.owner].append(method)

        self._calls: tuple[CallSite, ...] = tuple(calls)
        self._calls_by_target: defaultdict[str, list[CallSite]] = defaultdict(list)
        for call in self._calls:
            self._calls_by_target[call.target].append(call)

    @property
    def classes(self) -> tuple[JavaClass, ...]:
        return tuple(self._classes.values())

    @property
    def methods(self) -> tuple[JavaMethod, ...]:
        return tuple(self._methods.values())

    @property
    def calls(self) -> tuple[CallSite, ...]:
        return self._calls

    def get_class(self, name: TypeName) -> JavaClass | None:
        return self._classes.get(name)

    def require_class(self, name: TypeName) -> JavaClass:
        if (java_class := self._classes.get(name)) is None:
            raise ex.ModelInconsistencyError(ex.UNKNOWN_CLASS.format(name=name))
        return java_class

    def get_method(self, full_name: str) -> JavaMethod | None:
        return self._methods.get(full_name)

    def require_method(self, full_name: str) -> JavaMethod:
        if (method := self._methods.get(full_name)) is None:
            raise ex.ModelInconsistencyError(ex.UNKNOWN_METHOD.format(name=full_name))
        return method

    def methods_of(self, class_name: TypeName) -> tuple[JavaMethod, ...]:
        return tuple(self._methods_by_owner.get(class_name, ()))

    def calls_to(self, method: JavaMethod) -> tuple[CallSite, ...]:
        return tuple(self._calls_by_target.get(method.full_name, ()))

    def annotations_of(self, type_name: TypeName) -> tuple[AnnotationInstance, ...]:
        if (java_class := self._classes.get(type_name)) is None:
            return ()
        return java_class.annotations

    def supertypes_of(self, type_name: TypeName) -> tuple[TypeName, ...]:
        if (java_class := self._classes.get(type_name)) is None:
            return ()
        return java_class.supertypes

    def with_classes(self, extra: Iterable[JavaClass]) -> "ProgramModel":
        missing = [c for c in extra if c.name not in self._classes]
        if not missing:
            return self
        return ProgramModel(
            classes=(*self._classes.values(), *missing),
            methods=self._methods.values(),
            calls=self._calls,
        )

    def validate(self) -> None:
        logger.debug(ls.VALIDATING_MODEL)
        for method in self._methods.values():
            if method.owner not in self._classes:
                raise ex.ModelInconsistencyError(
                    ex.METHOD_OWNER_MISSING.format(
                        method=method.full_name, owner=method.owner
                    )
                )
        for call in self._calls:
            origin = self._methods.get(call.origin)
            if origin is None:
                raise ex.ModelInconsistencyError(
                    ex.UNKNOWN_CALL_ORIGIN.format(call=call, name=call.origin)
                )
            if call.target not in self._methods:
                raise ex.ModelInconsistencyError(
                    ex.UNKNOWN_CALL_TARGET.format(call=call, name=call.target)
                )
            if origin.owner != call.origin_owner:
                raise ex.ModelInconsistencyError(
                    ex.CALL_ORIGIN_OWNER_MISMATCH.format(
                        call=call,
                        claimed=call.origin_owner,
                        origin=call.origin,
                        actual=origin.owner,
                    )
                )

    def summary(self) -> ModelSummary:
        return ModelSummary(
            total_classes=len(self._classes),
            total_methods=len(self._methods),
            total_calls=len(self._calls),
            class_kinds=dict(Counter(str(c.kind) for c in self._classes.values())),
            annotated_methods=sum(1 for m in self._methods.values() if m.annotations),
        )

    def __contains__(self, name: object) -> bool:
        return name in self._classes or name in self._methods
