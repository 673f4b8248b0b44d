from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from . import constants as cs
from .models import AnnotationInstance, CallSite, JavaClass, JavaMethod
from .program_model import ProgramModel

AttributeValue = str | int | float | bool | list[str] | None


class AnnotationSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type_name: str
    attributes: dict[str, AttributeValue] = Field(default_factory=dict)

    def to_domain(self) -> AnnotationInstance:
        return AnnotationInstance(self.type_name, dict(self.attributes))

    @classmethod
    def from_domain(cls, annotation: AnnotationInstance) -> AnnotationSchema:
        return cls(type_name=annotation.type_name, attributes=annotation.attributes)


class ClassSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    kind: cs.ClassKind = cs.ClassKind.CLASS
    modifiers: list[str] = Field(default_factory=list)
    annotations: list[AnnotationSchema] = Field(default_factory=list)
    superclass: str | None = None
    interfaces: list[str] = Field(default_factory=list)
    source_file: str | None = None
    line: int | None = None

    def to_domain(self) -> JavaClass:
        return JavaClass(
            name=self.name,
            kind=self.kind,
            modifiers=frozenset(self.modifiers),
            annotations=tuple(a.to_domain() for a in self.annotations),
            superclass=self.superclass,
            interfaces=tuple(self.interfaces),
            source_file=self.source_file,
            line=self.line,
        )

    @classmethod
    def from_domain(cls, java_class: JavaClass) -> ClassSchema:
        return cls(
            name=java_class.name,
            kind=java_class.kind,
            modifiers=sorted(java_class.modifiers),
            annotations=[AnnotationSchema.from_domain(a) for a in java_class.annotations],
            superclass=java_class.superclass,
            interfaces=list(java_class.interfaces),
            source_file=java_class.source_file,
            line=java_class.line,
        )


class MethodSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    owner: str
    name: str
    parameter_types: list[str] = Field(default_factory=list)
    modifiers: list[str] = Field(default_factory=list)
    annotations: list[AnnotationSchema] = Field(default_factory=list)
    is_constructor: bool = False
    line: int | None = None

    def to_domain(self) -> JavaMethod:
        return JavaMethod(
            owner=self.owner,
            name=self.name,
            parameter_types=tuple(self.parameter_types),
            modifiers=frozenset(self.modifiers),
            annotations=tuple(a.to_domain() for a in self.annotations),
            is_constructor=self.is_constructor,
            line=self.line,
        )

    @classmethod
    def from_domain(cls, method: JavaMethod) -> MethodSchema:
        return cls(
            owner=method.owner,
            name=method.name,
            parameter_types=list(method.parameter_types),
            modifiers=sorted(method.modifiers),
            annotations=[AnnotationSchema.from_domain(a) for a in method.annotations],
            is_constructor=method.is_constructor,
            line=method.line,
        )


class CallSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    origin: str
    origin_owner: str
    target: str
    target_owner: str
    source_file: str | None = None
    line: int | None = None
    origin_is_constructor: bool = False

    def to_domain(self) -> CallSite:
        return CallSite(**self.model_dump())

    @classmethod
    def from_domain(cls, call: CallSite) -> CallSchema:
        return cls(
            origin=call.origin,
            origin_owner=call.origin_owner,
            target=call.target,
            target_owner=call.target_owner,
            source_file=call.source_file,
            line=call.line,
            origin_is_constructor=call.origin_is_constructor,
        )


class ProgramModelFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    classes: list[ClassSchema] = Field(default_factory=list)
    methods: list[MethodSchema] = Field(default_factory=list)
    calls: list[CallSchema] = Field(default_factory=list)
    metadata: dict[str, str | int] = Field(default_factory=dict)

    def to_model(self) -> ProgramModel:
        return ProgramModel(
            classes=(c.to_domain() for c in self.classes),
            methods=(m.to_domain() for m in self.methods),
            calls=(c.to_domain() for c in self.calls),
        )

    @classmethod
    def from_model(
        cls, model: ProgramModel, source: str | None = None
    ) -> ProgramModelFile:
        metadata: dict[str, str | int] = {
            cs.KEY_FORMAT_VERSION: cs.MODEL_FORMAT_VERSION,
            cs.KEY_EXPORTED_AT: datetime.now(UTC).isoformat(),
        }
        if source is not None:
            metadata[cs.KEY_SOURCE] = source
        return cls(
            classes=[ClassSchema.from_domain(c) for c in model.classes],
            methods=[MethodSchema.from_domain(m) for m in model.methods],
            calls=[CallSchema.from_domain(c) for c in model.calls],
            metadata=metadata,
        )
