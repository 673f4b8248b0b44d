from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger
from tree_sitter import Parser

from ... import constants as cs
from ... import exceptions as ex
from ... import logs as ls
from ...decorators import timing_decorator
from ...models import AnnotationInstance, CallSite, JavaClass, JavaMethod
from ...program_model import ProgramModel
from ...types_defs import (
    ASTNode,
    JavaAnnotationInfo,
    JavaClassInfo,
    JavaMethodCallInfo,
    TypeName,
)
from ..utils import safe_decode_text
from . import utils as ju


@dataclass(slots=True)
class SourceFile:
    relative_path: str
    package: str
    imports: dict[str, str] = field(default_factory=dict)
    wildcard_imports: list[str] = field(default_factory=list)

    def qualify(self, simple_name: str) -> TypeName:
        if not self.package:
            return simple_name
        return f"{self.package}{cs.SEPARATOR_DOT}{simple_name}"


@dataclass(slots=True)
class TypeDeclaration:
    name: TypeName
    node: ASTNode
    source: SourceFile
    enclosing: TypeDeclaration | None = None


@dataclass(slots=True)
class MethodDeclaration:
    method: JavaMethod
    node: ASTNode
    declaration: TypeDeclaration
    parameters: dict[str, str]


class JavaModelBuilder:
    """Builds a :class:`ProgramModel` from a tree of Java sources.

    Pass 1 parses every file and registers the type declarations it contains,
    pass 2 turns them into classes and methods with resolved type names, and
    pass 3 resolves the method invocations found in method and constructor
    bodies. Calls whose target is not declared in the scanned sources (library
    calls) are dropped.
    """

    def __init__(
        self,
        source_root: str | Path,
        parser: Parser,
        file_glob: str = cs.JAVA_FILE_GLOB,
        excluded_dirs: Iterable[str] = (),
        known_types: Iterable[TypeName] = (),
    ) -> None:
        self.source_root = Path(source_root)
        self.parser = parser
        self.file_glob = file_glob
        self.excluded_dirs = frozenset(excluded_dirs)
        self._external_types = frozenset(known_types)
        self._reset()

    def _reset(self) -> None:
        self._known_types: set[TypeName] = set(self._external_types)
        self._declarations: dict[TypeName, TypeDeclaration] = {}
        self._classes: dict[TypeName, JavaClass] = {}
        self._methods: list[MethodDeclaration] = []
        self._methods_by_owner: defaultdict[TypeName, list[JavaMethod]] = (
            defaultdict(list)
        )
        self._field_types: defaultdict[TypeName, dict[str, TypeName]] = defaultdict(
            dict
        )

    @timing_decorator
    def build(self) -> ProgramModel:
        if not self.source_root.is_dir():
            raise FileNotFoundError(
                ex.SOURCE_ROOT_NOT_FOUND.format(path=self.source_root)
            )
        self._reset()

        logger.info(ls.SCANNING_SOURCES.format(path=self.source_root))
        files = list(self._java_files())

        logger.info(ls.PASS_1_DECLARATIONS.format(count=len(files)))
        for path in files:
            self._collect_declarations(path)

        logger.info(ls.PASS_2_ELEMENTS)
        for declaration in self._declarations.values():
            self._build_class(declaration)

        logger.info(ls.PASS_3_CALLS)
        calls = [
            call
            for method_declaration in self._methods
            for call in self._resolve_calls(method_declaration)
        ]

        model = ProgramModel(
            classes=self._classes.values(),
            methods=(m.method for m in self._methods),
            calls=calls,
        )
        logger.success(
            ls.BUILT_MODEL.format(
                classes=len(self._classes), methods=len(self._methods), calls=len(calls)
            )
        )
        return model

    def _java_files(self) -> Iterator[Path]:
        for path in sorted(self.source_root.glob(self.file_glob)):
            relative = path.relative_to(self.source_root)
            if self.excluded_dirs.intersection(relative.parts[:-1]):
                logger.debug(ls.SKIPPED_EXCLUDED_DIR.format(path=relative))
                continue
            if path.is_file():
                yield path

    # (H) Pass 1: declarations

    def _collect_declarations(self, path: Path) -> None:
        relative_path = path.relative_to(self.source_root).as_posix()
        try:
            source_bytes = path.read_bytes()
        except OSError as e:
            logger.warning(ls.FILE_READ_FAILED.format(path=relative_path, error=e))
            return

        root = self.parser.parse(source_bytes).root_node
        if root.has_error:
            logger.warning(ls.PARSE_ERRORS.format(path=relative_path))

        source = SourceFile(relative_path=relative_path, package="")
        for child in root.children:
            match child.type:
                case cs.TS_PACKAGE_DECLARATION:
                    source.package = ju.extract_package_name(child) or ""
                case cs.TS_IMPORT_DECLARATION:
                    for key, imported in ju.extract_import_path(child).items():
                        if key.startswith(cs.WILDCARD_IMPORT_PREFIX):
                            source.wildcard_imports.append(imported)
                        else:
                            source.imports[key] = imported

        self._register_types(root.children, source, enclosing=None)

    def _register_types(
        self,
        members: Iterable[ASTNode],
        source: SourceFile,
        enclosing: TypeDeclaration | None,
    ) -> None:
        for node in members:
            if node.type not in cs.JAVA_CLASS_NODE_TYPES:
                continue
            simple_name = safe_decode_text(node.child_by_field_name(cs.TS_FIELD_NAME))
            if simple_name is None:
                continue
            name = (
                source.qualify(simple_name)
                if enclosing is None
                else f"{enclosing.name}{cs.SEPARATOR_DOT}{simple_name}"
            )
            declaration = TypeDeclaration(name, node, source, enclosing)
            self._declarations[name] = declaration
            self._known_types.add(name)
            self._register_types(ju.iter_type_members(node), source, declaration)

    # (H) Pass 2: classes, methods and fields

    def _build_class(self, declaration: TypeDeclaration) -> None:
        info = ju.extract_class_info(declaration.node)
        superclass = info["superclass"]
        self._classes[declaration.name] = JavaClass(
            name=declaration.name,
            kind=info["kind"],
            modifiers=frozenset(info["modifiers"]),
            annotations=self._annotations(info["annotations"], declaration),
            superclass=(
                self.resolve_type(superclass, declaration) if superclass else None
            ),
            interfaces=tuple(
                self.resolve_type(interface, declaration)
                for interface in info["interfaces"]
            ),
            source_file=declaration.source.relative_path,
            line=info["line"],
        )

        fields = self._field_types[declaration.name]
        for component in info["components"]:
            fields[component.name] = self.resolve_type(component.type_name, declaration)

        for member in ju.iter_type_members(declaration.node):
            match member.type:
                case cs.TS_FIELD_DECLARATION:
                    field_info = ju.extract_field_info(member)
                    if field_info["type"] is None:
                        continue
                    field_type = self.resolve_type(field_info["type"], declaration)
                    for field_name in field_info["names"]:
                        fields[field_name] = field_type
                case _ if member.type in cs.JAVA_METHOD_NODE_TYPES:
                    self._add_method(member, declaration, info)

    def _add_method(
        self, node: ASTNode, declaration: TypeDeclaration, class_info: JavaClassInfo
    ) -> None:
        info = ju.extract_method_info(node)
        parameters = info["parameters"]
        if node.type == cs.TS_COMPACT_CONSTRUCTOR_DECLARATION:
            parameters = class_info["components"]

        name = cs.JAVA_CONSTRUCTOR_NAME if info["is_constructor"] else info["name"]
        if name is None:
            return

        method = JavaMethod(
            owner=declaration.name,
            name=name,
            parameter_types=tuple(p.type_name for p in parameters),
            modifiers=frozenset(info["modifiers"]),
            annotations=self._annotations(info["annotations"], declaration),
            is_constructor=info["is_constructor"],
            line=info["line"],
        )
        siblings = self._methods_by_owner[declaration.name]
        if any(m.full_name == method.full_name for m in siblings):
            return
        siblings.append(method)
        self._methods.append(
            MethodDeclaration(
                method=method,
                node=node,
                declaration=declaration,
                parameters={p.name: p.type_name for p in parameters if p.name},
            )
        )

    def _annotations(
        self, infos: list[JavaAnnotationInfo], declaration: TypeDeclaration
    ) -> tuple[AnnotationInstance, ...]:
        return tuple(
            AnnotationInstance(self.resolve_type(name, declaration), info["arguments"])
            for info in infos
            if (name := info["name"])
        )

    def resolve_type(self, type_text: str, declaration: TypeDeclaration) -> TypeName:
        """Qualify a type name as written inside ``declaration``.

        Unknown names are returned as written (with type arguments erased).
        """
        name = ju.erase_type_name(type_text)
        if cs.SEPARATOR_DOT not in name:
            return self._resolve_simple(name, declaration) or name
        if name in self._known_types:
            return name
        head, rest = name.split(cs.SEPARATOR_DOT, 1)
        if (resolved_head := self._resolve_simple(head, declaration)) is None:
            return name
        return f"{resolved_head}{cs.SEPARATOR_DOT}{rest}"

    def _resolve_simple(
        self, simple_name: str, declaration: TypeDeclaration
    ) -> TypeName | None:
        scope: TypeDeclaration | None = declaration
        while scope is not None:
            if scope.name.rsplit(cs.SEPARATOR_DOT, 1)[-1] == simple_name:
                return scope.name
            member = f"{scope.name}{cs.SEPARATOR_DOT}{simple_name}"
            if member in self._known_types:
                return member
            scope = scope.enclosing

        source = declaration.source
        if simple_name in source.imports:
            return source.imports[simple_name]
        if (same_package := source.qualify(simple_name)) in self._known_types:
            return same_package
        for package in source.wildcard_imports:
            candidate = f"{package}{cs.SEPARATOR_DOT}{simple_name}"
            if candidate in self._known_types:
                return candidate
        return None

    # (H) Pass 3: method calls

    def _resolve_calls(self, declared: MethodDeclaration) -> Iterator[CallSite]:
        body = declared.node.child_by_field_name(cs.TS_FIELD_BODY)
        if body is None:
            return

        scope = {**declared.parameters, **ju.extract_local_variables(body)}
        for node in ju.iter_body_nodes(body):
            if node.type != cs.TS_METHOD_INVOCATION:
                continue
            call_info = ju.extract_method_call_info(node)
            if call_info is None or call_info["name"] is None:
                continue
            if (resolved := self._resolve_call(call_info, declared, scope)) is None:
                continue
            target, target_owner = resolved
            yield CallSite(
                origin=declared.method.full_name,
                origin_owner=declared.method.owner,
                target=target.full_name,
                target_owner=target_owner,
                source_file=declared.declaration.source.relative_path,
                line=call_info["line"],
                origin_is_constructor=declared.method.is_constructor,
            )

    def _resolve_call(
        self,
        call_info: JavaMethodCallInfo,
        declared: MethodDeclaration,
        scope: dict[str, str],
    ) -> tuple[JavaMethod, TypeName] | None:
        origin = declared.method.full_name
        receiver = call_info["receiver"]

        if receiver is None:
            # (H) unqualified calls dispatch through this class or an enclosing one
            enclosing: TypeDeclaration | None = declared.declaration
            while enclosing is not None:
                if target := self._find_method(enclosing.name, call_info, origin):
                    return target, enclosing.name
                enclosing = enclosing.enclosing
            logger.debug(
                ls.UNRESOLVED_CALL.format(call=call_info["name"], origin=origin)
            )
            return None

        dispatch_type = self._receiver_type(receiver, declared, scope)
        if dispatch_type is None or dispatch_type not in self._classes:
            logger.debug(
                ls.UNRESOLVED_RECEIVER.format(
                    receiver=receiver, call=call_info["name"], origin=origin
                )
            )
            return None
        if target := self._find_method(dispatch_type, call_info, origin):
            return target, dispatch_type
        logger.debug(ls.UNRESOLVED_CALL.format(call=call_info["name"], origin=origin))
        return None

    def _receiver_type(
        self, receiver: str, declared: MethodDeclaration, scope: dict[str, str]
    ) -> TypeName | None:
        declaration = declared.declaration
        if receiver == cs.TS_THIS:
            return declaration.name
        if receiver == cs.TS_SUPER:
            return self._classes[declaration.name].superclass
        if receiver.startswith(cs.THIS_FIELD_PREFIX):
            return self._field_type(
                declaration, receiver.removeprefix(cs.THIS_FIELD_PREFIX)
            )
        if receiver in scope:
            return self.resolve_type(scope[receiver], declaration)
        if (field_type := self._field_type(declaration, receiver)) is not None:
            return field_type
        # (H) a type name receiver is a static call
        return self.resolve_type(receiver, declaration)

    def _field_type(
        self, declaration: TypeDeclaration, field_name: str
    ) -> TypeName | None:
        enclosing: TypeDeclaration | None = declaration
        while enclosing is not None:
            for class_name in self._superclass_chain(enclosing.name):
                if field_name in self._field_types.get(class_name, {}):
                    return self._field_types[class_name][field_name]
            enclosing = enclosing.enclosing
        return None

    def _superclass_chain(self, class_name: TypeName) -> Iterator[TypeName]:
        seen: set[TypeName] = set()
        current: TypeName | None = class_name
        while current is not None and current in self._classes and current not in seen:
            seen.add(current)
            yield current
            current = self._classes[current].superclass

    def _find_method(
        self, type_name: TypeName, call_info: JavaMethodCallInfo, origin: str
    ) -> JavaMethod | None:
        """Breadth-first lookup of ``call_info`` through the type hierarchy."""
        queue: deque[TypeName] = deque([type_name])
        visited: set[TypeName] = set()
        while queue:
            current = queue.popleft()
            if current in visited or current not in self._classes:
                continue
            visited.add(current)

            candidates = [
                m
                for m in self._methods_by_owner.get(current, ())
                if not m.is_constructor
                and m.name == call_info["name"]
                and _accepts(m, call_info["arguments"])
            ]
            if candidates:
                if len(candidates) > 1:
                    logger.debug(
                        ls.AMBIGUOUS_CALL.format(
                            call=call_info["name"],
                            origin=origin,
                            target=candidates[0].full_name,
                        )
                    )
                return candidates[0]
            queue.extend(self._classes[current].supertypes)
        return None


def _accepts(method: JavaMethod, argument_count: int) -> bool:
    parameters = method.parameter_types
    if parameters and parameters[-1].endswith(cs.VARARGS_SUFFIX):
        return argument_count >= len(parameters) - 1
    return argument_count == len(parameters)
