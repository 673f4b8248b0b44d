from __future__ import annotations

from collections.abc import Iterator

from ... import constants as cs
from ...types_defs import (
    AnnotationAttributes,
    AnnotationValue,
    ASTNode,
    JavaAnnotationInfo,
    JavaClassInfo,
    JavaFieldInfo,
    JavaMethodCallInfo,
    JavaMethodInfo,
    JavaParameter,
)
from ..utils import node_line, safe_decode_text


def erase_type_name(type_text: str) -> str:
    """Drop type arguments and whitespace: ``Map<K, List<V>>[]`` -> ``Map[]``."""
    depth = 0
    erased: list[str] = []
    for char in type_text:
        match char:
            case cs.GENERIC_OPEN:
                depth += 1
            case cs.GENERIC_CLOSE:
                depth -= 1
            case _ if depth == 0 and not char.isspace():
                erased.append(char)
    return "".join(erased)


def extract_package_name(package_node: ASTNode) -> str | None:
    if package_node.type != cs.TS_PACKAGE_DECLARATION:
        return None

    return next(
        (
            safe_decode_text(child)
            for child in package_node.children
            if child.type in [cs.TS_SCOPED_IDENTIFIER, cs.TS_IDENTIFIER]
        ),
        None,
    )


def extract_import_path(import_node: ASTNode) -> dict[str, str]:
    if import_node.type != cs.TS_IMPORT_DECLARATION:
        return {}

    imports: dict[str, str] = {}
    imported_path = None
    is_wildcard = False

    for child in import_node.children:
        match child.type:
            case cs.TS_STATIC:
                # (H) static imports bring in members, never types
                return {}
            case cs.TS_SCOPED_IDENTIFIER | cs.TS_IDENTIFIER:
                imported_path = safe_decode_text(child)
            case cs.TS_ASTERISK:
                is_wildcard = True

    if not imported_path:
        return imports

    if is_wildcard:
        imports[f"{cs.WILDCARD_IMPORT_PREFIX}{imported_path}"] = imported_path
    elif parts := imported_path.split(cs.SEPARATOR_DOT):
        imports[parts[-1]] = imported_path

    return imports


def _type_text(type_node: ASTNode | None) -> str | None:
    if type_node is None:
        return None
    if text := safe_decode_text(type_node):
        return erase_type_name(text)
    return None


def _extract_superclass(class_node: ASTNode) -> str | None:
    superclass_node = class_node.child_by_field_name(cs.TS_FIELD_SUPERCLASS)
    if not superclass_node:
        return None
    return next(
        (_type_text(child) for child in superclass_node.named_children),
        None,
    )


def _extract_interfaces(class_node: ASTNode) -> list[str]:
    interfaces: list[str] = []
    for child in class_node.children:
        if child.type not in (cs.TS_SUPER_INTERFACES, cs.TS_EXTENDS_INTERFACES):
            continue
        for type_list in child.children:
            if type_list.type != cs.TS_TYPE_LIST:
                continue
            for type_child in type_list.named_children:
                if interface_name := _type_text(type_child):
                    interfaces.append(interface_name)
    return interfaces


def _extract_modifiers_and_annotations(
    node: ASTNode, allowed: frozenset[str]
) -> tuple[list[str], list[JavaAnnotationInfo]]:
    modifiers: list[str] = []
    annotations: list[JavaAnnotationInfo] = []
    for child in node.children:
        if child.type != cs.TS_MODIFIERS:
            continue
        for modifier_child in child.children:
            match modifier_child.type:
                case _ if modifier_child.type in allowed:
                    if modifier := safe_decode_text(modifier_child):
                        modifiers.append(modifier)
                case _ if modifier_child.type in cs.JAVA_ANNOTATION_NODE_TYPES:
                    annotations.append(extract_annotation_info(modifier_child))
    return modifiers, annotations


def extract_parameters(params_node: ASTNode | None) -> list[JavaParameter]:
    if params_node is None:
        return []

    parameters: list[JavaParameter] = []
    for child in params_node.children:
        match child.type:
            case cs.TS_FORMAL_PARAMETER:
                type_name = _type_text(child.child_by_field_name(cs.TS_FIELD_TYPE))
                name = safe_decode_text(child.child_by_field_name(cs.TS_FIELD_NAME))
            case cs.TS_SPREAD_PARAMETER:
                type_node = next(
                    (
                        sub
                        for sub in child.named_children
                        if sub.type not in (cs.TS_MODIFIERS, cs.TS_VARIABLE_DECLARATOR)
                    ),
                    None,
                )
                element_type = _type_text(type_node)
                type_name = (
                    f"{element_type}{cs.VARARGS_SUFFIX}" if element_type else None
                )
                declarator = next(
                    (
                        sub
                        for sub in child.named_children
                        if sub.type == cs.TS_VARIABLE_DECLARATOR
                    ),
                    None,
                )
                name = (
                    safe_decode_text(declarator.child_by_field_name(cs.TS_FIELD_NAME))
                    if declarator
                    else None
                )
            case _:
                continue
        if type_name:
            parameters.append(JavaParameter(name or "", type_name))
    return parameters


def extract_class_info(class_node: ASTNode) -> JavaClassInfo:
    if class_node.type not in cs.JAVA_CLASS_NODE_TYPES:
        return JavaClassInfo(
            name=None,
            kind=cs.ClassKind.CLASS,
            superclass=None,
            interfaces=[],
            modifiers=[],
            annotations=[],
            components=[],
            line=node_line(class_node),
        )

    modifiers, annotations = _extract_modifiers_and_annotations(
        class_node, cs.JAVA_CLASS_MODIFIERS
    )
    components: list[JavaParameter] = []
    if class_node.type == cs.TS_RECORD_DECLARATION:
        components = extract_parameters(
            class_node.child_by_field_name(cs.TS_FIELD_PARAMETERS)
        )

    return JavaClassInfo(
        name=safe_decode_text(class_node.child_by_field_name(cs.TS_FIELD_NAME)),
        kind=cs.JAVA_CLASS_KINDS[class_node.type],
        superclass=_extract_superclass(class_node),
        interfaces=_extract_interfaces(class_node),
        modifiers=modifiers,
        annotations=annotations,
        components=components,
        line=node_line(class_node),
    )


def extract_method_info(method_node: ASTNode) -> JavaMethodInfo:
    if method_node.type not in cs.JAVA_METHOD_NODE_TYPES:
        return JavaMethodInfo(
            name=None,
            is_constructor=False,
            parameters=[],
            modifiers=[],
            annotations=[],
            line=node_line(method_node),
        )

    modifiers, annotations = _extract_modifiers_and_annotations(
        method_node, cs.JAVA_METHOD_MODIFIERS
    )
    return JavaMethodInfo(
        name=safe_decode_text(method_node.child_by_field_name(cs.TS_FIELD_NAME)),
        is_constructor=method_node.type != cs.TS_METHOD_DECLARATION,
        parameters=extract_parameters(
            method_node.child_by_field_name(cs.TS_FIELD_PARAMETERS)
        ),
        modifiers=modifiers,
        annotations=annotations,
        line=node_line(method_node),
    )


def extract_field_info(field_node: ASTNode) -> JavaFieldInfo:
    if field_node.type != cs.TS_FIELD_DECLARATION:
        return JavaFieldInfo(names=[], type=None, modifiers=[])

    names: list[str] = []
    for declarator in field_node.children_by_field_name(cs.TS_FIELD_DECLARATOR):
        if name := safe_decode_text(declarator.child_by_field_name(cs.TS_FIELD_NAME)):
            names.append(name)

    modifiers, _ = _extract_modifiers_and_annotations(
        field_node, cs.JAVA_FIELD_MODIFIERS
    )
    return JavaFieldInfo(
        names=names,
        type=_type_text(field_node.child_by_field_name(cs.TS_FIELD_TYPE)),
        modifiers=modifiers,
    )


def _annotation_value(value_node: ASTNode) -> AnnotationValue:
    text = safe_decode_text(value_node) or ""
    match value_node.type:
        case cs.TS_STRING_LITERAL:
            return text.strip(cs.STRING_QUOTE)
        case cs.TS_DECIMAL_INTEGER_LITERAL:
            return int(text.rstrip(cs.LONG_SUFFIXES).replace(cs.DIGIT_SEPARATOR, ""))
        case cs.TS_TRUE:
            return True
        case cs.TS_FALSE:
            return False
        case cs.TS_ELEMENT_VALUE_ARRAY_INITIALIZER:
            return [
                str(_annotation_value(child))
                for child in value_node.named_children
                if child.type not in cs.COMMENT_NODE_TYPES
            ]
        case _:
            return text


def extract_annotation_info(annotation_node: ASTNode) -> JavaAnnotationInfo:
    if annotation_node.type not in cs.JAVA_ANNOTATION_NODE_TYPES:
        return JavaAnnotationInfo(name=None, arguments={})

    name = safe_decode_text(annotation_node.child_by_field_name(cs.TS_FIELD_NAME))

    arguments: AnnotationAttributes = {}
    if args_node := annotation_node.child_by_field_name(cs.TS_FIELD_ARGUMENTS):
        for child in args_node.named_children:
            match child.type:
                case cs.TS_ELEMENT_VALUE_PAIR:
                    key = safe_decode_text(child.child_by_field_name(cs.TS_FIELD_KEY))
                    value_node = child.child_by_field_name(cs.TS_FIELD_VALUE)
                    if key and value_node:
                        arguments[key] = _annotation_value(value_node)
                case _ if child.type in cs.COMMENT_NODE_TYPES:
                    continue
                case _:
                    arguments[cs.JAVA_ANNOTATION_VALUE_KEY] = _annotation_value(child)

    return JavaAnnotationInfo(name=name, arguments=arguments)


def extract_method_call_info(call_node: ASTNode) -> JavaMethodCallInfo | None:
    if call_node.type != cs.TS_METHOD_INVOCATION:
        return None

    name_node = call_node.child_by_field_name(cs.TS_FIELD_NAME)
    receiver = safe_decode_text(call_node.child_by_field_name(cs.TS_FIELD_OBJECT))

    arguments = 0
    if args_node := call_node.child_by_field_name(cs.TS_FIELD_ARGUMENTS):
        arguments = sum(
            1
            for child in args_node.children
            if child.type not in cs.DELIMITER_TOKENS
            and child.type not in cs.COMMENT_NODE_TYPES
        )

    return JavaMethodCallInfo(
        name=safe_decode_text(name_node),
        receiver=receiver,
        arguments=arguments,
        line=node_line(name_node if name_node is not None else call_node),
    )


def iter_type_members(declaration_node: ASTNode) -> Iterator[ASTNode]:
    body = declaration_node.child_by_field_name(cs.TS_FIELD_BODY)
    if body is None:
        return
    for child in body.children:
        if child.type == cs.TS_ENUM_BODY_DECLARATIONS:
            yield from child.children
        else:
            yield child


def iter_body_nodes(body: ASTNode) -> Iterator[ASTNode]:
    """Pre-order walk of a code body that stops at nested class bodies.

    Local and anonymous classes are separate classes, so their contents do
    not belong to the enclosing method.
    """
    stack = list(reversed(body.children))
    while stack:
        node = stack.pop()
        yield node
        if node.type in cs.JAVA_CLASS_NODE_TYPES or node.type == cs.TS_CLASS_BODY:
            continue
        stack.extend(reversed(node.children))


def extract_local_variables(body: ASTNode) -> dict[str, str]:
    variables: dict[str, str] = {}
    for node in iter_body_nodes(body):
        match node.type:
            case cs.TS_LOCAL_VARIABLE_DECLARATION:
                type_name = _type_text(node.child_by_field_name(cs.TS_FIELD_TYPE))
                if not type_name:
                    continue
                for declarator in node.children_by_field_name(cs.TS_FIELD_DECLARATOR):
                    if name := safe_decode_text(
                        declarator.child_by_field_name(cs.TS_FIELD_NAME)
                    ):
                        variables[name] = type_name
            case cs.TS_ENHANCED_FOR_STATEMENT:
                type_name = _type_text(node.child_by_field_name(cs.TS_FIELD_TYPE))
                name = safe_decode_text(node.child_by_field_name(cs.TS_FIELD_NAME))
                if type_name and name:
                    variables[name] = type_name
    return variables
