from enum import StrEnum


class ClassKind(StrEnum):
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    ANNOTATION = "annotation"


class Visibility(StrEnum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PACKAGE = "package"
    PRIVATE = "private"


class ResolutionMode(StrEnum):
    DIRECT = "direct"
    META = "meta"
    SUBTYPE = "subtype"


class RuleSubject(StrEnum):
    CLASSES = "classes"
    METHODS = "methods"


class Color(StrEnum):
    GREEN = "green"
    YELLOW = "yellow"
    CYAN = "cyan"
    RED = "red"
    MAGENTA = "magenta"


class StyleModifier(StrEnum):
    BOLD = "bold"
    DIM = "dim"
    NONE = ""


# (H) Java modifiers
JAVA_MODIFIER_PUBLIC = "public"
JAVA_MODIFIER_PROTECTED = "protected"
JAVA_MODIFIER_PRIVATE = "private"
JAVA_MODIFIER_STATIC = "static"
JAVA_MODIFIER_FINAL = "final"

JAVA_CLASS_MODIFIERS = frozenset(
    {
        "public",
        "protected",
        "private",
        "abstract",
        "static",
        "final",
        "sealed",
        "non-sealed",
        "strictfp",
    }
)
JAVA_METHOD_MODIFIERS = frozenset(
    {
        "public",
        "protected",
        "private",
        "abstract",
        "static",
        "final",
        "synchronized",
        "native",
        "strictfp",
        "default",
    }
)
JAVA_FIELD_MODIFIERS = frozenset(
    {"public", "protected", "private", "static", "final", "transient", "volatile"}
)

JAVA_CONSTRUCTOR_NAME = "<init>"
JAVA_ANNOTATION_VALUE_KEY = "value"
JAVA_FILE_GLOB = "**/*.java"
TREE_SITTER_JAVA_MODULE = "tree_sitter_java"
QUERY_LANGUAGE = "language"

# (H) Tree-sitter Java node types
TS_PACKAGE_DECLARATION = "package_declaration"
TS_IMPORT_DECLARATION = "import_declaration"
TS_CLASS_DECLARATION = "class_declaration"
TS_INTERFACE_DECLARATION = "interface_declaration"
TS_ENUM_DECLARATION = "enum_declaration"
TS_RECORD_DECLARATION = "record_declaration"
TS_ANNOTATION_TYPE_DECLARATION = "annotation_type_declaration"
TS_METHOD_DECLARATION = "method_declaration"
TS_CONSTRUCTOR_DECLARATION = "constructor_declaration"
TS_COMPACT_CONSTRUCTOR_DECLARATION = "compact_constructor_declaration"
TS_FIELD_DECLARATION = "field_declaration"
TS_LOCAL_VARIABLE_DECLARATION = "local_variable_declaration"
TS_VARIABLE_DECLARATOR = "variable_declarator"
TS_ENHANCED_FOR_STATEMENT = "enhanced_for_statement"
TS_FORMAL_PARAMETER = "formal_parameter"
TS_SPREAD_PARAMETER = "spread_parameter"
TS_MODIFIERS = "modifiers"
TS_ANNOTATION = "annotation"
TS_MARKER_ANNOTATION = "marker_annotation"
TS_ELEMENT_VALUE_PAIR = "element_value_pair"
TS_SUPER_INTERFACES = "super_interfaces"
TS_EXTENDS_INTERFACES = "extends_interfaces"
TS_TYPE_LIST = "type_list"
TS_IDENTIFIER = "identifier"
TS_SCOPED_IDENTIFIER = "scoped_identifier"
TS_ASTERISK = "asterisk"
TS_STATIC = "static"
TS_METHOD_INVOCATION = "method_invocation"
TS_THIS = "this"
TS_SUPER = "super"
TS_CLASS_BODY = "class_body"
TS_ENUM_BODY_DECLARATIONS = "enum_body_declarations"
TS_STRING_LITERAL = "string_literal"
TS_DECIMAL_INTEGER_LITERAL = "decimal_integer_literal"
TS_TRUE = "true"
TS_FALSE = "false"
TS_ELEMENT_VALUE_ARRAY_INITIALIZER = "element_value_array_initializer"
TS_LINE_COMMENT = "line_comment"
TS_BLOCK_COMMENT = "block_comment"

TS_FIELD_NAME = "name"
TS_FIELD_BODY = "body"
TS_FIELD_TYPE = "type"
TS_FIELD_SUPERCLASS = "superclass"
TS_FIELD_PARAMETERS = "parameters"
TS_FIELD_DECLARATOR = "declarator"
TS_FIELD_OBJECT = "object"
TS_FIELD_ARGUMENTS = "arguments"
TS_FIELD_KEY = "key"
TS_FIELD_VALUE = "value"

JAVA_CLASS_NODE_TYPES = (
    TS_CLASS_DECLARATION,
    TS_INTERFACE_DECLARATION,
    TS_ENUM_DECLARATION,
    TS_RECORD_DECLARATION,
    TS_ANNOTATION_TYPE_DECLARATION,
)
JAVA_METHOD_NODE_TYPES = (
    TS_METHOD_DECLARATION,
    TS_CONSTRUCTOR_DECLARATION,
    TS_COMPACT_CONSTRUCTOR_DECLARATION,
)
JAVA_ANNOTATION_NODE_TYPES = (TS_ANNOTATION, TS_MARKER_ANNOTATION)
JAVA_CLASS_KINDS = {
    TS_CLASS_DECLARATION: ClassKind.CLASS,
    TS_INTERFACE_DECLARATION: ClassKind.INTERFACE,
    TS_ENUM_DECLARATION: ClassKind.ENUM,
    TS_RECORD_DECLARATION: ClassKind.RECORD,
    TS_ANNOTATION_TYPE_DECLARATION: ClassKind.ANNOTATION,
}

DELIMITER_TOKENS = frozenset({"(", ")", ",", "{", "}", "@", "="})
COMMENT_NODE_TYPES = frozenset({TS_LINE_COMMENT, TS_BLOCK_COMMENT})

# (H) Separators
SEPARATOR_DOT = "."
SEPARATOR_COMMA = ", "
GENERIC_OPEN = "<"
GENERIC_CLOSE = ">"
STRING_QUOTE = '"'
LONG_SUFFIXES = "lL"
DIGIT_SEPARATOR = "_"
THIS_FIELD_PREFIX = "this."
VARARGS_SUFFIX = "..."
WILDCARD_IMPORT_PREFIX = "*"

# (H) Description templates
METHOD_FULL_NAME = "{owner}.{name}({parameters})"
CALL_DESCRIPTION = "{kind} <{origin}> calls method <{target}> in ({location})"
CALL_LOCATION = "{file}:{line}"
CODE_UNIT_METHOD = "Method"
CODE_UNIT_CONSTRUCTOR = "Constructor"
UNKNOWN_LOCATION = "unknown location"

PREDICATE_AND = "{left} and {right}"
PREDICATE_OR = "{left} or {right}"
PREDICATE_NOT = "not {operand}"
PREDICATE_ANNOTATED_WITH = "annotated with @{name}"
PREDICATE_META_ANNOTATED_WITH = "annotated or meta-annotated with @{name}"
PREDICATE_SUBTYPE_ANNOTATED_WITH = "annotated with @{name} (including supertypes)"
PREDICATE_ASSIGNABLE_TO = "assignable to {name}"
PREDICATE_DECLARED_IN = "declared in {description}"
PREDICATE_CONSTRUCTORS = "constructors"

RULE_DESCRIPTION = "{subject} that are {predicate} should {condition}"
RULE_REPORT_HEADER = "Architecture Violation - Rule '{rule}' was violated ({count} times):"

# (H) Model file
MODEL_FORMAT_VERSION = 1
KEY_EXPORTED_AT = "exported_at"
KEY_FORMAT_VERSION = "format_version"
KEY_SOURCE = "source"

# (H) Encoding
ENCODING_UTF8 = "utf-8"

# (H) Logging
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}"

# (H) CLI exit codes
EXIT_VIOLATIONS = 1
EXIT_RUN_ERROR = 2

# (H) CLI messages
CLI_MSG_SCANNING = "Scanning Java sources in {path}"
CLI_MSG_LOADING_MODEL = "Loading program model from {path}"
CLI_MSG_MODEL_READY = "Program model: {classes} classes, {methods} methods, {calls} calls"
CLI_MSG_RULE_PASSED = "PASSED  {rule}"
CLI_MSG_RULE_FAILED = "FAILED  {rule} ({count} violations)"
CLI_MSG_ALL_PASSED = "All {count} rules passed."
CLI_MSG_SOME_FAILED = "{failed} of {count} rules failed."
CLI_MSG_EXPORTED = "Program model written to {path}"
CLI_MSG_MODEL_SUMMARY = "Program model summary:"
CLI_MSG_SUMMARY_CLASSES = "  Total classes: {count}"
CLI_MSG_SUMMARY_METHODS = "  Total methods: {count} ({annotated} annotated)"
CLI_MSG_SUMMARY_CALLS = "  Total call sites: {count}"
CLI_MSG_SUMMARY_KINDS = "  Class kinds: {kinds}"
CLI_MSG_SUMMARY_EXPORTED_AT = "  Exported at: {exported_at}"
CLI_ERR_RUN = "Check run failed: {error}"
CLI_ERR_SCAN = "Scan failed: {error}"
CLI_ERR_LOAD_MODEL = "Failed to load program model: {error}"
CLI_ERR_SOURCE_AND_MODEL = "Use either --source or --model, not both."

TABLE_COLUMN_ELEMENT = "Element"
TABLE_COLUMN_DETAIL = "Detail"
TABLE_COLUMN_RULE = "Rule"
TABLE_COLUMN_DESCRIPTION = "Description"
TABLE_TITLE_RULES = "Available rules"
