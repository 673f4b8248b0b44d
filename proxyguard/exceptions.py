# (H) Model consistency errors
UNKNOWN_METHOD = "Program model has no method '{name}'"
UNKNOWN_CLASS = "Program model has no class '{name}'"
UNKNOWN_CALL_ORIGIN = "Call site {call} originates from unknown method '{name}'"
UNKNOWN_CALL_TARGET = "Call site {call} targets unknown method '{name}'"
CALL_ORIGIN_OWNER_MISMATCH = (
    "Call site {call} claims origin owner '{claimed}' but '{origin}' "
    "is declared in '{actual}'"
)
METHOD_OWNER_MISSING = "Method '{method}' is declared in unknown class '{owner}'"
DUPLICATE_CLASS = "Class '{name}' is defined more than once"
DUPLICATE_METHOD = "Method '{name}' is defined more than once"

# (H) Model file errors
MODEL_FILE_NOT_FOUND = "Program model file not found: {path}"
MODEL_NOT_LOADED = "Program model should be loaded"
SOURCE_ROOT_NOT_FOUND = "Source root not found: {path}"

# (H) Configuration errors
WORKERS_POSITIVE = "workers must be a positive integer"
UNKNOWN_MODE = "Unknown resolution mode '{mode}'"
UNKNOWN_RULE = "Unknown rule '{rule}'. Available rules: {available}"

# (H) Parser errors
JAVA_GRAMMAR_UNAVAILABLE = (
    "tree-sitter-java is not installed. Install it with: pip install tree-sitter-java"
)

# (H) Proxyability reasons
NOT_PROXYABLE_PRIVATE = "{method} is private"
NOT_PROXYABLE_FINAL_METHOD = "{method} is final"
NOT_PROXYABLE_FINAL_CLASS = "{method} is declared in final class {owner}"
NOT_PROXYABLE_STATIC = "{method} is static"
NOT_PROXYABLE = "{reason} and therefore cannot be intercepted by a proxy"


# (H) Exception classes
class ModelInconsistencyError(Exception):
    pass


class RuleViolationError(AssertionError):
    pass
