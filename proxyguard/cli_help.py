from enum import StrEnum


class CLICommandName(StrEnum):
    CHECK = "check"
    SCAN = "scan"
    RULES = "rules"
    MODEL_SUMMARY = "model-summary"


APP_DESCRIPTION = (
    "Statically verifies that Spring proxy-based annotations such as @Cacheable "
    "and @Retryable are used in ways the proxy can actually intercept."
)

CMD_CHECK = "Evaluate the proxy rules against Java sources or a model file"
CMD_SCAN = "Scan Java sources and write the program model to a JSON file"
CMD_RULES = "List the available rules"
CMD_MODEL_SUMMARY = "Load and display a summary of a program model file"

HELP_SOURCE = "Root directory of the Java sources to analyze"
HELP_MODEL_FILE = "Program model JSON file to analyze instead of sources"
HELP_RULE = "Rule to evaluate (repeatable); defaults to all rules"
HELP_WORKERS = "Number of worker threads used to evaluate each rule"
HELP_NO_FRAMEWORK_CATALOG = (
    "Do not merge the built-in Spring declarations into the program model"
)
HELP_OUTPUT_MODEL = "Output file path for the program model JSON"
HELP_MODEL_FILE_ARG = "Path to a program model JSON file"
HELP_LOG_LEVEL = "Log level for messages written to stderr"
