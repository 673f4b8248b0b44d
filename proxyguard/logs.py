from __future__ import annotations

# (H) Model loading logs
LOADING_MODEL = "Loading program model from {path}"
LOADED_MODEL = "Loaded {classes} classes, {methods} methods and {calls} call sites"
EXPORTING_MODEL = "Writing program model to {path}"
EXPORTED_MODEL = "Wrote {classes} classes, {methods} methods and {calls} call sites"
VALIDATING_MODEL = "Validating program model consistency"
CATALOG_MERGED = "Merged {count} framework declarations into the program model"

# (H) Java front end logs
PARSER_READY = "Initialized tree-sitter parser for Java"
SCANNING_SOURCES = "Scanning Java sources under {path}"
PASS_1_DECLARATIONS = "--- Pass 1: Collecting type declarations from {count} files ---"
PASS_2_ELEMENTS = "--- Pass 2: Resolving classes, methods and annotations ---"
PASS_3_CALLS = "--- Pass 3: Resolving method calls ---"
SKIPPED_EXCLUDED_DIR = "Skipping excluded path: {path}"
PARSE_ERRORS = "Syntax errors in {path}; extracting what tree-sitter recovered"
FILE_READ_FAILED = "Could not read {path}: {error}"
UNRESOLVED_CALL = "Unresolved call '{call}' in {origin}"
UNRESOLVED_RECEIVER = "Unresolved receiver '{receiver}' for call '{call}' in {origin}"
AMBIGUOUS_CALL = "Ambiguous call '{call}' in {origin}; picked {target}"
BUILT_MODEL = "Built program model: {classes} classes, {methods} methods, {calls} calls"

# (H) Resolver logs
META_GRAPH_BUILT = "Built meta-annotation graph over {count} annotation types"

# (H) Rule logs
EVALUATING_RULE = "Evaluating rule '{rule}' against {count} {subject}"
RULE_RESULT = "Rule '{rule}' produced {count} violations"
PARALLEL_EVALUATION = "Evaluating {count} elements with {workers} workers"

# (H) Timing logs
FUNC_TIMING = "{func} took {time:.2f} ms"

# (H) CLI logs
CHECK_FAILED = "Check run failed: {error}"
SCAN_FAILED = "Scan failed: {error}"
